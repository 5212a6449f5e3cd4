"""Client loyalty tiers and their discount policies."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ClientType(ABC):
    """A client tier: vehicle limit and discount policy."""

    @abstractmethod
    def max_vehicles(self) -> int:
        """Return how many vehicles a client may rent at once."""

    @abstractmethod
    def apply_discount(self, price: float) -> float:
        """Return the price after this tier's discount."""

    def info(self) -> str:
        """Return a short description of the tier."""
        return f"Max vehicles: {self.max_vehicles()}\n"


class Default(ClientType):
    def max_vehicles(self) -> int:
        return 1

    def apply_discount(self, price: float) -> float:
        return price


class Bronze(ClientType):
    def max_vehicles(self) -> int:
        return 2

    def apply_discount(self, price: float) -> float:
        return price - 3


class Silver(ClientType):
    def max_vehicles(self) -> int:
        return 3

    def apply_discount(self, price: float) -> float:
        return price - 6


class Gold(ClientType):
    def max_vehicles(self) -> int:
        return 4

    def apply_discount(self, price: float) -> float:
        return price * 0.95


class Platinum(ClientType):
    def max_vehicles(self) -> int:
        return 5

    def apply_discount(self, price: float) -> float:
        return price * 0.9


class Diamond(ClientType):
    def max_vehicles(self) -> int:
        return 10

    def apply_discount(self, price: float) -> float:
        if 0 < price <= 125:
            multiplier = 0.9
        elif 125 < price <= 250:
            multiplier = 0.8
        elif 250 < price <= 500:
            multiplier = 0.7
        elif price > 500:
            multiplier = 0.6
        else:
            multiplier = 1.0
        return price * multiplier