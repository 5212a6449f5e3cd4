"""Rentable vehicles with fractional rental prices."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum

__all__ = ["SegmentType", "Vehicle", "Bicycle", "MotorVehicle", "Moped", "Car"]

_DISPLACEMENT_STEP = 0.0005


class SegmentType(IntEnum):
    """Car segment; the value is the price multiplier in tenths."""

    A = 10
    B = 11
    C = 12
    D = 13
    E = 15


class Vehicle(ABC):
    """A rentable vehicle; concrete kinds decide the rental price."""

    def __init__(self, plate_number: str, base_price: int) -> None:
        self._plate_number = plate_number
        self.base_price = base_price
        self.rented = False

    @property
    def plate_number(self) -> str:
        return self._plate_number

    @plate_number.setter
    def plate_number(self, value: str) -> None:
        if value:
            self._plate_number = value

    @abstractmethod
    def actual_rental_price(self) -> float:
        """Return the daily rental price; the base price unless adjusted."""
        return float(self.base_price)

    def info(self) -> str:
        """Return plate number and base price separated by a space."""
        return f"{self.plate_number} {self.base_price}"


class Bicycle(Vehicle):
    """A bicycle, priced at its base price."""

    def __init__(self, plate_number: str, base_price: int) -> None:
        super().__init__(plate_number, base_price)

    def actual_rental_price(self) -> float:
        return super().actual_rental_price()


class MotorVehicle(Vehicle):
    """A vehicle with an engine; price grows with engine displacement."""

    def __init__(self, plate_number: str, base_price: int, engine_displacement: int) -> None:
        super().__init__(plate_number, base_price)
        self.engine_displacement = engine_displacement

    @abstractmethod
    def actual_rental_price(self) -> float:
        """Scale the base price by 0.0005 per unit above 1000, capped at 1.5."""
        multiplier = 1.0
        if 1000 < self.engine_displacement <= 2000:
            for _ in range(self.engine_displacement - 1000):
                multiplier += _DISPLACEMENT_STEP
        elif self.engine_displacement > 2000:
            multiplier = 1.5
        return super().actual_rental_price() * multiplier

    def info(self) -> str:
        return f"{super().info()} {self.engine_displacement}"


class Moped(MotorVehicle):
    """A moped, priced like any motor vehicle."""

    def __init__(self, plate_number: str, base_price: int, engine_displacement: int) -> None:
        super().__init__(plate_number, base_price, engine_displacement)

    def actual_rental_price(self) -> float:
        return super().actual_rental_price()


class Car(MotorVehicle):
    """A car whose price is further scaled by its segment."""

    def __init__(
        self,
        plate_number: str,
        base_price: int,
        engine_displacement: int,
        segment: SegmentType,
    ) -> None:
        super().__init__(plate_number, base_price, engine_displacement)
        self.segment = SegmentType(segment)

    def actual_rental_price(self) -> float:
        return super().actual_rental_price() * (int(self.segment) / 10)

    def info(self) -> str:
        return f"{super().info()} segment: {int(self.segment)}"