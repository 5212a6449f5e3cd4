"""Postal address."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Address:
    """A physical postal address."""

    city: str
    street: str
    number: str

    def info(self) -> str:
        """Return all fields, one per line."""
        return f"City: {self.city}\nStreet: {self.street}\nNumber: {self.number}\n"