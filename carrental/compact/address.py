"""Postal address with guarded updates."""

from __future__ import annotations


class Address:
    """A physical postal address whose fields can never become empty."""

    def __init__(self, city: str, street: str, house_number: str) -> None:
        self._city = city
        self._street = street
        self._house_number = house_number

    @property
    def city(self) -> str:
        return self._city

    @city.setter
    def city(self, value: str) -> None:
        if value:
            self._city = value

    @property
    def street(self) -> str:
        return self._street

    @street.setter
    def street(self, value: str) -> None:
        if value:
            self._street = value

    @property
    def house_number(self) -> str:
        return self._house_number

    @house_number.setter
    def house_number(self, value: str) -> None:
        if value:
            self._house_number = value

    def info(self) -> str:
        """Return city, street and house number separated by spaces."""
        return f"{self.city} {self.street} {self.house_number}"

    def __repr__(self) -> str:
        return (
            f"Address(city={self.city!r}, street={self.street!r}, "
            f"house_number={self.house_number!r})"
        )