"""Rental clients with guarded personal data."""

from __future__ import annotations

from typing import TYPE_CHECKING

from carrental.compact.address import Address
from carrental.compact.client_type import ClientType

if TYPE_CHECKING:
    from carrental.compact.rent import Rent


class Client:
    """A real-world client who rents vehicles."""

    def __init__(
        self,
        first_name: str,
        last_name: str,
        personal_id: str,
        address: Address | None,
        client_type: ClientType | None,
    ) -> None:
        self._first_name = first_name
        self._last_name = last_name
        self._personal_id = personal_id
        self._address = address
        self.client_type = client_type
        self._current_rents: list[Rent] = []

    @property
    def first_name(self) -> str:
        return self._first_name

    @first_name.setter
    def first_name(self, value: str) -> None:
        if value:
            self._first_name = value

    @property
    def last_name(self) -> str:
        return self._last_name

    @last_name.setter
    def last_name(self, value: str) -> None:
        if value:
            self._last_name = value

    @property
    def personal_id(self) -> str:
        return self._personal_id

    @property
    def address(self) -> Address | None:
        return self._address

    @address.setter
    def address(self, value: Address | None) -> None:
        if value is not None:
            self._address = value

    @property
    def current_rents(self) -> tuple[Rent, ...]:
        """The rents this client currently holds, oldest first."""
        return tuple(self._current_rents)

    def info(self) -> str:
        """Return names, personal id and address separated by spaces."""
        parts = [self.first_name, self.last_name, self.personal_id]
        if self.address is not None:
            parts.append(self.address.info())
        return " ".join(parts)

    def full_info(self) -> str:
        """Return info() and the info of every current rent, one per line."""
        lines = [self.info(), *(rent.info() for rent in self._current_rents)]
        return "".join(f"{line}\n" for line in lines)

    def add_rent(self, rent: Rent) -> None:
        """Record a new rent for this client."""
        self._current_rents.append(rent)

    def remove_rent(self, rent: Rent) -> None:
        """Drop every occurrence of the given rent."""
        self._current_rents = [held for held in self._current_rents if held is not rent]

    def apply_discount(self, price: float) -> float:
        """Return the price discounted according to the client's tier."""
        if self.client_type is None:
            raise ValueError("client has no client type")
        return self.client_type.apply_discount(price)