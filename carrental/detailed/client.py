"""Rental clients."""

from __future__ import annotations

from typing import TYPE_CHECKING

from carrental.detailed.address import Address
from carrental.detailed.client_type import ClientType

if TYPE_CHECKING:
    from carrental.detailed.rent import Rent


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
        """Return the client's own fields, its tier and its address."""
        parts = [
            f"First name: {self.first_name}\n",
            f"Last name: {self.last_name}\n",
            f"Personal ID: {self.personal_id}\n",
        ]
        if self.client_type is not None:
            parts.append(self.client_type.info())
        if self.address is not None:
            parts.append(self.address.info())
        return "".join(parts)

    def full_info(self) -> str:
        """Return info() followed by the info of every current rent."""
        return self.info() + "".join(rent.info() for rent in self._current_rents)

    def add_rent(self, rent: Rent) -> None:
        """Record a rent that belongs to this client, unless its id is already held."""
        if rent.client is not self:
            return
        if any(held.rent_id == rent.rent_id for held in self._current_rents):
            return
        self._current_rents.append(rent)

    def remove_rent(self, rent: Rent | int) -> None:
        """Drop the first current rent matching the given rent or rent id."""
        rent_id = rent if isinstance(rent, int) else rent.rent_id
        for index, held in enumerate(self._current_rents):
            if held.rent_id == rent_id:
                del self._current_rents[index]
                return

    def _require_type(self) -> ClientType:
        if self.client_type is None:
            raise ValueError("client has no client type")
        return self.client_type

    def max_vehicles(self) -> int:
        """Return how many vehicles the client may rent at once."""
        return self._require_type().max_vehicles()

    def apply_discount(self, price: float) -> float:
        """Return the price discounted according to the client's tier."""
        return self._require_type().apply_discount(price)