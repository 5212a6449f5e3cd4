"""Command that prints a sample car's info and price."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from carrental.compact.address import Address
from carrental.compact.client import Client
from carrental.compact.vehicle import Car, SegmentType


def main(argv: Sequence[str] | None = None) -> int:
    """Build a sample client and car, then print the car's info and price."""
    del argv
    address = Address("Poznan", "Ogrodowa", "17")
    Client("Adam", "Nowak", "123", address, None)
    car = Car("TEST001", 500, 1500, SegmentType.B)
    sys.stdout.write(f"{car.info()}\n{car.actual_rental_price():g}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())