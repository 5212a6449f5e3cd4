"""Rentable vehicles and their pricing."""

from __future__ import annotations

from enum import IntEnum


class SegmentType(IntEnum):
    """Car segment; the value is the price multiplier in tenths."""

    A = 10
    B = 11
    C = 12
    D = 13
    E = 15


class Vehicle:
    """A rentable vehicle."""

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

    def actual_rental_price(self) -> int:
        """Return the rental price after vehicle-specific adjustments."""
        return self.base_price

    def info(self) -> str:
        """Return all fields, one per line."""
        return (
            f"Plate number: {self.plate_number}\n"
            f"Base price: {self.base_price}\n"
            f"Rented: {'yes' if self.rented else 'no'}\n"
        )


class Bicycle(Vehicle):
    """A bicycle, priced at its base price."""

    def __init__(self, plate_number: str, base_price: int) -> None:
        super().__init__(plate_number, base_price)


class MotorVehicle(Vehicle):
    """A vehicle with an engine; price grows with engine displacement."""

    def __init__(self, plate_number: str, base_price: int, engine_displacement: int) -> None:
        super().__init__(plate_number, base_price)
        self.engine_displacement = engine_displacement

    def actual_rental_price(self) -> int:
        """Scale the base price from 1.0 below 1000 to 1.5 above 2000."""
        if self.engine_displacement < 1000:
            multiplier = 1.0
        elif self.engine_displacement > 2000:
            multiplier = 1.5
        else:
            scaling = (float(self.engine_displacement) - 1000.0) / 1000.0
            multiplier = 1.0 + 0.5 * scaling
        return int(self.base_price * multiplier)

    def info(self) -> str:
        return super().info() + f"Engine displacement: {self.engine_displacement}\n"


class Moped(MotorVehicle):
    """A moped, priced like any motor vehicle."""

    def __init__(self, plate_number: str, base_price: int, engine_displacement: int) -> None:
        super().__init__(plate_number, base_price, engine_displacement)


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

    def actual_rental_price(self) -> int:
        return super().actual_rental_price() * int(self.segment) // 10

    def info(self) -> str:
        return super().info() + f"Segment type: {int(self.segment)}\n"