"""Vehicle rents."""

from __future__ import annotations

from datetime import datetime, timedelta

from carrental.detailed.client import Client
from carrental.detailed.vehicle import Vehicle

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_MINUTES_PER_DAY = 24 * 60


def _now() -> datetime:
    return datetime.now().replace(microsecond=0)


def _format_time(moment: datetime | None) -> str:
    if moment is None:
        return "not-a-date-time"
    month = _MONTHS[moment.month - 1]
    return f"{moment.year:04d}-{month}-{moment.day:02d} {moment:%H:%M:%S}"


class Rent:
    """A vehicle rented to a client."""

    def __init__(
        self,
        rent_id: int,
        client: Client,
        vehicle: Vehicle,
        begin_time: datetime | None,
    ) -> None:
        self.rent_id = rent_id
        self.client = client
        self.vehicle = vehicle
        self.begin_time = _now() if begin_time is None else begin_time
        self.end_time: datetime | None = None
        self.rent_cost = 0
        client.add_rent(self)
        vehicle.rented = True

    def info(self) -> str:
        """Return the rent's fields followed by client and vehicle info."""
        return (
            f"Rent ID: {self.rent_id}\n"
            f"Begin time: {_format_time(self.begin_time)}\n"
            f"End time: {_format_time(self.end_time)}\n"
            + self.client.info()
            + self.vehicle.info()
        )

    def rent_days(self) -> int:
        """Return 0 if unfinished or under a minute, else one per started 24 hours."""
        if self.end_time is None:
            return 0
        length = self.end_time - self.begin_time
        if length < timedelta(minutes=1):
            return 0
        minutes = int(length.total_seconds() // 60)
        return minutes // _MINUTES_PER_DAY + 1

    def end_rent(self, end_time: datetime | None) -> None:
        """Finish the rent, release the vehicle and compute the cost.

        The end time is set only once and never precedes the begin time.
        """
        if self.end_time is None:
            candidate = _now() if end_time is None else end_time
            self.end_time = max(candidate, self.begin_time)
        self.vehicle.rented = False
        self.client.remove_rent(self)
        self.rent_cost = int(
            self.rent_days() * self.client.apply_discount(self.vehicle.base_price)
        )