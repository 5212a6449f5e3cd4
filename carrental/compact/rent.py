"""Vehicle rents charged per started day."""

from __future__ import annotations

from datetime import datetime, timedelta

from carrental.compact.client import Client
from carrental.compact.vehicle import Vehicle

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_MINUTES_PER_DAY = 24 * 60


def _now() -> datetime:
    return datetime.now().replace(microsecond=0)


def _format_time(moment: datetime) -> str:
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
        """Return id, client, vehicle, begin time and end time on one line."""
        end = (
            _format_time(self.end_time)
            if self.end_time is not None
            else "the rental is still on"
        )
        return (
            f"NR.{self.rent_id} CLIENT: {self.client.info()} "
            f"VEHICLE: {self.vehicle.info()} "
            f"BEGIN_TIME: {_format_time(self.begin_time)} END_TIME: {end}"
        )

    def rent_days(self) -> int:
        """Return 0 if unfinished or at most a minute long, else started days."""
        if self.end_time is None:
            return 0
        length = self.end_time - self.begin_time
        if length <= timedelta(minutes=1):
            return 0
        minutes = int(length.total_seconds() // 60)
        days, rest = divmod(minutes, _MINUTES_PER_DAY)
        return days + 1 if rest else days

    def end_rent(self, end_time: datetime | None) -> None:
        """Finish the rent once: release the vehicle and compute the cost.

        Without an end time the current time is used; an end time before
        the begin time is replaced by the begin time.
        """
        if self.end_time is not None:
            return
        if end_time is None:
            self.end_time = _now()
        else:
            self.end_time = end_time if self.begin_time < end_time else self.begin_time
        self.vehicle.rented = False
        self.client.remove_rent(self)
        self.rent_cost = int(self.rent_days() * self.vehicle.actual_rental_price())