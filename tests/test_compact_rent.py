from datetime import datetime, timedelta

import pytest
from freezegun import freeze_time

from carrental.compact.address import Address
from carrental.compact.client import Client
from carrental.compact.rent import Rent
from carrental.compact.vehicle import Bicycle

TIME1 = datetime(2020, 5, 13, 9, 25)
TIME2 = datetime(2024, 5, 13, 9, 25)
FROZEN = datetime(2024, 6, 1, 12, 0, 0)


@pytest.fixture
def client():
    return Client("Adam", "Nowak", "123", Address("Poznan", "Ogrodowa", "15"), None)


@pytest.fixture
def vehicle():
    return Bicycle("BIKE01", 100)


def test_constructor(client, vehicle):
    rent = Rent(1, client, vehicle, None)
    assert rent.rent_id == 1
    assert rent.client is client
    assert rent.vehicle is vehicle
    assert vehicle.rented is True


def test_rent_added_to_client(client, vehicle):
    rent = Rent(1, client, vehicle, None)
    assert any(held is rent for held in client.current_rents)


@freeze_time(FROZEN)
def test_default_begin_time(client, vehicle):
    rent = Rent(1, client, vehicle, None)
    assert rent.begin_time == FROZEN


def test_given_begin_time(client, vehicle):
    rent = Rent(1, client, vehicle, TIME1)
    assert rent.begin_time == TIME1


def test_end_rent_updates_client_and_vehicle(client, vehicle):
    assert vehicle.rented is False
    assert len(client.current_rents) == 0
    rent = Rent(1, client, vehicle, None)
    assert vehicle.rented is True
    assert len(client.current_rents) == 1
    rent.end_rent(None)
    assert vehicle.rented is False
    assert len(client.current_rents) == 0


@freeze_time(FROZEN)
def test_default_end_time(client, vehicle):
    rent = Rent(1, client, vehicle, None)
    assert rent.end_time is None
    rent.end_rent(None)
    assert rent.end_time == FROZEN
    assert vehicle.rented is False


def test_end_time_after_begin(client, vehicle):
    rent = Rent(1, client, vehicle, TIME1)
    rent.end_rent(TIME2)
    assert rent.end_time == TIME2
    assert vehicle.rented is False


def test_end_time_before_begin_is_clamped(client, vehicle):
    rent = Rent(1, client, vehicle, TIME2)
    rent.end_rent(TIME1)
    assert rent.end_time == TIME2
    assert vehicle.rented is False


def test_end_time_cannot_be_overwritten(client, vehicle):
    rent = Rent(1, client, vehicle, TIME1)
    rent.end_rent(TIME2)
    assert rent.end_time is not None
    vehicle.rented = True
    rent.end_rent(TIME1)
    assert rent.end_time == TIME2
    assert vehicle.rented is True


@pytest.mark.parametrize(
    ("length", "days"),
    [
        (timedelta(seconds=59), 0),
        (timedelta(minutes=1), 0),
        (timedelta(minutes=1, seconds=1), 1),
        (timedelta(hours=23, minutes=59), 1),
        (timedelta(hours=24), 1),
        (timedelta(hours=24, minutes=1), 2),
    ],
)
def test_rent_days(client, vehicle, length, days):
    rent = Rent(1, client, vehicle, TIME1)
    assert rent.rent_days() == 0
    rent.end_rent(TIME1 + length)
    assert rent.rent_days() == days


def test_rent_cost(client, vehicle):
    cancelled = Rent(1, client, vehicle, TIME1)
    cancelled.end_rent(TIME1 + timedelta(seconds=10))
    assert cancelled.rent_cost == 0

    rent = Rent(1, client, vehicle, TIME1)
    rent.end_rent(TIME1 + timedelta(hours=40))
    assert rent.rent_days() == 2
    assert rent.rent_cost == rent.rent_days() * vehicle.base_price


def test_info_before_and_after_end(client, vehicle):
    rent = Rent(3, client, vehicle, TIME1)
    before = rent.info()
    assert before.startswith(f"NR.3 CLIENT: {client.info()} VEHICLE: {vehicle.info()}")
    assert before.endswith("BEGIN_TIME: 2020-May-13 09:25:00 END_TIME: the rental is still on")
    rent.end_rent(TIME2)
    assert rent.info().endswith("END_TIME: 2024-May-13 09:25:00")