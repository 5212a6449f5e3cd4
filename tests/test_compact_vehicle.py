import pytest

from carrental.compact.vehicle import (
    Bicycle,
    Car,
    Moped,
    MotorVehicle,
    SegmentType,
    Vehicle,
)


def test_bicycle_constructor():
    bicycle = Bicycle("12345", 1500)
    assert bicycle.plate_number == "12345"
    assert bicycle.base_price == 1500
    assert bicycle.rented is False


def test_bicycle_setters_ignore_empty_plate():
    bicycle = Bicycle("12345", 1500)
    bicycle.plate_number = "67890"
    bicycle.base_price = 4000
    bicycle.plate_number = ""
    assert bicycle.plate_number == "67890"
    assert bicycle.base_price == 4000


def test_rented_flag_can_be_toggled():
    bicycle = Bicycle("12345", 1500)
    bicycle.rented = True
    assert bicycle.rented is True


def test_abstract_vehicles_cannot_be_created():
    with pytest.raises(TypeError):
        Vehicle("12345", 1000)
    with pytest.raises(TypeError):
        MotorVehicle("12345", 1000, 1500)


def test_bicycle_price_is_base_price():
    assert Bicycle("E", 1000).actual_rental_price() == 1000


@pytest.mark.parametrize("displacement", [500, 1000])
def test_small_engine_keeps_base_price(displacement):
    assert Moped("E", 1000, displacement).actual_rental_price() == pytest.approx(1000)


@pytest.mark.parametrize("displacement", [2001, 2500])
def test_large_engine_multiplies_by_one_and_a_half(displacement):
    assert Moped("E", 1000, displacement).actual_rental_price() == pytest.approx(1500)


def test_engine_scaling_is_linear_in_range():
    assert Moped("E", 1000, 2000).actual_rental_price() == pytest.approx(1500)
    assert Moped("E", 1000, 1340).actual_rental_price() == pytest.approx(1170)


@pytest.mark.parametrize(
    ("segment", "factor"),
    [
        (SegmentType.A, 1.0),
        (SegmentType.B, 1.1),
        (SegmentType.C, 1.2),
        (SegmentType.D, 1.3),
        (SegmentType.E, 1.5),
    ],
)
def test_car_price_scaled_by_segment(segment, factor):
    car = Car("E", 1000, 2500, segment)
    assert car.actual_rental_price() == pytest.approx(1000 * 1.5 * factor)


def test_info_strings():
    assert Bicycle("12345", 1500).info() == "12345 1500"
    assert Moped("12345", 1500, 50).info() == "12345 1500 50"
    assert Car("EL12345", 500, 1500, SegmentType.B).info() == "EL12345 500 1500 segment: 11"


def test_car_segment_can_change():
    car = Car("E", 1000, 2500, SegmentType.A)
    car.segment = SegmentType.E
    assert car.segment is SegmentType.E
    assert car.actual_rental_price() == pytest.approx(2250)