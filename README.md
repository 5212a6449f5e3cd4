# carrental

A small model of a vehicle rental business: addresses, clients with
loyalty tiers, several kinds of vehicles with their own pricing rules,
and rents that track begin and end times and work out what the client
pays.

The package holds two variants of the model side by side:

- `carrental.detailed`: multi-line `info()` reports; a rent's cost is
  the rent days times the vehicle's base price with the client's tier
  discount applied.
- `carrental.compact`: one-line `info()` reports; a rent's cost is the
  rent days times the vehicle's `actual_rental_price()`.

Each variant has the modules `address`, `vehicle`, `client_type`,
`client` and `rent`:

- `Address`
- `Vehicle` with `Bicycle`, `MotorVehicle`, `Moped` and `Car`, and the
  `SegmentType` of a car
- `ClientType` tiers: `Default`, `Bronze`, `Silver`, `Gold`, `Platinum`,
  `Diamond`
- `Client`
- `Rent`

Alongside them are `carrental.intro.factorial(n)` and
`carrental.typecheck.is_type_of(obj, cls)`, which is `False` for `None`
and otherwise `isinstance(obj, cls)`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Pricing rules

Motor vehicles cost more the bigger the engine. Up to 1000 the base
price applies and above 2000 it is multiplied by 1.5. In between, the
detailed variant raises the multiplier linearly and truncates the price
to a whole number. The compact variant adds 0.0005 per unit above 1000
and keeps the fraction.

A car's price is further scaled by its segment: A ×1.0, B ×1.1, C ×1.2,
D ×1.3, E ×1.5. Bicycles and mopeds use the plain rule for their kind.

Client tiers report how many vehicles may be rented at once and discount
a price:

| Tier     | `max_vehicles()` | `apply_discount(price)`                             |
|----------|------------------|-----------------------------------------------------|
| Default  | 1                | unchanged                                           |
| Bronze   | 2                | minus 3                                             |
| Silver   | 3                | minus 6                                             |
| Gold     | 4                | 5 % off                                             |
| Platinum | 5                | 10 % off                                            |
| Diamond  | 10               | 10 % up to 125, 20 % up to 250, 30 % up to 500, 40 % above |

The vehicle limit is only reported. Creating a rent does not check it.

## Rents

Creating a `Rent` adds it to the client's `current_rents` and marks the
vehicle as rented. If no begin time is given, it uses the current time.

`end_rent(end_time)` does the following:

- It sets the end time. With no end time it uses the current time, and
  an end time before the begin time becomes the begin time.
- It releases the vehicle.
- It removes the rent from the client.
- It stores the cost in `rent_cost`.

An unfinished rent has 0 rent days. The two variants count the days of
a finished rent differently.

In `carrental.detailed`:

- A rent shorter than a minute counts 0 days.
- Otherwise one day is counted for every started 24 hours, so exactly
  24 hours counts 2.
- The end time is set only on the first call.
- The cost uses `client.apply_discount`, so the client needs a tier.
  Without one, `ValueError` is raised.

In `carrental.compact`:

- A rent of a minute or less counts 0 days.
- Otherwise the days are rounded up, so exactly 24 hours counts 1.
- A second call to `end_rent` changes nothing.

## Example

```python
from datetime import datetime, timedelta

from carrental.detailed.address import Address
from carrental.detailed.client import Client
from carrental.detailed.client_type import Bronze
from carrental.detailed.rent import Rent
from carrental.detailed.vehicle import Car, SegmentType

address = Address("Springfield", "Main Street", "1")
client = Client("Jan", "Example", "000000", address, Bronze())
car = Car("TEST 0001", 500, 1500, SegmentType.B)

print(car.actual_rental_price())

start = datetime(2024, 5, 13, 9, 0)
rent = Rent(1, client, car, start)
rent.end_rent(start + timedelta(hours=30))
print(rent.rent_days())   # 2
print(rent.rent_cost)
print(rent.info())
```

## Commands

```
carrental-intro
```

Prints a greeting followed by the factorials of 1 to 5.

```
carrental-demo
```

Builds a sample client and car from `carrental.compact`. It prints the
car's `info()` and its actual rental price.

## What it does not do

The package is an in-memory object model only:

- It does not store clients, vehicles or rents anywhere.
- It does not look them up by id.
- It does not enforce tier vehicle limits.
- It has no command for managing rentals. The two commands above only
  print fixed sample output.