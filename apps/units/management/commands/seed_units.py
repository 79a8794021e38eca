"""Populate the catalogue with random demo units."""

from __future__ import annotations

import random
from decimal import Decimal

from django.core.management.base import BaseCommand, CommandError  # type: ignore
from django.db import transaction  # type: ignore

from apps.events.models import EventType
from apps.events.services import record_events_batch
from apps.statistics.cache import availability_cache
from apps.units.models import Unit
from apps.users.models import User

ADJECTIVES = [
    "Cozy", "Spacious", "Modern", "Comfortable", "Luxurious",
    "Bright", "Quiet", "Central", "Beautiful", "Charming",
]
FEATURES = [
    "with balcony", "with city view", "near the park", "with parking",
    "recently renovated", "with garden", "near the metro", "with terrace",
]


class Command(BaseCommand):
    help = "Creates random units until the catalogue holds --target units"

    def add_arguments(self, parser):
        parser.add_argument("--target", type=int, default=100)
        parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible data")

    def handle(self, *args, **options):
        target = options["target"]
        existing = Unit.objects.count()
        if existing >= target:
            self.stdout.write(f"Data already initialized. Found {existing} units in database.")
            return

        owners = list(User.objects.all())
        if not owners:
            raise CommandError("No users found in database. Cannot initialize units.")

        rng = random.Random(options["seed"])
        with transaction.atomic():
            units = Unit.objects.bulk_create(
                [self._random_unit(rng, owners) for _ in range(target - existing)]
            )

        record_events_batch(EventType.UNIT_CREATED, [unit.pk for unit in units])
        availability_cache.invalidate()

        self.stdout.write(
            self.style.SUCCESS(f"Created {len(units)} new units. Total units: {Unit.objects.count()}")
        )

    def _random_unit(self, rng: random.Random, owners: list[User]) -> Unit:
        accommodation_type = rng.choice(Unit.AccommodationType.values)
        rooms = rng.randint(1, 5)
        label = Unit.AccommodationType(accommodation_type).label.lower()
        return Unit(
            number_of_rooms=rooms,
            accommodation_type=accommodation_type,
            floor=rng.randint(1, 10),
            base_cost=Decimal(str(round(rng.uniform(50, 500), 2))).quantize(Decimal("0.01")),
            description=f"{rng.choice(ADJECTIVES)} {rooms}-room {label} {rng.choice(FEATURES)}",
            owner=rng.choice(owners),
        )
