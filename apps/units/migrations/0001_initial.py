from decimal import Decimal

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("users", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Unit",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "number_of_rooms",
                    models.PositiveSmallIntegerField(
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(20),
                        ]
                    ),
                ),
                (
                    "accommodation_type",
                    models.CharField(
                        choices=[("HOUSE", "House"), ("FLAT", "Flat"), ("APARTMENTS", "Apartments")],
                        max_length=20,
                    ),
                ),
                (
                    "floor",
                    models.SmallIntegerField(
                        validators=[
                            django.core.validators.MinValueValidator(-5),
                            django.core.validators.MaxValueValidator(100),
                        ]
                    ),
                ),
                (
                    "base_cost",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Nightly cost before markup.",
                        max_digits=10,
                        validators=[
                            django.core.validators.MinValueValidator(Decimal("1.00")),
                            django.core.validators.MaxValueValidator(Decimal("100000.00")),
                        ],
                    ),
                ),
                ("description", models.TextField(blank=True, default="", max_length=1000)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="units",
                        to="users.user",
                    ),
                ),
            ],
            options={
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["accommodation_type", "number_of_rooms"], name="units_type_rooms_idx"),
                    models.Index(fields=["base_cost"], name="units_base_cost_idx"),
                ],
            },
        ),
    ]
