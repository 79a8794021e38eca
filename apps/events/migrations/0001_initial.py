import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "event_type",
                    models.CharField(
                        choices=[
                            ("UNIT_CREATED", "Unit created"),
                            ("BOOKING_CREATED", "Booking created"),
                            ("BOOKING_CONFIRMED", "Booking confirmed"),
                            ("BOOKING_CANCELLED", "Booking cancelled"),
                            ("BOOKING_EXPIRED", "Booking expired"),
                            ("PAYMENT_COMPLETED", "Payment completed"),
                            ("PAYMENT_FAILED", "Payment failed"),
                        ],
                        max_length=100,
                    ),
                ),
                (
                    "entity_type",
                    models.CharField(
                        choices=[("UNIT", "Unit"), ("BOOKING", "Booking"), ("PAYMENT", "Payment")],
                        max_length=50,
                    ),
                ),
                ("entity_id", models.BigIntegerField(blank=True, null=True)),
                ("event_data", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, editable=False)),
            ],
            options={
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["entity_type", "entity_id"], name="events_entity_idx"),
                    models.Index(fields=["event_type", "created_at"], name="events_type_created_idx"),
                ],
            },
        ),
    ]
