from decimal import Decimal

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("customers", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Booking",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("booking_date", models.DateField()),
                ("total_price", models.DecimalField(decimal_places=2, max_digits=12)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("PENDING", "Pending"),
                            ("CONFIRMED", "Confirmed"),
                            ("CANCELLED", "Cancelled"),
                            ("COMPLETED", "Completed"),
                        ],
                        default="PENDING",
                        max_length=30,
                    ),
                ),
                ("type", models.CharField(choices=[("FLIGHT", "Flight"), ("HOTEL", "Hotel")], max_length=30)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="bookings",
                        to="customers.customer",
                    ),
                ),
            ],
            options={
                "verbose_name": "Booking",
                "verbose_name_plural": "Bookings",
                "db_table": "bookings",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["status"], name="idx_bookings_status"),
                    models.Index(fields=["booking_date"], name="idx_bookings_date"),
                    models.Index(fields=["type"], name="idx_bookings_type"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("total_price__gte", Decimal("0"))),
                        name="chk_bookings_total_price_non_negative",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("status__in", ["PENDING", "CONFIRMED", "CANCELLED", "COMPLETED"])),
                        name="chk_bookings_status_valid",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("type__in", ["FLIGHT", "HOTEL"])),
                        name="chk_bookings_type_valid",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="FlightBooking",
            fields=[
                (
                    "booking",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        primary_key=True,
                        related_name="flight",
                        serialize=False,
                        to="bookings.booking",
                    ),
                ),
                ("flight_number", models.CharField(max_length=20)),
                ("origin", models.CharField(max_length=100)),
                ("destination", models.CharField(max_length=100)),
                (
                    "seat_class",
                    models.CharField(
                        choices=[("ECONOMY", "Economy"), ("BUSINESS", "Business"), ("FIRST_CLASS", "First class")],
                        max_length=30,
                    ),
                ),
            ],
            options={
                "verbose_name": "Flight booking",
                "verbose_name_plural": "Flight bookings",
                "db_table": "flight_bookings",
                "indexes": [
                    models.Index(fields=["flight_number"], name="idx_flight_bookings_number"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("seat_class__in", ["ECONOMY", "BUSINESS", "FIRST_CLASS"])),
                        name="chk_flight_bookings_seat_class_valid",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="HotelBooking",
            fields=[
                (
                    "booking",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        primary_key=True,
                        related_name="hotel",
                        serialize=False,
                        to="bookings.booking",
                    ),
                ),
                ("hotel_name", models.CharField(max_length=150)),
                (
                    "room_type",
                    models.CharField(
                        choices=[
                            ("STANDARD", "Standard"),
                            ("DELUXE", "Deluxe"),
                            ("SUITE", "Suite"),
                            ("PRESIDENTIAL", "Presidential"),
                        ],
                        max_length=50,
                    ),
                ),
                ("nights", models.IntegerField()),
            ],
            options={
                "verbose_name": "Hotel booking",
                "verbose_name_plural": "Hotel bookings",
                "db_table": "hotel_bookings",
                "indexes": [
                    models.Index(fields=["hotel_name"], name="idx_hotel_bookings_name"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("room_type__in", ["STANDARD", "DELUXE", "SUITE", "PRESIDENTIAL"])),
                        name="chk_hotel_bookings_room_type_valid",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("nights__gte", 1), ("nights__lte", 365)),
                        name="chk_hotel_bookings_nights_range",
                    ),
                ],
            },
        ),
    ]
