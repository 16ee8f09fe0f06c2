from decimal import Decimal

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("customers", "0001_initial"),
        ("bookings", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="TravelPackage",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=150)),
                (
                    "discount_percentage",
                    models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=5),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="travel_packages",
                        to="customers.customer",
                    ),
                ),
            ],
            options={
                "verbose_name": "Travel package",
                "verbose_name_plural": "Travel packages",
                "db_table": "travel_packages",
                "ordering": ["id"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("name", ""), _negated=True),
                        name="chk_travel_packages_name_not_empty",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(
                            ("discount_percentage__gte", Decimal("0")),
                            ("discount_percentage__lte", Decimal("100")),
                        ),
                        name="chk_travel_packages_discount_range",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="PackageBooking",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("added_at", models.DateTimeField(auto_now_add=True)),
                (
                    "booking",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="package_memberships",
                        to="bookings.booking",
                    ),
                ),
                (
                    "package",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="memberships",
                        to="packages.travelpackage",
                    ),
                ),
            ],
            options={
                "verbose_name": "Package booking",
                "verbose_name_plural": "Package bookings",
                "db_table": "package_bookings",
                "ordering": ["added_at", "id"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("package", "booking"),
                        name="uq_package_bookings_package_booking",
                    ),
                ],
            },
        ),
        migrations.AddField(
            model_name="travelpackage",
            name="bookings",
            field=models.ManyToManyField(
                blank=True,
                related_name="packages",
                through="packages.PackageBooking",
                to="bookings.booking",
            ),
        ),
    ]
