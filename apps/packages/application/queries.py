"""Read-side queries for travel packages."""

from django.db import transaction  # type: ignore

from shared.domain.exceptions import NotFound
from apps.bookings.domain.entities import Booking
from apps.packages.domain.entities import PackageSummary, TravelPackage


class PackageQueries:

    def __init__(self, package_repo, booking_repo):
        self.package_repo = package_repo
        self.booking_repo = booking_repo

    def get_package(self, package_id: int) -> TravelPackage:
        package = self.package_repo.get_by_id(package_id)
        if not package:
            raise NotFound("TravelPackage", package_id)
        return package

    def list_packages(self) -> list[TravelPackage]:
        return self.package_repo.list_all()

    def list_package_bookings(self, package_id: int) -> list[Booking]:
        """Member bookings in the order they were added"""
        with transaction.atomic():
            if not self.package_repo.exists(package_id):
                raise NotFound("TravelPackage", package_id)
            bookings = []
            for booking_id in self.package_repo.member_booking_ids(package_id):
                booking = self.booking_repo.get_by_id(booking_id)
                if booking:
                    bookings.append(booking)
        return bookings

    def package_summary(self, package_id: int) -> PackageSummary:
        """
        Discount totals recomputed from current membership and prices

        Cancelled bookings are included in the totals.
        """
        with transaction.atomic():
            summary = self.package_repo.summary(package_id)
        if not summary:
            raise NotFound("TravelPackage", package_id)
        return summary

    def list_package_summaries(self) -> list[PackageSummary]:
        with transaction.atomic():
            return self.package_repo.summaries()
