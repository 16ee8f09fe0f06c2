"""Read-side queries for bookings."""

from shared.domain.exceptions import NotFound
from apps.bookings.domain.entities import Booking, BookingDetails


class BookingQueries:

    def __init__(self, booking_repo, customer_repo):
        self.booking_repo = booking_repo
        self.customer_repo = customer_repo

    def get_booking(self, booking_id: int) -> Booking:
        booking = self.booking_repo.get_by_id(booking_id)
        if not booking:
            raise NotFound("Booking", booking_id)
        return booking

    def get_booking_details(self, booking_id: int) -> BookingDetails:
        details = self.booking_repo.get_details(booking_id)
        if not details:
            raise NotFound("Booking", booking_id)
        return details

    def list_bookings(self, customer_id: int | None = None) -> list[BookingDetails]:
        """All bookings with customer contact data, optionally for one customer"""
        if customer_id is not None and not self.customer_repo.exists(customer_id):
            raise NotFound("Customer", customer_id)
        return self.booking_repo.list_details(customer_id)
