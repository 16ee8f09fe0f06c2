"""Integration tests for booking API endpoints."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.customers.models import Customer


class BookingAPITests(APITestCase):
    """Covers creation of both variants, lifecycle actions and deletion."""

    def setUp(self) -> None:
        self.customer = Customer.objects.create(
            name="Aruzhan Bekova",
            email="aruzhan@example.com",
            phone="+77000000002",
            passport_number="N0000002",
        )
        self.list_url = reverse("booking-list")

    def _flight_payload(self, **overrides) -> dict:
        payload = {
            "type": "FLIGHT",
            "customer_id": self.customer.id,
            "booking_date": "2026-06-01",
            "total_price": "750.00",
            "flight_number": "KC901",
            "origin": "ALA",
            "destination": "IST",
        }
        payload.update(overrides)
        return payload

    def _hotel_payload(self, **overrides) -> dict:
        payload = {
            "type": "HOTEL",
            "customer_id": self.customer.id,
            "booking_date": "2026-06-02",
            "total_price": "800.00",
            "hotel_name": "Pera Palace",
            "room_type": "SUITE",
            "nights": 4,
        }
        payload.update(overrides)
        return payload

    def test_create_flight_booking(self) -> None:
        response = self.client.post(self.list_url, self._flight_payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["status"], "PENDING")
        self.assertEqual(response.data["type"], "FLIGHT")
        self.assertEqual(response.data["total_price"], "750.00")
        self.assertEqual(response.data["details"]["seat_class"], "ECONOMY")

    def test_create_hotel_booking(self) -> None:
        response = self.client.post(self.list_url, self._hotel_payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["details"], {"hotel_name": "Pera Palace", "room_type": "SUITE", "nights": 4})

    def test_nights_out_of_range_is_bad_request(self) -> None:
        response = self.client.post(self.list_url, self._hotel_payload(nights=366), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "invalid_input")
        self.assertEqual(response.data["field"], "nights")
        self.assertEqual(Booking.objects.count(), 0)

    def test_missing_variant_field_is_bad_request(self) -> None:
        payload = self._flight_payload()
        payload.pop("origin")
        response = self.client.post(self.list_url, payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["field"], "origin")

    def test_negative_price_is_bad_request(self) -> None:
        response = self.client.post(self.list_url, self._flight_payload(total_price="-1.00"), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["field"], "total_price")

    def test_unknown_customer_is_not_found(self) -> None:
        response = self.client.post(self.list_url, self._flight_payload(customer_id=9999), format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["entity"], "Customer")

    def test_confirm_then_cancel_then_confirm(self) -> None:
        created = self.client.post(self.list_url, self._flight_payload(), format="json").data
        confirm_url = reverse("booking-confirm", args=[created["id"]])
        cancel_url = reverse("booking-cancel", args=[created["id"]])

        response = self.client.post(confirm_url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["status"], "CONFIRMED")

        response = self.client.post(cancel_url)
        self.assertEqual(response.data["status"], "CANCELLED")

        response = self.client.post(confirm_url)
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["error"], "invalid_state_transition")
        self.assertEqual(response.data["current_status"], "CANCELLED")

    def test_cancel_with_stale_expected_status(self) -> None:
        created = self.client.post(self.list_url, self._flight_payload(), format="json").data
        self.client.post(reverse("booking-confirm", args=[created["id"]]))

        response = self.client.post(
            reverse("booking-cancel", args=[created["id"]]),
            {"expected_status": "PENDING"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["current_status"], "CONFIRMED")
        self.assertEqual(Booking.objects.get(pk=created["id"]).status, "CONFIRMED")

    def test_unknown_expected_status_rejected(self) -> None:
        created = self.client.post(self.list_url, self._flight_payload(), format="json").data
        response = self.client.post(
            reverse("booking-confirm", args=[created["id"]]),
            {"expected_status": "LOST"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(Booking.objects.get(pk=created["id"]).status, "PENDING")

    def test_non_numeric_customer_filter_rejected(self) -> None:
        self.client.post(self.list_url, self._hotel_payload(), format="json")
        response = self.client.get(self.list_url, {"customer_id": "abc"})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("customer_id", response.data)

    def test_complete_requires_confirmation(self) -> None:
        created = self.client.post(self.list_url, self._hotel_payload(), format="json").data
        response = self.client.post(reverse("booking-complete", args=[created["id"]]))
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_list_and_retrieve_include_customer(self) -> None:
        created = self.client.post(self.list_url, self._hotel_payload(), format="json").data
        response = self.client.get(self.list_url, {"customer_id": self.customer.id})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]["customer_email"], "aruzhan@example.com")

        response = self.client.get(reverse("booking-detail", args=[created["id"]]))
        self.assertEqual(response.data["customer_name"], "Aruzhan Bekova")
        self.assertEqual(response.data["type"], "HOTEL")

    def test_delete_booking(self) -> None:
        created = self.client.post(self.list_url, self._flight_payload(), format="json").data
        response = self.client.delete(reverse("booking-detail", args=[created["id"]]))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Booking.objects.filter(pk=created["id"]).exists())

        response = self.client.get(reverse("booking-detail", args=[created["id"]]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
