"""API views for travel packages."""

from __future__ import annotations

from rest_framework import status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.bookings.serializers import BookingSerializer
from config.bootstrap import get_core

from .application.command_handlers import (
    AddBookingToPackageCommand,
    CreatePackageCommand,
    DeletePackageCommand,
    RemoveBookingFromPackageCommand,
    UpdatePackageCommand,
)
from .serializers import (
    MembershipInputSerializer,
    MembershipSerializer,
    PackageCreateSerializer,
    PackageSerializer,
    PackageSummarySerializer,
    PackageUpdateSerializer,
)


class PackageViewSet(viewsets.ViewSet):
    """Packages, their membership and their discount summaries."""

    lookup_value_regex = r"[0-9]+"

    def list(self, request):  # type: ignore
        return Response(PackageSerializer(get_core().packages.list_packages(), many=True).data)

    def retrieve(self, request, pk=None):  # type: ignore
        return Response(PackageSerializer(get_core().packages.get_package(int(pk))).data)

    def create(self, request):  # type: ignore
        serializer = PackageCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        package = get_core().handle(CreatePackageCommand(**serializer.validated_data))
        return Response(PackageSerializer(package).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, pk=None):  # type: ignore
        serializer = PackageUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        package = get_core().handle(UpdatePackageCommand(package_id=int(pk), **serializer.validated_data))
        return Response(PackageSerializer(package).data)

    def destroy(self, request, pk=None):  # type: ignore
        get_core().handle(DeletePackageCommand(package_id=int(pk)))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["get"])
    def summary(self, request, pk=None):  # type: ignore
        return Response(PackageSummarySerializer(get_core().packages.package_summary(int(pk))).data)

    @action(detail=False, methods=["get"])
    def summaries(self, request):  # type: ignore
        summaries = get_core().packages.list_package_summaries()
        return Response(PackageSummarySerializer(summaries, many=True).data)

    @action(detail=True, methods=["get", "post"])
    def bookings(self, request, pk=None):  # type: ignore
        if request.method == "GET":
            bookings = get_core().packages.list_package_bookings(int(pk))
            return Response(BookingSerializer(bookings, many=True).data)

        serializer = MembershipInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        membership = get_core().handle(
            AddBookingToPackageCommand(package_id=int(pk), booking_id=serializer.validated_data["booking_id"])
        )
        return Response(MembershipSerializer(membership).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["delete"], url_path=r"bookings/(?P<booking_id>[0-9]+)")
    def remove_booking(self, request, pk=None, booking_id=None):  # type: ignore
        get_core().handle(RemoveBookingFromPackageCommand(package_id=int(pk), booking_id=int(booking_id)))
        return Response(status=status.HTTP_204_NO_CONTENT)
