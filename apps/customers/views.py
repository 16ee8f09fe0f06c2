"""API views for the customer registry."""

from __future__ import annotations

from rest_framework import status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from config.bootstrap import get_core

from .application.command_handlers import (
    DeleteCustomerCommand,
    RegisterCustomerCommand,
    UpdateCustomerContactCommand,
)
from .serializers import CustomerInputSerializer, CustomerSerializer, CustomerUpdateSerializer


class CustomerViewSet(viewsets.ViewSet):
    """Register, read, update and delete customers."""

    lookup_value_regex = r"[0-9]+"

    def list(self, request):  # type: ignore
        customers = get_core().customers.list_customers()
        return Response(CustomerSerializer(customers, many=True).data)

    def retrieve(self, request, pk=None):  # type: ignore
        customer = get_core().customers.get_customer(int(pk))
        return Response(CustomerSerializer(customer).data)

    def create(self, request):  # type: ignore
        serializer = CustomerInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        customer = get_core().handle(RegisterCustomerCommand(**serializer.validated_data))
        return Response(CustomerSerializer(customer).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, pk=None):  # type: ignore
        serializer = CustomerUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        customer = get_core().handle(
            UpdateCustomerContactCommand(customer_id=int(pk), **serializer.validated_data)
        )
        return Response(CustomerSerializer(customer).data)

    def destroy(self, request, pk=None):  # type: ignore
        get_core().handle(DeleteCustomerCommand(customer_id=int(pk)))
        return Response(status=status.HTTP_204_NO_CONTENT)
