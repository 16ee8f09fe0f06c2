"""Serializers for travel packages."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore


class PackageCreateSerializer(serializers.Serializer):
    customer_id = serializers.IntegerField()
    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    discount_percentage = serializers.DecimalField(
        max_digits=None, decimal_places=None, required=False
    )


class PackageUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    discount_percentage = serializers.DecimalField(
        max_digits=None, decimal_places=None, required=False
    )


class MembershipInputSerializer(serializers.Serializer):
    booking_id = serializers.IntegerField()


class PackageSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    customer_id = serializers.IntegerField(read_only=True)
    discount_percentage = serializers.DecimalField(max_digits=5, decimal_places=2, read_only=True)
    created_at = serializers.DateTimeField(read_only=True)


class MembershipSerializer(serializers.Serializer):
    package_id = serializers.IntegerField(read_only=True)
    booking_id = serializers.IntegerField(read_only=True)
    added_at = serializers.DateTimeField(read_only=True)


class PackageSummarySerializer(serializers.Serializer):
    package_id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    customer_id = serializers.IntegerField(read_only=True)
    customer_name = serializers.CharField(read_only=True)
    customer_email = serializers.CharField(read_only=True)
    discount_percentage = serializers.DecimalField(max_digits=5, decimal_places=2, read_only=True)
    booking_count = serializers.IntegerField(read_only=True)
    total_before_discount = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    discount_amount = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    total_after_discount = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
