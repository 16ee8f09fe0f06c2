"""Serializers for the customer registry.

Input serializers only parse request bodies into command fields; every
business rule is checked by the domain. Output serializers render
Customer dataclasses.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore


class CustomerInputSerializer(serializers.Serializer):
    """Registration payload."""

    name = serializers.CharField(trim_whitespace=False, allow_blank=True)
    email = serializers.CharField(trim_whitespace=False, allow_blank=True)
    phone = serializers.CharField(trim_whitespace=False, allow_blank=True)
    passport_number = serializers.CharField(trim_whitespace=False, allow_blank=True)


class CustomerUpdateSerializer(serializers.Serializer):
    """Partial contact update; omitted fields keep their value."""

    name = serializers.CharField(required=False, trim_whitespace=False, allow_blank=True)
    email = serializers.CharField(required=False, trim_whitespace=False, allow_blank=True)
    phone = serializers.CharField(required=False, trim_whitespace=False, allow_blank=True)
    passport_number = serializers.CharField(required=False, trim_whitespace=False, allow_blank=True)


class CustomerSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    email = serializers.CharField(read_only=True)
    phone = serializers.CharField(read_only=True)
    passport_number = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
