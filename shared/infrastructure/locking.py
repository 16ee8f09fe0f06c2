"""Row locking helpers shared by the repositories."""

from __future__ import annotations

from django.db import transaction  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore


def lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic().

    Backends without row locks (SQLite) serialize writers on the whole
    database instead, so the queryset is returned unchanged there.
    """

    connection = transaction.get_connection(queryset.db)
    if not connection.in_atomic_block:
        return queryset

    if not connection.features.has_select_for_update:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset
