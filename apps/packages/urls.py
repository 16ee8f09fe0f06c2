"""URL routing for travel packages."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import PackageViewSet

router = SimpleRouter()
router.register(r"", PackageViewSet, basename="package")

urlpatterns = [
    path("", include(router.urls)),
]
