"""Seller URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.sellers.views import SellerViewSet

router = SimpleRouter(trailing_slash=True)
router.register("sellers", SellerViewSet, basename="seller")

urlpatterns = router.urls
