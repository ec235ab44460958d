"""Menu URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.menus.views import MenuViewSet

router = SimpleRouter(trailing_slash=True)
router.register("menus", MenuViewSet, basename="menu")

urlpatterns = router.urls
