from django.urls import include, path

urlpatterns = [
    path("", include("modules.core.urls")),
    # Marketplace API, v1
    path("api/v1/", include("modules.sellers.urls")),
    path("api/v1/", include("modules.customers.urls")),
    path("api/v1/", include("modules.menus.urls")),
    path("api/v1/", include("modules.orders.urls")),
]
