# products/urls.py

"""
PRODUCTS / INVENTORY URLS (mounted at /api/)

Every route matches with or without a trailing slash.
"""

from django.urls import include, path, re_path
from rest_framework.routers import SimpleRouter

from products.views import (
    AdjustmentView,
    BatchListView,
    DashboardView,
    GS1ParseView,
    InventoryExportView,
    InventoryView,
    ProductViewSet,
    ReceiveView,
)

app_name = "products"

router = SimpleRouter(trailing_slash="/?")
router.register(r"products", ProductViewSet, basename="product")

urlpatterns = [
    path("", include(router.urls)),
    re_path(r"^inventory/?$", InventoryView.as_view(), name="inventory"),
    re_path(r"^inventory/batches/?$", BatchListView.as_view(), name="inventory-batches"),
    re_path(r"^inventory/export/?$", InventoryExportView.as_view(), name="inventory-export"),
    re_path(r"^receive/?$", ReceiveView.as_view(), name="receive"),
    re_path(r"^receive/parse-gs1/?$", GS1ParseView.as_view(), name="receive-parse-gs1"),
    re_path(r"^adjustments/?$", AdjustmentView.as_view(), name="adjustments"),
    re_path(r"^dashboard/?$", DashboardView.as_view(), name="dashboard"),
]
