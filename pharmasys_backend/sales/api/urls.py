# sales/api/urls.py

"""
SALES API URLS

Explicit non-PK routes (like "checkout") are registered BEFORE router
URLs so the router never treats them as a <pk>. Every route matches with
or without a trailing slash.

    POST /api/sales/checkout
    GET  /api/sales
    GET  /api/sales/<id>
    POST /api/sales/<id>/void
"""

from django.urls import include, path, re_path
from rest_framework.routers import SimpleRouter

from sales.api.viewsets.sale import SaleViewSet
from sales.views import CheckoutSaleView

app_name = "sales"

router = SimpleRouter(trailing_slash="/?")
router.register(r"sales", SaleViewSet, basename="sale")

urlpatterns = [
    re_path(r"^sales/checkout/?$", CheckoutSaleView.as_view(), name="checkout"),
    path("", include(router.urls)),
]
