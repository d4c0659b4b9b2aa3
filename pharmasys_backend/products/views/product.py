# products/views/product.py

"""
PRODUCT VIEWSET

GET  /api/products        list (ordered by name; ?code= exact code, ?q= name/code search)
POST /api/products        register a product (no stock)
GET  /api/products/<id>   retrieve
"""

import logging

from drf_spectacular.utils import extend_schema
from rest_framework import mixins, status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from permissions.roles import CAP_INVENTORY_RECEIVE, CAP_INVENTORY_VIEW, HasCapability
from products.filters import ProductFilter
from products.models import Product
from products.serializers import ProductCreateSerializer, ProductSerializer

logger = logging.getLogger(__name__)


class ProductViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    serializer_class = ProductSerializer
    permission_classes = [IsAuthenticated, HasCapability]
    capability_map = {
        "list": CAP_INVENTORY_VIEW,
        "retrieve": CAP_INVENTORY_VIEW,
        "create": CAP_INVENTORY_RECEIVE,
    }
    filterset_class = ProductFilter
    pagination_class = None
    lookup_value_regex = r"\d+"

    def get_queryset(self):
        return Product.objects.order_by("name", "id")

    @extend_schema(request=ProductCreateSerializer, responses={201: ProductSerializer})
    def create(self, request):
        serializer = ProductCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = serializer.save()

        logger.info(
            "Product created",
            extra={
                "product_id": product.id,
                "code_value": product.code_value,
                "created_by": request.user.username,
            },
        )
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)
