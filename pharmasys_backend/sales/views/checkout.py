# sales/views/checkout.py

"""
POST /api/sales/checkout/

Commits the cart: stock is decremented, the sale and its dispense
records are written, all in one transaction.
"""

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from permissions.roles import CAP_POS_SELL, HasCapability
from sales.serializers import CheckoutInputSerializer, SaleSerializer
from sales.services.checkout import complete_sale


class CheckoutSaleView(APIView):
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_POS_SELL

    @extend_schema(request=CheckoutInputSerializer, responses={201: SaleSerializer})
    def post(self, request):
        serializer = CheckoutInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        result = complete_sale(
            lines=data["lines"],
            payment_method=data["payment_method"],
            cash_received=data.get("cash_received"),
            discount=data["discount"],
            tax=data["tax"],
            patient=data["patient"],
            notes=data["notes"],
            user=request.user,
        )

        return Response(SaleSerializer(result.sale).data, status=status.HTTP_201_CREATED)
