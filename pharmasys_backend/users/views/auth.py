import logging

from drf_spectacular.utils import extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView

from common.exceptions import AuthenticationError
from users.serializers import LoginSerializer, TokenSerializer
from users.services import authenticate_credentials
from users.tokens import issue_access_token_string

logger = logging.getLogger(__name__)


class LoginRateThrottle(AnonRateThrottle):
    scope = "login"


# ---------------------------
# VIEWS
# ---------------------------


class LoginView(APIView):
    # Credentials in the body are the only identity here; a stale
    # Authorization header must not turn a login into a 401.
    authentication_classes = []
    permission_classes = [AllowAny]
    throttle_classes = [LoginRateThrottle]
    serializer_class = LoginSerializer

    @extend_schema(
        request=LoginSerializer,
        responses={200: TokenSerializer},
        description="Exchange username + password for a 1-hour bearer token",
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        username = serializer.validated_data["username"]

        try:
            user = authenticate_credentials(
                username=username,
                password=serializer.validated_data["password"],
            )
        except AuthenticationError:
            logger.warning("Rejected login", extra={"username": username})
            raise

        logger.info("Login", extra={"user_id": user.id, "username": user.username})
        return Response({"token": issue_access_token_string(user)})
