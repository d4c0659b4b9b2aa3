# users/staff_urls.py

from rest_framework.routers import SimpleRouter

from .views import UserViewSet

app_name = "staff"

router = SimpleRouter(trailing_slash="/?")
router.register(r"users", UserViewSet, basename="user")

urlpatterns = router.urls
