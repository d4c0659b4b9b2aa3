# users/urls.py

from django.urls import re_path

from .views import LoginView, MeView

app_name = "users"

# Routes match with or without a trailing slash.
urlpatterns = [
    # ---------------- PUBLIC AUTH ----------------
    re_path(r"^login/?$", LoginView.as_view(), name="login"),
    # ---------------- AUTHENTICATED ----------------
    re_path(r"^me/?$", MeView.as_view(), name="me"),
]
