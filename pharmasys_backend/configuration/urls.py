# configuration/urls.py

from django.urls import re_path

from .views import SettingsView

app_name = "configuration"

urlpatterns = [
    re_path(r"^settings/?$", SettingsView.as_view(), name="settings"),
]
