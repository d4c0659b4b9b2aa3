# pos/urls.py

from django.urls import re_path

from pos.views import AvailableBatchesView, QuoteView

app_name = "pos"

urlpatterns = [
    re_path(r"^quote/?$", QuoteView.as_view(), name="quote"),
    re_path(r"^batches/?$", AvailableBatchesView.as_view(), name="available-batches"),
]
