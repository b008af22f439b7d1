"""
URL configuration for brand API endpoints.
"""

from django.urls import path

from api.v1.brand import views

app_name = "brand"

urlpatterns = [
    path(
        "brands",
        views.BrandListView.as_view(),
        name="brand-list",
    ),
    path(
        "logo",
        views.BrandLogoView.as_view(),
        name="brand-logo",
    ),
]
