"""
URL configuration for product API endpoints.
"""

from django.urls import path

from api.v1.product import views

app_name = "product"

urlpatterns = [
    path(
        "products",
        views.ProductListCreateView.as_view(),
        name="product-list",
    ),
    path(
        "products/<uuid:product_id>",
        views.ProductDetailView.as_view(),
        name="product-detail",
    ),
]
