"""
URL configuration for storefront pages.
"""

from django.urls import path

from storefront import views

app_name = "storefront"

urlpatterns = [
    path("", views.HomeView.as_view(), name="home"),
    path("brand", views.BrandProductsView.as_view(), name="brand-all"),
    path("brand/<path:brand_name>", views.BrandProductsView.as_view(), name="brand"),
    path("brands", views.BrandDirectoryView.as_view(), name="brands"),
    path("create", views.ProductCreateView.as_view(), name="create"),
    path("read", views.ProductListView.as_view(), name="read"),
    path("edit/<uuid:product_id>", views.ProductEditView.as_view(), name="edit"),
    path("update/<uuid:product_id>", views.ProductUpdateView.as_view(), name="update"),
    path("delete/<uuid:product_id>", views.ProductDeleteView.as_view(), name="delete"),
    path(
        "product-detail/<uuid:product_id>",
        views.ProductDetailView.as_view(),
        name="product-detail",
    ),
    path("about", views.AboutView.as_view(), name="about"),
    path("contact", views.ContactView.as_view(), name="contact"),
]
