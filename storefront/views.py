"""
Storefront views.

Server-rendered pages for browsing and managing the catalog. Views are
synchronous and run the async application handlers with async_to_sync.
"""

import logging
import uuid

from asgiref.sync import async_to_sync
from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views import View
from django.views.generic import TemplateView

from brands.application.handlers.list_brands_handler import ListBrandsHandler
from brands.application.queries.list_brands import ListBrandsQuery
from brands.application.services.logo_service import get_brand_logo_service
from core.domain.exceptions import DomainException, ProductNotFoundError
from core.instrumentation import get_tracer
from products.application.commands.create_product import CreateProductCommand
from products.application.commands.delete_product import DeleteProductCommand
from products.application.commands.update_product import UpdateProductCommand
from products.application.handlers.product_handlers import (
    CreateProductHandler,
    DeleteProductHandler,
    GetProductHandler,
    ListProductsHandler,
    UpdateProductHandler,
)
from products.application.queries.get_product import GetProductQuery
from products.application.queries.list_products import ListProductsQuery
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)
from products.infrastructure.storage.file_system_image_storage import FileSystemImageStorage
from storefront.forms import ProductEditForm, ProductForm

logger = logging.getLogger(__name__)

# Initialize adapters (in production, use DI container)
_product_repo = DjangoProductRepository()
_image_storage = FileSystemImageStorage()

tracer = get_tracer(__name__)


class CatalogView(View):
    """
    Base view for catalog pages.

    Missing products become 404 responses. Other domain errors render
    the error page with ``error_message`` and status 500.
    """

    error_message = "Server error"

    def dispatch(self, request: HttpRequest, *args, **kwargs) -> HttpResponse:
        try:
            return super().dispatch(request, *args, **kwargs)
        except ProductNotFoundError as e:
            raise Http404(e.message) from e
        except DomainException as e:
            logger.error(
                "%s: %s",
                self.error_message,
                e.message,
                extra={"path": request.path, "code": e.code},
                exc_info=True,
            )
            return render(
                request,
                "storefront/error.html",
                {"message": self.error_message},
                status=500,
            )

    def list_products(self, brand=None):
        handler = ListProductsHandler(
            product_repository=_product_repo,
            image_storage=_image_storage,
            logo_service=get_brand_logo_service(),
        )
        return async_to_sync(handler.handle)(ListProductsQuery(brand=brand))

    def get_product(self, product_id: uuid.UUID):
        handler = GetProductHandler(
            product_repository=_product_repo,
            image_storage=_image_storage,
            logo_service=get_brand_logo_service(),
        )
        return async_to_sync(handler.handle)(GetProductQuery(product_id=product_id))

    def list_brands(self):
        handler = ListBrandsHandler(
            product_repository=_product_repo,
            logo_service=get_brand_logo_service(),
        )
        return async_to_sync(handler.handle)(ListBrandsQuery())


class HomeView(CatalogView):
    """Home page: every brand with product count and logo."""

    def get(self, request):
        with tracer.start_as_current_span("home_page") as span:
            brands = self.list_brands()
            span.set_attribute("brands.count", len(brands))
        return render(request, "storefront/index.html", {"brands": brands})


class BrandProductsView(CatalogView):
    """Products of one brand, or all products when no brand is given."""

    def get(self, request, brand_name=None):
        with tracer.start_as_current_span("brand_page") as span:
            if brand_name is not None:
                span.set_attribute("brand", brand_name)
            products = self.list_products(brand=brand_name)
            span.set_attribute("products.count", len(products))

        context = {"brand": brand_name, "products": products}
        if brand_name is not None:
            context["brand_logo"] = get_brand_logo_service().logo_for(brand_name)
        return render(request, "storefront/brand.html", context)


class BrandDirectoryView(CatalogView):
    """Directory of all brands."""

    def get(self, request):
        return render(request, "storefront/brands.html", {"brands": self.list_brands()})


class ProductCreateView(CatalogView):
    """Product creation form."""

    error_message = "Error uploading product"

    def get(self, request):
        return render(request, "storefront/create.html", {"form": ProductForm()})

    def post(self, request):
        form = ProductForm(request.POST, request.FILES)
        if not form.is_valid():
            return render(request, "storefront/create.html", {"form": form}, status=400)

        with tracer.start_as_current_span("create_product") as span:
            data = form.cleaned_data
            handler = CreateProductHandler(
                product_repository=_product_repo,
                image_storage=_image_storage,
                logo_service=get_brand_logo_service(),
            )
            product = async_to_sync(handler.handle)(
                CreateProductCommand(
                    name=data["name"],
                    description=data["description"],
                    price=data["price"],
                    brand=data["brand"],
                    image=data["image"],
                )
            )
            span.set_attribute("product.id", str(product.id))
        return redirect("storefront:create")


class ProductListView(CatalogView):
    """Product table with edit and delete links."""

    def get(self, request):
        return render(request, "storefront/read.html", {"products": self.list_products()})


class ProductEditView(CatalogView):
    """Edit form for one product."""

    def get(self, request, product_id):
        product = self.get_product(product_id)
        form = ProductEditForm(
            initial={
                "name": product.name,
                "description": product.description,
                "price": product.price,
                "brand": product.brand,
            }
        )
        return render(request, "storefront/edit.html", {"product": product, "form": form})


class ProductUpdateView(CatalogView):
    """Apply an edit; the image is replaced only when a new file is uploaded."""

    error_message = "Server Error"

    def post(self, request, product_id):
        form = ProductEditForm(request.POST, request.FILES)
        if not form.is_valid():
            product = self.get_product(product_id)
            return render(
                request,
                "storefront/edit.html",
                {"product": product, "form": form},
                status=400,
            )

        with tracer.start_as_current_span("update_product") as span:
            span.set_attribute("product.id", str(product_id))
            data = form.cleaned_data
            handler = UpdateProductHandler(
                product_repository=_product_repo,
                image_storage=_image_storage,
                logo_service=get_brand_logo_service(),
            )
            async_to_sync(handler.handle)(
                UpdateProductCommand(
                    product_id=product_id,
                    name=data["name"],
                    description=data["description"],
                    price=data["price"],
                    brand=data["brand"],
                    image=data["imageFile"],
                )
            )
        return redirect("storefront:read")


class ProductDeleteView(CatalogView):
    """Delete a product and go back to the product table."""

    def get(self, request, product_id):
        with tracer.start_as_current_span("delete_product") as span:
            span.set_attribute("product.id", str(product_id))
            handler = DeleteProductHandler(product_repository=_product_repo)
            async_to_sync(handler.handle)(DeleteProductCommand(product_id=product_id))
        return redirect("storefront:read")


class ProductDetailView(CatalogView):
    """One product with its brand logo."""

    def get(self, request, product_id):
        product = self.get_product(product_id)
        return render(request, "storefront/product_detail.html", {"product": product})


class AboutView(TemplateView):
    template_name = "storefront/about.html"


class ContactView(TemplateView):
    template_name = "storefront/contact.html"
