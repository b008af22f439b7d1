"""
Product API views.

These endpoints let API clients:
- List and create products
- Retrieve, update and delete a product
"""

import uuid

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.product.serializers import (
    ProductDTOSerializer,
    ProductUpdateSerializer,
    ProductWriteSerializer,
)
from brands.application.services.logo_service import get_brand_logo_service
from core.instrumentation import Status, StatusCode, get_tracer
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

# Initialize adapters (in production, use DI container)
_product_repo = DjangoProductRepository()
_image_storage = FileSystemImageStorage()

tracer = get_tracer(__name__)


class ProductListCreateView(APIView):
    """View for listing and creating products."""

    parser_classes = [MultiPartParser, FormParser, JSONParser]

    @extend_schema(
        operation_id="list_products",
        summary="List Products",
        description="List catalog products, newest first. Filter by exact brand with ?brand=.",
        tags=["Product API"],
        parameters=[
            OpenApiParameter(
                name="brand",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Only return products with exactly this brand",
            ),
        ],
        responses={200: ProductDTOSerializer(many=True)},
    )
    def get(self, request: Request) -> Response:
        """List products."""
        return async_to_sync(self._handle_list_products)(request)

    async def _handle_list_products(self, request: Request) -> Response:
        """Async handler for list products."""
        with tracer.start_as_current_span("list_products") as span:
            span.set_attribute("operation", "list_products")

            brand = request.query_params.get("brand")
            if brand is not None:
                span.set_attribute("brand", brand)

            handler = ListProductsHandler(
                product_repository=_product_repo,
                image_storage=_image_storage,
                logo_service=get_brand_logo_service(),
            )
            result = await handler.handle(ListProductsQuery(brand=brand))

            span.set_attribute("products.count", len(result))
            span.set_status(Status(StatusCode.OK))
            return Response(ProductDTOSerializer(result, many=True).data)

    @extend_schema(
        operation_id="create_product",
        summary="Create Product",
        description="Create a product. The image is sent as a multipart file.",
        tags=["Product API"],
        request={"multipart/form-data": ProductWriteSerializer},
        responses={
            201: ProductDTOSerializer,
            400: {"description": "Bad Request"},
            500: {"description": "Image or product could not be stored"},
        },
    )
    def post(self, request: Request) -> Response:
        """Create a product."""
        return async_to_sync(self._handle_create_product)(request)

    async def _handle_create_product(self, request: Request) -> Response:
        """Async handler for create product."""
        with tracer.start_as_current_span("create_product") as span:
            span.set_attribute("operation", "create_product")

            serializer = ProductWriteSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return Response({"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

            data = serializer.validated_data
            span.set_attribute("brand", data["brand"])

            handler = CreateProductHandler(
                product_repository=_product_repo,
                image_storage=_image_storage,
                logo_service=get_brand_logo_service(),
            )
            command = CreateProductCommand(
                name=data["name"],
                description=data["description"],
                price=data["price"],
                brand=data["brand"],
                image=data["image"],
            )
            result = await handler.handle(command)

            span.set_attribute("product.id", str(result.id))
            span.set_status(Status(StatusCode.OK))
            return Response(ProductDTOSerializer(result).data, status=status.HTTP_201_CREATED)


class ProductDetailView(APIView):
    """View for retrieving, updating and deleting one product."""

    parser_classes = [MultiPartParser, FormParser, JSONParser]

    @extend_schema(
        operation_id="get_product",
        summary="Get Product",
        tags=["Product API"],
        responses={200: ProductDTOSerializer, 404: {"description": "Product not found"}},
    )
    def get(self, request: Request, product_id: uuid.UUID) -> Response:
        """Retrieve a product."""
        return async_to_sync(self._handle_get_product)(request, product_id)

    async def _handle_get_product(self, request: Request, product_id: uuid.UUID) -> Response:
        """Async handler for get product."""
        with tracer.start_as_current_span("get_product") as span:
            span.set_attribute("operation", "get_product")
            span.set_attribute("product.id", str(product_id))

            handler = GetProductHandler(
                product_repository=_product_repo,
                image_storage=_image_storage,
                logo_service=get_brand_logo_service(),
            )
            result = await handler.handle(GetProductQuery(product_id=product_id))

            span.set_status(Status(StatusCode.OK))
            return Response(ProductDTOSerializer(result).data)

    @extend_schema(
        operation_id="update_product",
        summary="Update Product",
        description="Edit a product. The stored image is only replaced when a new file is sent.",
        tags=["Product API"],
        request={"multipart/form-data": ProductUpdateSerializer},
        responses={
            200: ProductDTOSerializer,
            400: {"description": "Bad Request"},
            404: {"description": "Product not found"},
        },
    )
    def patch(self, request: Request, product_id: uuid.UUID) -> Response:
        """Update a product."""
        return async_to_sync(self._handle_update_product)(request, product_id)

    async def _handle_update_product(self, request: Request, product_id: uuid.UUID) -> Response:
        """Async handler for update product."""
        with tracer.start_as_current_span("update_product") as span:
            span.set_attribute("operation", "update_product")
            span.set_attribute("product.id", str(product_id))

            serializer = ProductUpdateSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return Response({"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

            data = serializer.validated_data
            handler = UpdateProductHandler(
                product_repository=_product_repo,
                image_storage=_image_storage,
                logo_service=get_brand_logo_service(),
            )
            command = UpdateProductCommand(
                product_id=product_id,
                name=data["name"],
                description=data["description"],
                price=data["price"],
                brand=data["brand"],
                image=data.get("image"),
            )
            result = await handler.handle(command)

            span.set_attribute("image_replaced", command.image is not None)
            span.set_status(Status(StatusCode.OK))
            return Response(ProductDTOSerializer(result).data)

    @extend_schema(
        operation_id="delete_product",
        summary="Delete Product",
        tags=["Product API"],
        responses={204: None, 404: {"description": "Product not found"}},
    )
    def delete(self, request: Request, product_id: uuid.UUID) -> Response:
        """Delete a product."""
        return async_to_sync(self._handle_delete_product)(request, product_id)

    async def _handle_delete_product(self, request: Request, product_id: uuid.UUID) -> Response:
        """Async handler for delete product."""
        with tracer.start_as_current_span("delete_product") as span:
            span.set_attribute("operation", "delete_product")
            span.set_attribute("product.id", str(product_id))

            handler = DeleteProductHandler(product_repository=_product_repo)
            await handler.handle(DeleteProductCommand(product_id=product_id))

            span.set_status(Status(StatusCode.OK))
            return Response(status=status.HTTP_204_NO_CONTENT)
