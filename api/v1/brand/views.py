"""
Brand API views.

These endpoints expose:
- Brand summaries (products grouped by brand, with logos)
- Single brand logo lookups
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.brand.serializers import BrandLogoSerializer, BrandSummarySerializer
from brands.application.dto.brand_dto import BrandLogoDTO
from brands.application.handlers.list_brands_handler import ListBrandsHandler
from brands.application.queries.list_brands import ListBrandsQuery
from brands.application.services.logo_service import get_brand_logo_service
from brands.domain.logo_resolver import normalize_brand_key
from core.instrumentation import Status, StatusCode, get_tracer
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)

# Initialize repositories (in production, use DI container)
_product_repo = DjangoProductRepository()

tracer = get_tracer(__name__)


class BrandListView(APIView):
    """View for listing brands with logos."""

    @extend_schema(
        operation_id="list_brands",
        summary="List Brands",
        description="Products grouped by brand, sorted by brand name, with a resolved logo.",
        tags=["Brand API"],
        responses={200: BrandSummarySerializer(many=True)},
    )
    def get(self, request: Request) -> Response:
        """List brand summaries."""
        return async_to_sync(self._handle_list_brands)(request)

    async def _handle_list_brands(self, request: Request) -> Response:
        """Async handler for list brands."""
        with tracer.start_as_current_span("list_brands") as span:
            span.set_attribute("operation", "list_brands")

            handler = ListBrandsHandler(
                product_repository=_product_repo,
                logo_service=get_brand_logo_service(),
            )
            result = await handler.handle(ListBrandsQuery())

            span.set_attribute("brands.count", len(result))
            span.set_status(Status(StatusCode.OK))
            return Response(BrandSummarySerializer(result, many=True).data)


class BrandLogoView(APIView):
    """View for resolving a single brand logo."""

    @extend_schema(
        operation_id="resolve_brand_logo",
        summary="Resolve Brand Logo",
        description=(
            "Resolve a brand name to a logo URL or local image path. "
            "Never fails: unknown brands get a synthesized /images/<key>.png path."
        ),
        tags=["Brand API"],
        parameters=[
            OpenApiParameter(
                name="name",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Brand name as typed or stored on a product",
            ),
        ],
        responses={200: BrandLogoSerializer},
    )
    def get(self, request: Request) -> Response:
        """Resolve a brand logo."""
        with tracer.start_as_current_span("resolve_brand_logo") as span:
            name = request.query_params.get("name", "")
            resolution = get_brand_logo_service().resolve(name)

            span.set_attribute("brand", name)
            span.set_attribute("logo.match", resolution.match.value)
            span.set_status(Status(StatusCode.OK))

            dto = BrandLogoDTO(
                name=name,
                normalized_key=normalize_brand_key(name),
                logo=resolution.url,
                match=resolution.match.value,
            )
            return Response(BrandLogoSerializer(dto).data)
