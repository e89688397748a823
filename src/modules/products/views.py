"""Product API views.

Exposes ``ProductService`` over HTTP.  Reads are public; writes need a
bearer token.  Domain exceptions are caught and translated into HTTP
status codes, and store failures into a logged, generic 500.
"""

from __future__ import annotations

import structlog
from drf_spectacular.utils import extend_schema
from pydantic import ValidationError as PydanticValidationError
from pymongo.errors import PyMongoError
from rest_framework import status
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.core.store import get_store
from modules.products.dtos import ProductInputDTO, ProductOutputDTO
from modules.products.exceptions import ProductNotFound
from modules.products.repositories.mongo_repository import ProductMongoRepository
from modules.products.serializers import ProductMessageSerializer, ProductSerializer
from modules.products.services import ProductService
from modules.sellers.serializers import ErrorSerializer, MessageSerializer

logger = structlog.get_logger(__name__)

FIELDS_REQUIRED = "Product name and description are required"
NOT_FOUND = "Product not found"


class ProductAPIView(APIView):
    """Base for product endpoints.

    Authentication is deferred to the permission check, so safe methods
    never look at the ``Authorization`` header while writes do.
    """

    permission_classes = [IsAuthenticatedOrReadOnly]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(
            repository=ProductMongoRepository(get_store().products)
        )

    def perform_authentication(self, request: Request) -> None:
        pass

    @staticmethod
    def _input(request: Request) -> ProductInputDTO:
        data = request.data if hasattr(request.data, "get") else {}
        return ProductInputDTO(
            name=data.get("name"),
            description=data.get("description"),
        )

    @staticmethod
    def _error(message: str, code: int) -> Response:
        return Response({"error": message}, status=code)


class ProductListCreateView(ProductAPIView):
    @extend_schema(responses={200: ProductSerializer(many=True)})
    def get(self, request: Request) -> Response:
        """GET /api/products"""
        try:
            products = self._service.list_products()
        except PyMongoError:
            logger.exception("product.list_failed")
            return self._error(
                "Failed to fetch products", status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        return Response(
            [ProductOutputDTO.from_entity(p).model_dump() for p in products]
        )

    @extend_schema(
        request=ProductSerializer,
        responses={201: ProductMessageSerializer, 400: ErrorSerializer},
    )
    def post(self, request: Request) -> Response:
        """POST /api/products"""
        try:
            dto = self._input(request)
        except PydanticValidationError:
            return self._error(FIELDS_REQUIRED, status.HTTP_400_BAD_REQUEST)

        try:
            product = self._service.create_product(dto)
        except PyMongoError:
            logger.exception("product.insert_failed")
            return self._error(
                "Failed to insert product", status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return Response(
            {
                "message": "Product added successfully",
                "product": ProductOutputDTO.from_entity(product).model_dump(),
            },
            status=status.HTTP_201_CREATED,
        )


class ProductDetailView(ProductAPIView):
    @extend_schema(
        request=ProductSerializer,
        responses={
            200: ProductMessageSerializer,
            400: ErrorSerializer,
            404: ErrorSerializer,
        },
    )
    def put(self, request: Request, pk: str) -> Response:
        """PUT /api/products/{pk}"""
        try:
            dto = self._input(request)
        except PydanticValidationError:
            return self._error(FIELDS_REQUIRED, status.HTTP_400_BAD_REQUEST)

        try:
            product = self._service.update_product(pk, dto)
        except ProductNotFound:
            return self._error(NOT_FOUND, status.HTTP_404_NOT_FOUND)
        except PyMongoError:
            logger.exception("product.update_failed", product_id=pk)
            return self._error(
                "Failed to update product", status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return Response(
            {
                "message": "Product updated successfully",
                "product": ProductOutputDTO.from_entity(product).model_dump(),
            }
        )

    @extend_schema(responses={200: MessageSerializer, 404: ErrorSerializer})
    def delete(self, request: Request, pk: str) -> Response:
        """DELETE /api/products/{pk}"""
        try:
            self._service.delete_product(pk)
        except ProductNotFound:
            return self._error(NOT_FOUND, status.HTTP_404_NOT_FOUND)
        except PyMongoError:
            logger.exception("product.delete_failed", product_id=pk)
            return self._error(
                "Failed to delete product", status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return Response({"message": "Product deleted successfully"})
