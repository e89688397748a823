"""Seller API views.

Exposes ``SellerService`` over HTTP.  Domain exceptions are translated
into status codes here; store failures are logged and answered with a
generic 500 so no driver detail reaches the client.
"""

from __future__ import annotations

import structlog
from drf_spectacular.utils import extend_schema
from pydantic import ValidationError as PydanticValidationError
from pymongo.errors import PyMongoError
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.core.store import get_store
from modules.sellers.dtos import SellerCredentialsDTO
from modules.sellers.exceptions import InvalidCredentials, SellerAlreadyExists
from modules.sellers.repositories.mongo_repository import SellerMongoRepository
from modules.sellers.serializers import (
    ErrorSerializer,
    MessageSerializer,
    SellerCredentialsSerializer,
    TokenSerializer,
)
from modules.sellers.services import SellerService

logger = structlog.get_logger(__name__)

CREDENTIALS_REQUIRED = "Username and password are required"


class SellerAPIView(APIView):
    """Base for the public seller endpoints (no authentication)."""

    authentication_classes: list = []
    permission_classes = [AllowAny]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = SellerService(
            repository=SellerMongoRepository(get_store().sellers)
        )

    @staticmethod
    def _credentials(request: Request) -> SellerCredentialsDTO:
        data = request.data if hasattr(request.data, "get") else {}
        return SellerCredentialsDTO(
            username=data.get("username"),
            password=data.get("password"),
        )


class SignupView(SellerAPIView):
    @extend_schema(
        request=SellerCredentialsSerializer,
        responses={201: MessageSerializer, 400: ErrorSerializer, 409: ErrorSerializer},
    )
    def post(self, request: Request) -> Response:
        """POST /api/sellers/signup"""
        try:
            dto = self._credentials(request)
        except PydanticValidationError:
            return Response(
                {"error": CREDENTIALS_REQUIRED},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            self._service.register(dto)
        except SellerAlreadyExists:
            logger.warning("seller.duplicate_username")
            return Response(
                {"error": "Username already exists"},
                status=status.HTTP_409_CONFLICT,
            )
        except PyMongoError:
            logger.exception("seller.register_failed")
            return Response(
                {"error": "Failed to register seller"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(
            {"message": "Seller registered successfully"},
            status=status.HTTP_201_CREATED,
        )


class LoginView(SellerAPIView):
    @extend_schema(
        request=SellerCredentialsSerializer,
        responses={200: TokenSerializer, 400: ErrorSerializer, 401: ErrorSerializer},
    )
    def post(self, request: Request) -> Response:
        """POST /api/sellers/login"""
        try:
            dto = self._credentials(request)
        except PydanticValidationError:
            return Response(
                {"error": CREDENTIALS_REQUIRED},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            token = self._service.login(dto)
        except InvalidCredentials:
            return Response(
                {"error": "Invalid credentials"},
                status=status.HTTP_401_UNAUTHORIZED,
            )
        except PyMongoError:
            logger.exception("seller.login_errored")
            return Response(
                {"error": "Failed to login seller"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response({"token": token})
