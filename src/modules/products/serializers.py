"""Product DRF serializers.

Describe the request and response shapes for the OpenAPI schema.
Business validation lives in the Pydantic DTOs (``dtos.py``).
"""

from __future__ import annotations

from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    """Read/write shape of the Product resource."""

    id = serializers.CharField(read_only=True)
    name = serializers.CharField()
    description = serializers.CharField()


class ProductMessageSerializer(serializers.Serializer):
    message = serializers.CharField()
    product = ProductSerializer()
