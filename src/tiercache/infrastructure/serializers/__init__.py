"""Serializer implementations."""

from tiercache.infrastructure.serializers.json import JsonSerializer

__all__ = ["JsonSerializer"]
