"""Serializers for persistql."""

from persistql.infrastructure.serializers.json import JsonSerializer

__all__ = ["JsonSerializer"]
