"""Observability – structured logging helpers."""
from mp_hashing.observability.logging.filters import SensitiveFieldsFilter
from mp_hashing.observability.logging.factory import JsonLoggerFactory
from mp_hashing.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
