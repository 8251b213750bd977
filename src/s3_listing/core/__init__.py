"""Core utilities and shared components for s3-listing-tools."""

from .config import settings
from .exceptions import S3ListingError, ValidationError
from .observability import get_logger, get_tracer

__all__ = ["settings", "S3ListingError", "ValidationError", "get_logger", "get_tracer"]
