"""Object storage access for S3-compatible services."""

from .clients import S3ClientConfig, S3ClientManager
from .listing import (
    BACKENDS,
    AwsCliBackend,
    Boto3Backend,
    ListingBackend,
    create_backend,
)

__all__ = [
    "AwsCliBackend",
    "BACKENDS",
    "Boto3Backend",
    "ListingBackend",
    "S3ClientConfig",
    "S3ClientManager",
    "create_backend",
]
