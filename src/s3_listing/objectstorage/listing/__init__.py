"""Object storage listing backends."""

from .aws_cli import AwsCliBackend
from .base import ListingBackend
from .factory import BACKENDS, create_backend
from .sdk import Boto3Backend

__all__ = [
    "AwsCliBackend",
    "BACKENDS",
    "Boto3Backend",
    "ListingBackend",
    "create_backend",
]
