"""Backend selection by name."""

from typing import Optional

from s3_listing.core.exceptions import ValidationError
from s3_listing.objectstorage.clients import S3ClientConfig

from .aws_cli import AwsCliBackend
from .base import ListingBackend
from .sdk import Boto3Backend

BACKENDS = ("aws-cli", "boto3")


def create_backend(
    name: str,
    config: S3ClientConfig,
    timeout: Optional[int] = None,
) -> ListingBackend:
    """Create the named listing backend.

    Raises:
        ValidationError: If the backend name is unknown
    """
    if name == "aws-cli":
        return AwsCliBackend(config, timeout=timeout)
    if name == "boto3":
        return Boto3Backend(config)
    raise ValidationError(
        f"Unknown backend '{name}', must be one of: {', '.join(BACKENDS)}"
    )
