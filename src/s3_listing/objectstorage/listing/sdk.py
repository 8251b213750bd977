"""Listing backend built on boto3.

Objects and buckets are rendered in the same line layout the AWS CLI prints,
so both backends feed the same tokenizer.
"""

from datetime import datetime
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from s3_listing.core import get_logger
from s3_listing.core.exceptions import CommandExecutionError
from s3_listing.objectstorage.clients import S3ClientConfig, S3ClientManager

logger = get_logger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _format_timestamp(value: Optional[datetime]) -> str:
    if value is None:
        return "1970-01-01 00:00:00"
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime(TIMESTAMP_FORMAT)


def format_object_line(obj: dict[str, Any]) -> str:
    """Render a list_objects_v2 entry as ``<date> <time> <size> <key>``."""
    return (
        f"{_format_timestamp(obj.get('LastModified'))} "
        f"{obj.get('Size', 0):>10} {obj['Key']}"
    )


def format_bucket_line(bucket: dict[str, Any]) -> str:
    """Render a list_buckets entry as ``<date> <time> <name>``."""
    return f"{_format_timestamp(bucket.get('CreationDate'))} {bucket['Name']}"


class Boto3Backend:
    """Lists buckets and objects through the S3 API."""

    name = "boto3"

    def __init__(self, config: S3ClientConfig):
        """Initialize the boto3 backend.

        Args:
            config: S3 client configuration
        """
        self.client_manager = S3ClientManager(config)

    def ensure_available(self) -> None:
        self.client_manager.check_credentials()

    def list_object_lines(self, bucket: str) -> list[str]:
        """List every object in a bucket.

        Raises:
            CommandExecutionError: If the bucket cannot be listed
        """
        lines = []

        try:
            # Use paginator to handle large numbers of objects
            paginator = self.client_manager.client.get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=bucket):
                for obj in page.get("Contents", []):
                    lines.append(format_object_line(obj))
        except (BotoCoreError, ClientError) as e:
            error_msg = f"Failed to list objects in bucket '{bucket}': {e}"
            logger.error(error_msg, error=str(e))
            raise CommandExecutionError(error_msg)

        logger.info("Bucket listed", bucket=bucket, line_count=len(lines))
        return lines

    def list_bucket_lines(self) -> list[str]:
        """List every bucket visible to the credentials.

        Raises:
            CommandExecutionError: If the buckets cannot be enumerated
        """
        try:
            response = self.client_manager.client.list_buckets()
        except (BotoCoreError, ClientError) as e:
            error_msg = f"Failed to list buckets: {e}"
            logger.error(error_msg, error=str(e))
            raise CommandExecutionError(error_msg)

        lines = [format_bucket_line(bucket) for bucket in response.get("Buckets", [])]
        logger.info("Buckets enumerated", line_count=len(lines))
        return lines
