"""Shared CLI parameter definitions.

Each function returns a Typer option to be placed inside an ``Annotated``
type, keeping flag names and help text in one place:

    def command(
        aws_profile: Annotated[Optional[str], aws_profile_option()] = None,
    ):
        ...

Parameter Categories:
    - AWS parameters: credentials, region and endpoint for either backend
    - Listing parameters: what the listing file contains
    - Run parameters: backend choice, output location, timeouts
"""

from typing import Any

import typer


def aws_profile_option() -> Any:
    """AWS profile option."""
    return typer.Option("--profile", help="AWS CLI profile name")


def aws_region_option() -> Any:
    """AWS region option."""
    return typer.Option("--region", help="AWS region name")


def aws_endpoint_url_option() -> Any:
    """AWS endpoint URL option."""
    return typer.Option(
        "--endpoint-url", help="Custom S3 endpoint URL (MinIO, Ceph, Spaces, ...)"
    )


def all_buckets_option() -> Any:
    """Enumerate every bucket option."""
    return typer.Option(
        "--all-buckets",
        "-a",
        help="List every bucket the credentials can see",
    )


def include_files_option() -> Any:
    """Include files option."""
    return typer.Option(
        "--include-files",
        "-f",
        help="Write file records after the directory records of each bucket",
    )


def exclude_option() -> Any:
    """Excluded extensions option."""
    return typer.Option(
        "--exclude",
        "-x",
        help="Comma-separated file extensions to leave out, e.g. 'tmp,log'",
    )


def backend_option() -> Any:
    """Listing backend option."""
    return typer.Option(
        "--backend",
        "-b",
        help="Listing backend: 'aws-cli' (aws s3 ls) or 'boto3'",
        case_sensitive=False,
    )


def output_option() -> Any:
    """Output file option."""
    return typer.Option(
        "--output",
        "-o",
        help="Listing file to write (default: s3-listing-<timestamp>.txt)",
        dir_okay=False,
    )


def timeout_option() -> Any:
    """Timeout option."""
    return typer.Option("--timeout", help="Per-bucket command timeout in seconds")
