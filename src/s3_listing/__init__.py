"""Directory and file listings of S3 buckets for desktop search tools.

This package lists S3 buckets (through the AWS CLI or boto3), derives every
directory prefix implied by the object keys, and writes a sorted listing file
with one record per line:

    my-bucket/photos/
    my-bucket/photos/2024/
    my-bucket/photos/2024/img1.jpg

Recommended Usage:
    Run the ``s3-listing`` command, or drive a run from Python:

    >>> from s3_listing import RunConfig, S3ClientConfig, create_backend
    >>> from s3_listing import ListingWriter, default_output_path, run_listing
    >>> backend = create_backend("boto3", S3ClientConfig(aws_profile="archive"))
    >>> config = RunConfig(buckets=("my-bucket",), include_files=True)
    >>> summary = run_listing(config, backend, ListingWriter(default_output_path()))

Advanced Usage:
    The aggregation step works on plain lines and needs no backend:

    >>> from s3_listing.indexing import build_bucket_listing
"""

__version__ = "0.1.0"

from .indexing import (
    BucketResult,
    ListingProcessor,
    build_bucket_listing,
    derive_directory_prefixes,
    parse_listing_line,
)
from .objectstorage import (
    AwsCliBackend,
    Boto3Backend,
    ListingBackend,
    S3ClientConfig,
    create_backend,
)
from .output import ListingWriter, default_output_path
from .runner import RunSummary, resolve_buckets, run_listing
from .schemas import BackendName, MenuExit, RunConfig

__all__ = [
    # Run configuration
    "BackendName",
    "MenuExit",
    "RunConfig",
    # Orchestration
    "RunSummary",
    "resolve_buckets",
    "run_listing",
    # Listing aggregation
    "BucketResult",
    "ListingProcessor",
    "build_bucket_listing",
    "derive_directory_prefixes",
    "parse_listing_line",
    # Backends
    "AwsCliBackend",
    "Boto3Backend",
    "ListingBackend",
    "S3ClientConfig",
    "create_backend",
    # Output
    "ListingWriter",
    "default_output_path",
]
