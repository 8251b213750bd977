"""Deriving directory and file records from bucket listings."""

from .line_parser import ListingEntry, parse_bucket_line, parse_listing_line
from .prefixes import (
    derive_directory_prefixes,
    file_extension,
    is_directory_marker,
    is_excluded,
    parse_extension_list,
)
from .processor import (
    BucketListing,
    BucketResult,
    ListingProcessor,
    ProgressTracker,
    build_bucket_listing,
)

__all__ = [
    "BucketListing",
    "BucketResult",
    "ListingEntry",
    "ListingProcessor",
    "ProgressTracker",
    "build_bucket_listing",
    "derive_directory_prefixes",
    "file_extension",
    "is_directory_marker",
    "is_excluded",
    "parse_bucket_line",
    "parse_extension_list",
    "parse_listing_line",
]
