"""Listing backend protocol."""

from typing import Protocol


class ListingBackend(Protocol):
    """Source of raw listing lines for buckets.

    Object lines use the ``<date> <time> <size> <key>`` layout and bucket
    lines end with the bucket name.
    """

    name: str

    def ensure_available(self) -> None:
        """Raise BackendUnavailableError if the backend cannot run at all."""
        ...

    def list_object_lines(self, bucket: str) -> list[str]:
        """Return one line per object in the bucket, recursively."""
        ...

    def list_bucket_lines(self) -> list[str]:
        """Return one line per bucket visible to the credentials."""
        ...
