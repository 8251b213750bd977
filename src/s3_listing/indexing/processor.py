"""Turning one bucket's object listing into directory and file records."""

from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from s3_listing.core import get_logger, get_tracer, settings
from s3_listing.core.exceptions import S3ListingError
from s3_listing.objectstorage.listing import ListingBackend
from s3_listing.output import ListingWriter

from .line_parser import parse_listing_line
from .prefixes import derive_directory_prefixes, is_directory_marker, is_excluded

logger = get_logger(__name__)
tracer = get_tracer(__name__)

ProgressCallback = Callable[[str, int], None]


@dataclass(frozen=True)
class BucketListing:
    """Sorted records and counts for one bucket, before anything is written.

    Attributes:
        bucket: Bucket name
        directories: Sorted, unique directory paths (no bucket, no slash)
        files: Sorted keys of retained files
        files_excluded: Files dropped by the extension filter
        unparsable_lines: Lines that did not match the listing layout
    """

    bucket: str
    directories: list[str]
    files: list[str]
    files_excluded: int
    unparsable_lines: int

    @property
    def records(self) -> list[str]:
        """Directory records first, then file records."""
        return [f"{self.bucket}/{path}/" for path in self.directories] + [
            f"{self.bucket}/{key}" for key in self.files
        ]


@dataclass(frozen=True)
class BucketResult:
    """Outcome of processing one bucket.

    Attributes:
        bucket: Bucket name
        success: Whether the bucket was listed and written
        directories: Unique directories found in this bucket
        files_included: File records written
        files_excluded: Files dropped by the extension filter
        unparsable_lines: Lines that did not match the listing layout
        records_written: Lines appended to the listing file
        error: Reason for failure, empty on success
    """

    bucket: str
    success: bool
    directories: int = 0
    files_included: int = 0
    files_excluded: int = 0
    unparsable_lines: int = 0
    records_written: int = 0
    error: str = ""

    @classmethod
    def failed(cls, bucket: str, error: str) -> "BucketResult":
        return cls(bucket=bucket, success=False, error=error)


@dataclass
class ProgressTracker:
    """Reports each time another ``step`` percent of lines is done."""

    bucket: str
    total: int
    callback: Optional[ProgressCallback] = None
    step: int = 10
    _next: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self._next = self.step

    def update(self, processed: int) -> None:
        if self.total <= 0 or self.step <= 0:
            return
        percent = processed * 100 // self.total
        if percent < self._next:
            return

        # Report the boundary reached, skipping any passed in one jump
        reached = percent - percent % self.step
        self._next = reached + self.step
        logger.debug("Listing progress", bucket=self.bucket, percent=reached)
        if self.callback is not None:
            self.callback(self.bucket, reached)


def build_bucket_listing(
    bucket: str,
    lines: Iterable[str],
    include_files: bool,
    exclude_extensions: frozenset[str] = frozenset(),
    progress: Optional[ProgressTracker] = None,
) -> BucketListing:
    """Aggregate listing lines into sorted directories and files.

    Directories are deduplicated within the bucket only. Keys ending in '/'
    are folder markers and never become file records.
    """
    directories: set[str] = set()
    files: list[str] = []
    files_excluded = 0
    unparsable = 0

    for processed, line in enumerate(lines, start=1):
        entry = parse_listing_line(line)
        if entry is None:
            unparsable += 1
            logger.debug("Skipping unparsable line", bucket=bucket, line=line)
        else:
            directories.update(derive_directory_prefixes(entry.key))

            if include_files and not is_directory_marker(entry.key):
                if is_excluded(entry.key, exclude_extensions):
                    files_excluded += 1
                else:
                    files.append(entry.key)

        if progress is not None:
            progress.update(processed)

    return BucketListing(
        bucket=bucket,
        directories=sorted(directories),
        files=sorted(files),
        files_excluded=files_excluded,
        unparsable_lines=unparsable,
    )


class ListingProcessor:
    """Lists a bucket, aggregates its prefixes and appends the records."""

    def __init__(
        self,
        backend: ListingBackend,
        writer: ListingWriter,
        on_progress: Optional[ProgressCallback] = None,
        progress_step: Optional[int] = None,
    ):
        """Initialize the processor.

        Args:
            backend: Source of listing lines
            writer: Listing file the records are appended to
            on_progress: Called with (bucket, percent) as lines are processed
            progress_step: Percentage between progress reports
        """
        self.backend = backend
        self.writer = writer
        self.on_progress = on_progress
        self.progress_step = progress_step or settings.progress_step

    def process(
        self,
        bucket: str,
        include_files: bool,
        exclude_extensions: frozenset[str] = frozenset(),
    ) -> BucketResult:
        """Process one bucket.

        Listing, access and write errors are logged and returned as a failed
        result so that the remaining buckets still run.

        Args:
            bucket: Bucket name
            include_files: Also write file records
            exclude_extensions: Extensions of files to leave out

        Returns:
            BucketResult for the bucket
        """
        logger.info("Processing bucket", bucket=bucket, include_files=include_files)

        with tracer.start_as_current_span("process_bucket") as span:
            span.set_attribute("s3.bucket", bucket)

            try:
                lines = self.backend.list_object_lines(bucket)
            except Exception as e:
                logger.error("Failed to list bucket", bucket=bucket, error=str(e))
                return BucketResult.failed(bucket, str(e))

            if not lines:
                logger.warning("Bucket is empty or not accessible", bucket=bucket)
                return BucketResult.failed(bucket, "no objects found or access denied")

            progress = ProgressTracker(
                bucket=bucket,
                total=len(lines),
                callback=self.on_progress,
                step=self.progress_step,
            )
            listing = build_bucket_listing(
                bucket, lines, include_files, exclude_extensions, progress
            )

            try:
                written = self.writer.append(listing.records)
            except S3ListingError as e:
                return BucketResult.failed(bucket, str(e))

            result = BucketResult(
                bucket=bucket,
                success=True,
                directories=len(listing.directories),
                files_included=len(listing.files),
                files_excluded=listing.files_excluded,
                unparsable_lines=listing.unparsable_lines,
                records_written=written,
            )
            span.set_attribute("s3_listing.records_written", written)

        logger.info(
            "Bucket processed",
            bucket=bucket,
            directories=result.directories,
            files_included=result.files_included,
            files_excluded=result.files_excluded,
            unparsable_lines=result.unparsable_lines,
        )
        return result
