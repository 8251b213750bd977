"""Sequential orchestration of a listing run across buckets."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from s3_listing.core import get_logger
from s3_listing.indexing import BucketResult, ListingProcessor, parse_bucket_line
from s3_listing.indexing.processor import ProgressCallback
from s3_listing.objectstorage.listing import ListingBackend
from s3_listing.output import ListingWriter
from s3_listing.schemas import RunConfig

logger = get_logger(__name__)


@dataclass
class RunSummary:
    """Totals for a whole run, summed from per-bucket results."""

    output_path: Path
    results: list[BucketResult] = field(default_factory=list)
    output_lines: int = 0
    ok: bool = False

    @property
    def buckets_attempted(self) -> int:
        return len(self.results)

    @property
    def buckets_succeeded(self) -> int:
        return sum(1 for result in self.results if result.success)

    @property
    def failed_buckets(self) -> list[BucketResult]:
        return [result for result in self.results if not result.success]

    @property
    def directories(self) -> int:
        return sum(result.directories for result in self.results)

    @property
    def files_included(self) -> int:
        return sum(result.files_included for result in self.results)

    @property
    def files_excluded(self) -> int:
        return sum(result.files_excluded for result in self.results)

    @property
    def unparsable_lines(self) -> int:
        return sum(result.unparsable_lines for result in self.results)


def resolve_buckets(config: RunConfig, backend: ListingBackend) -> list[str]:
    """Return the buckets to process, in order.

    Explicit names keep their order with blanks and repeats dropped;
    otherwise every bucket the backend can enumerate is used.

    Raises:
        CommandExecutionError: If bucket enumeration fails
    """
    if config.all_buckets:
        lines = backend.list_bucket_lines()
        names = [parse_bucket_line(line) for line in lines]
    else:
        names = [name.strip() for name in config.buckets]

    buckets = list(dict.fromkeys(name for name in names if name))
    logger.info("Buckets resolved", bucket_count=len(buckets))
    return buckets


def run_listing(
    config: RunConfig,
    backend: ListingBackend,
    writer: ListingWriter,
    buckets: Optional[list[str]] = None,
    on_bucket_start: Optional[Callable[[str, int, int], None]] = None,
    on_bucket_done: Optional[Callable[[BucketResult], None]] = None,
    on_progress: Optional[ProgressCallback] = None,
) -> RunSummary:
    """Process every bucket in turn and decide whether the run produced output.

    A run is ok when at least one bucket succeeded and the listing file is
    non-empty. Otherwise any partial file is removed.

    Args:
        config: What to list
        backend: Source of listing lines
        writer: Listing file
        buckets: Pre-resolved bucket names, resolved from config if omitted
        on_bucket_start: Called with (bucket, index, total) before each bucket
        on_bucket_done: Called with each BucketResult
        on_progress: Called with (bucket, percent) while lines are processed

    Returns:
        RunSummary for the run
    """
    if buckets is None:
        buckets = resolve_buckets(config, backend)

    processor = ListingProcessor(backend, writer, on_progress=on_progress)
    summary = RunSummary(output_path=writer.path)

    for index, bucket in enumerate(buckets, start=1):
        if on_bucket_start is not None:
            on_bucket_start(bucket, index, len(buckets))

        result = processor.process(
            bucket, config.include_files, config.exclude_extensions
        )
        summary.results.append(result)

        if on_bucket_done is not None:
            on_bucket_done(result)

    if summary.buckets_succeeded > 0 and writer.exists_with_content():
        summary.ok = True
        summary.output_lines = writer.line_count()
    else:
        writer.remove()

    logger.info(
        "Listing run finished",
        ok=summary.ok,
        buckets_attempted=summary.buckets_attempted,
        buckets_succeeded=summary.buckets_succeeded,
        directories=summary.directories,
        files_included=summary.files_included,
        files_excluded=summary.files_excluded,
        output_lines=summary.output_lines,
    )
    return summary
