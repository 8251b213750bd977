"""The listing file written for the search tool."""

import os
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional, Union

from s3_listing.core import get_logger
from s3_listing.core.exceptions import OutputError

logger = get_logger(__name__)

OUTPUT_PREFIX = "s3-listing-"


def default_output_path(
    now: Optional[datetime] = None, directory: Union[str, Path] = "."
) -> Path:
    """Build ``s3-listing-YYYYMMDD-HHMMSS.txt`` in the given directory."""
    now = now or datetime.now()
    return Path(directory) / f"{OUTPUT_PREFIX}{now:%Y%m%d-%H%M%S}.txt"


class ListingWriter:
    """Appends records to the listing file, one per line, UTF-8."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def append(self, records: Iterable[str]) -> int:
        """Append records and return how many were written.

        Raises:
            OutputError: If the file cannot be written
        """
        count = 0
        try:
            with open(self.path, "a", encoding="utf-8", newline="\n") as handle:
                for record in records:
                    handle.write(record + "\n")
                    count += 1
        except OSError as e:
            error_msg = f"Failed to write listing file '{self.path}': {e}"
            logger.error(error_msg, error=str(e))
            raise OutputError(error_msg)

        logger.debug("Records appended", path=str(self.path), count=count)
        return count

    def exists_with_content(self) -> bool:
        return self.path.is_file() and self.path.stat().st_size > 0

    def line_count(self) -> int:
        if not self.path.is_file():
            return 0
        with open(self.path, "r", encoding="utf-8") as handle:
            return sum(1 for _ in handle)

    def remove(self) -> None:
        """Delete the listing file if present."""
        try:
            os.remove(self.path)
            logger.info("Listing file removed", path=str(self.path))
        except FileNotFoundError:
            pass
        except OSError as e:
            raise OutputError(f"Failed to remove listing file '{self.path}': {e}")
