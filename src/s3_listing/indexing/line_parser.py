"""Tokenizer for object and bucket listing lines.

Object listings follow the layout printed by ``aws s3 ls --recursive``::

    2024-01-01 10:00:00        123 photos/2024/img1.jpg

Anything that does not match is reported as unparsable rather than raising,
since backends occasionally interleave warnings or ``PRE`` lines. Size and
key are separated by exactly one space, so a key keeps its own leading spaces.
"""

import re
from dataclasses import dataclass
from typing import Optional

_LISTING_LINE = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})\s+"
    r"(?P<time>\d{2}:\d{2}:\d{2})\s+"
    r"(?P<size>\d+) "
    r"(?P<key>.+)$"
)


@dataclass(frozen=True)
class ListingEntry:
    """One object from a recursive listing.

    Attributes:
        date: Last-modified date as printed by the backend
        time: Last-modified time as printed by the backend
        size: Object size in bytes
        key: Full object key, interior spaces preserved
    """

    date: str
    time: str
    size: int
    key: str


def parse_listing_line(line: str) -> Optional[ListingEntry]:
    """Parse a listing line into a ListingEntry.

    Args:
        line: Raw line from the backend

    Returns:
        The parsed entry, or None when the line does not match the layout
    """
    match = _LISTING_LINE.match(line.strip("\r\n").lstrip())
    if match is None:
        return None

    return ListingEntry(
        date=match.group("date"),
        time=match.group("time"),
        size=int(match.group("size")),
        key=match.group("key"),
    )


def parse_bucket_line(line: str) -> Optional[str]:
    """Return the bucket name from a bucket enumeration line.

    The name is the last whitespace-delimited token.
    """
    tokens = line.split()
    if not tokens:
        return None
    return tokens[-1]
