"""Interactive menus used when no buckets are given on the command line.

The menus run as a fixed sequence, each step returning a typed value:
listing mode, then extensions to exclude (file mode only), then the bucket
selection. The sequence ends in either a RunConfig or a MenuExit.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import typer

from s3_listing.core import get_logger
from s3_listing.indexing import parse_extension_list
from s3_listing.schemas import MenuExit, RunConfig

logger = get_logger(__name__)


class ListingMode(str, Enum):
    """What the listing file should contain."""

    DIRECTORIES = "directories"
    DIRECTORIES_AND_FILES = "directories-and-files"


@dataclass(frozen=True)
class BucketChoice:
    """Bucket selection made in the menu."""

    all_buckets: bool
    buckets: tuple[str, ...] = ()


MODE_MENU = """Select listing mode:
  1) Directories only
  2) Directories and files
  3) Exit"""

BUCKET_MENU = """Select buckets:
  1) All buckets
  2) Enter bucket names
  3) Exit"""


def prompt_mode() -> Optional[ListingMode]:
    """Ask for the listing mode, re-asking on invalid input.

    Returns:
        The chosen mode, or None if the user chose to exit
    """
    typer.echo(MODE_MENU)
    while True:
        choice = typer.prompt("Choice", default="", show_default=False).strip()
        if choice == "1":
            return ListingMode.DIRECTORIES
        if choice == "2":
            return ListingMode.DIRECTORIES_AND_FILES
        if choice == "3":
            return None
        typer.echo(f"Invalid choice '{choice}', enter 1, 2 or 3.")


def prompt_exclusions() -> frozenset[str]:
    raw = typer.prompt(
        "Extensions to exclude (comma-separated, e.g. tmp,log; blank for none)",
        default="",
        show_default=False,
    )
    return parse_extension_list(raw)


def prompt_buckets() -> Union[BucketChoice, MenuExit]:
    """Ask which buckets to list.

    Returns:
        BucketChoice, or MenuExit with code 0 for exit and 1 for invalid input
    """
    typer.echo(BUCKET_MENU)
    choice = typer.prompt("Choice", default="", show_default=False).strip()

    if choice == "1":
        return BucketChoice(all_buckets=True)
    if choice == "3":
        return MenuExit(code=0, reason="Exiting.")
    if choice != "2":
        logger.warning("Invalid bucket menu choice", choice=choice)
        return MenuExit(code=1, reason=f"Invalid choice '{choice}'.")

    raw = typer.prompt(
        "Bucket names (comma or space separated)", default="", show_default=False
    )
    names = tuple(dict.fromkeys(raw.replace(",", " ").split()))
    if not names:
        return MenuExit(code=1, reason="No bucket names entered.")
    return BucketChoice(all_buckets=False, buckets=names)


def run_menus(
    include_files: bool = False,
    exclude_extensions: Optional[frozenset[str]] = None,
) -> Union[RunConfig, MenuExit]:
    """Walk the menu sequence.

    Args:
        include_files: Already requested on the command line, skips the mode menu
        exclude_extensions: Already given on the command line, skips that prompt

    Returns:
        RunConfig to run, or MenuExit
    """
    if not include_files:
        mode = prompt_mode()
        if mode is None:
            return MenuExit(code=0, reason="Exiting.")
        include_files = mode is ListingMode.DIRECTORIES_AND_FILES

    if include_files and exclude_extensions is None:
        exclude_extensions = prompt_exclusions()

    selection = prompt_buckets()
    if isinstance(selection, MenuExit):
        return selection

    return RunConfig(
        buckets=selection.buckets,
        all_buckets=selection.all_buckets,
        include_files=include_files,
        exclude_extensions=exclude_extensions or frozenset(),
    )
