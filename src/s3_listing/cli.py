"""Command-line interface for s3-listing-tools.

Lists one or more S3 buckets and writes every directory prefix (and,
optionally, every file) to a sorted listing file for a desktop search tool.

Examples:
    s3-listing my-bucket other-bucket
    s3-listing --all-buckets --include-files --exclude tmp,log
    s3-listing --backend boto3 --profile archive --all-buckets
    s3-listing                      (interactive menus)

Exit codes: 0 on success, help, version or a menu exit; 1 when the listing
backend is unavailable, the bucket menu input is invalid, or no bucket
produced any output.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from . import __version__
from .cli_params import (
    all_buckets_option,
    aws_endpoint_url_option,
    aws_profile_option,
    aws_region_option,
    backend_option,
    exclude_option,
    include_files_option,
    output_option,
    timeout_option,
)
from .core import settings
from .core.exceptions import S3ListingError, ValidationError
from .indexing import BucketResult, parse_extension_list
from .objectstorage import S3ClientConfig, create_backend
from .output import ListingWriter, default_output_path
from .prompts import run_menus
from .runner import RunSummary, resolve_buckets, run_listing
from .schemas import BackendName, MenuExit, RunConfig

app = typer.Typer(
    name="s3-listing",
    help="Write a sorted directory/file listing of S3 buckets.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"s3-listing-tools {__version__}")
        raise typer.Exit()


def _print_bucket_start(bucket: str, index: int, total: int) -> None:
    typer.echo(f"[{index}/{total}] {bucket}")


def _print_progress(bucket: str, percent: int) -> None:
    typer.echo(f"    {percent}% processed")


def _print_bucket_done(result: BucketResult) -> None:
    if result.success:
        typer.echo(
            f"    {result.directories:,} directories, "
            f"{result.files_included:,} files, "
            f"{result.files_excluded:,} excluded"
        )
    else:
        typer.echo(f"    Skipped: {result.error}", err=True)


def _print_summary(summary: RunSummary) -> None:
    typer.echo("")
    typer.echo(
        f"Buckets processed: {summary.buckets_succeeded} "
        f"of {summary.buckets_attempted}"
    )
    typer.echo(f"Unique directories: {summary.directories:,}")
    typer.echo(f"Files included: {summary.files_included:,}")
    typer.echo(f"Files excluded: {summary.files_excluded:,}")
    if summary.unparsable_lines:
        typer.echo(f"Unparsable lines skipped: {summary.unparsable_lines:,}")
    typer.echo(f"Total lines: {summary.output_lines:,}")
    typer.echo(f"Output file: {summary.output_path}")

    for result in summary.failed_buckets:
        typer.echo(f"Failed: {result.bucket} ({result.error})", err=True)


@app.command()
def main(
    buckets: Annotated[
        Optional[list[str]],
        typer.Argument(help="Bucket names to list, in order", show_default=False),
    ] = None,
    all_buckets: Annotated[bool, all_buckets_option()] = False,
    include_files: Annotated[bool, include_files_option()] = False,
    exclude: Annotated[Optional[str], exclude_option()] = None,
    backend: Annotated[Optional[BackendName], backend_option()] = None,
    aws_profile: Annotated[Optional[str], aws_profile_option()] = None,
    region_name: Annotated[Optional[str], aws_region_option()] = None,
    endpoint_url: Annotated[Optional[str], aws_endpoint_url_option()] = None,
    output: Annotated[Optional[Path], output_option()] = None,
    timeout: Annotated[int, timeout_option()] = settings.command_timeout,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version.",
        ),
    ] = None,
) -> None:
    """
    List S3 buckets into a sorted directory (and file) listing.

    Without bucket names or --all-buckets, interactive menus ask for the
    listing mode, extensions to exclude and the buckets.
    """
    if buckets and all_buckets:
        raise typer.BadParameter(
            "Give bucket names or --all-buckets, not both.",
            param_hint="'--all-buckets'",
        )

    exclude_extensions = parse_extension_list(exclude) if exclude else None

    client_config = S3ClientConfig(
        region_name=region_name,
        endpoint_url=endpoint_url,
        aws_profile=aws_profile,
    )
    backend_name = backend.value if backend is not None else settings.backend
    try:
        listing_backend = create_backend(backend_name, client_config, timeout=timeout)
    except ValidationError as e:
        raise typer.BadParameter(str(e), param_hint="'--backend' or S3_LISTING_BACKEND")

    try:
        listing_backend.ensure_available()
    except S3ListingError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if buckets or all_buckets:
        config = RunConfig(
            buckets=tuple(buckets or ()),
            all_buckets=all_buckets,
            include_files=include_files,
            exclude_extensions=exclude_extensions or frozenset(),
        )
    else:
        selection = run_menus(include_files, exclude_extensions)
        if isinstance(selection, MenuExit):
            if selection.reason:
                typer.echo(selection.reason, err=selection.code != 0)
            raise typer.Exit(selection.code)
        config = selection

    output_path = output or default_output_path(directory=settings.output_dir)
    if output_path.exists():
        typer.echo(f"Error: output file '{output_path}' already exists", err=True)
        raise typer.Exit(1)

    try:
        resolved = resolve_buckets(config, listing_backend)
    except S3ListingError as e:
        typer.echo(f"Error: failed to enumerate buckets: {e}", err=True)
        raise typer.Exit(1)

    if not resolved:
        typer.echo("Error: no buckets found.", err=True)
        raise typer.Exit(1)

    mode = "directories and files" if config.include_files else "directories"
    typer.echo(f"Listing {mode} of {len(resolved)} bucket(s) via {backend_name}")
    if config.exclude_extensions:
        typer.echo(f"Excluding: {', '.join(sorted(config.exclude_extensions))}")

    try:
        summary = run_listing(
            config,
            listing_backend,
            ListingWriter(output_path),
            buckets=resolved,
            on_bucket_start=_print_bucket_start,
            on_bucket_done=_print_bucket_done,
            on_progress=_print_progress,
        )
    except S3ListingError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not summary.ok:
        typer.echo("Error: no listing data was produced.", err=True)
        raise typer.Exit(1)

    _print_summary(summary)


if __name__ == "__main__":
    app()
