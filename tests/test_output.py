"""Tests for the listing file writer."""

from datetime import datetime
from pathlib import Path

import pytest

from s3_listing.core.exceptions import OutputError
from s3_listing.output import ListingWriter, default_output_path


def test_default_output_path():
    """Test the timestamped file name."""
    path = default_output_path(datetime(2024, 3, 5, 7, 8, 9), directory="/data")

    assert path == Path("/data/s3-listing-20240305-070809.txt")


class TestListingWriter:
    """Test appending and inspecting the listing file."""

    def test_append_and_count(self, output_path):
        """Test records are appended one per line across calls."""
        writer = ListingWriter(output_path)

        assert writer.append(["b1/a/", "b1/a/x.txt"]) == 2
        assert writer.append(["b2/c/"]) == 1

        assert output_path.read_bytes() == b"b1/a/\nb1/a/x.txt\nb2/c/\n"
        assert writer.line_count() == 3
        assert writer.exists_with_content() is True

    def test_utf8_records(self, output_path):
        """Test non-ASCII keys are written as UTF-8."""
        writer = ListingWriter(output_path)

        writer.append(["bk/fotos/año/"])

        assert output_path.read_bytes() == "bk/fotos/año/\n".encode("utf-8")

    def test_missing_file(self, output_path):
        """Test a file that was never written."""
        writer = ListingWriter(output_path)

        assert writer.exists_with_content() is False
        assert writer.line_count() == 0
        writer.remove()

    def test_remove(self, output_path):
        writer = ListingWriter(output_path)
        writer.append(["bk/a/"])

        writer.remove()

        assert not output_path.exists()

    def test_append_error(self, temp_dir):
        """Test unwritable paths raise OutputError."""
        writer = ListingWriter(temp_dir / "missing-dir" / "out.txt")

        with pytest.raises(OutputError, match="Failed to write listing file"):
            writer.append(["bk/a/"])
