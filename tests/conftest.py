"""Test configuration and fixtures for s3-listing-tools."""

import pytest

SCENARIO_LINES = [
    "2024-01-01 10:00:00        123 photos/2024/img1.jpg",
    "2024-01-01 10:01:00        456 photos/2024/img2.tif",
    "2024-01-01 10:02:00        789 docs/readme.txt",
]


class FakeBackend:
    """In-memory listing backend.

    Buckets mapped to an exception raise it when listed.
    """

    name = "fake"

    def __init__(self, buckets=None, bucket_lines=None, available=True):
        self.buckets = buckets or {}
        self.bucket_lines = bucket_lines
        self.available = available
        self.listed = []

    def ensure_available(self):
        from s3_listing.core.exceptions import BackendUnavailableError

        if not self.available:
            raise BackendUnavailableError("fake backend missing")

    def list_object_lines(self, bucket):
        self.listed.append(bucket)
        lines = self.buckets.get(bucket, [])
        if isinstance(lines, Exception):
            raise lines
        return list(lines)

    def list_bucket_lines(self):
        if self.bucket_lines is not None:
            return list(self.bucket_lines)
        return [f"2024-01-01 00:00:00 {name}" for name in self.buckets]


@pytest.fixture
def temp_dir(tmp_path):
    """Create a temporary directory for testing."""
    return tmp_path


@pytest.fixture
def scenario_lines():
    return list(SCENARIO_LINES)


@pytest.fixture
def fake_backend(scenario_lines):
    """Backend with one populated bucket and one empty bucket."""
    return FakeBackend(buckets={"my-bucket": scenario_lines, "empty-bucket": []})


@pytest.fixture
def output_path(temp_dir):
    return temp_dir / "s3-listing-test.txt"


@pytest.fixture
def backend_factory():
    """Build FakeBackend instances with custom contents."""
    return FakeBackend
