"""Tests for the AWS CLI and boto3 listing backends."""

import subprocess
from datetime import datetime, timezone
from unittest.mock import Mock, patch

import boto3
import pytest
from moto import mock_aws

from s3_listing.core.exceptions import (
    BackendUnavailableError,
    CommandExecutionError,
    ValidationError,
)
from s3_listing.indexing import parse_bucket_line, parse_listing_line
from s3_listing.objectstorage import (
    AwsCliBackend,
    Boto3Backend,
    S3ClientConfig,
    create_backend,
)
from s3_listing.objectstorage.listing.sdk import format_bucket_line, format_object_line

TEST_CREDENTIALS = {
    "access_key_id": "test_key",
    "secret_access_key": "test_secret",
    "region_name": "us-east-1",
}


def _completed(args, returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr=stderr)


class TestAwsCliBackend:
    """Test the AWS CLI backend with a mocked command executor."""

    def test_list_object_lines(self):
        """Test the recursive listing command and its output."""
        executor = Mock()
        executor.execute_command.return_value = _completed(
            [], stdout="2024-01-01 10:00:00        123 a/b.txt\n"
        )
        backend = AwsCliBackend(S3ClientConfig(), executor=executor, timeout=60)

        lines = backend.list_object_lines("my-bucket")

        assert lines == ["2024-01-01 10:00:00        123 a/b.txt"]
        executor.execute_command.assert_called_once_with(
            ["aws", "s3", "ls", "s3://my-bucket", "--recursive"], 60
        )

    def test_keys_with_unicode_line_separators(self):
        """Test only newlines split the output into objects."""
        executor = Mock()
        executor.execute_command.return_value = _completed(
            [],
            stdout=(
                "2024-01-01 10:00:00        123 docs/report\u2028v2.txt\r\n"
                "2024-01-01 10:00:00          7 docs/a\x85b\x1ec.txt\n"
                "\n"
            ),
        )
        backend = AwsCliBackend(S3ClientConfig(), executor=executor)

        lines = backend.list_object_lines("my-bucket")

        assert [parse_listing_line(line).key for line in lines] == [
            "docs/report\u2028v2.txt",
            "docs/a\x85b\x1ec.txt",
        ]

    def test_connection_flags(self):
        """Test profile, region and endpoint are passed to the CLI."""
        executor = Mock()
        executor.execute_command.return_value = _completed([], stdout="")
        config = S3ClientConfig(
            aws_profile="archive",
            region_name="ap-southeast-2",
            endpoint_url="http://localhost:9000",
        )
        backend = AwsCliBackend(config, executor=executor, timeout=60)

        backend.list_bucket_lines()

        executor.execute_command.assert_called_once_with(
            [
                "aws",
                "s3",
                "ls",
                "--profile",
                "archive",
                "--region",
                "ap-southeast-2",
                "--endpoint-url",
                "http://localhost:9000",
            ],
            60,
        )

    def test_command_failure(self):
        """Test a failing command raises CommandExecutionError."""
        executor = Mock()
        executor.execute_command.return_value = _completed(
            [],
            returncode=254,
            stderr="An error occurred (AccessDenied) when calling ListObjectsV2",
        )
        backend = AwsCliBackend(S3ClientConfig(), executor=executor)

        with pytest.raises(CommandExecutionError, match="AccessDenied"):
            backend.list_object_lines("denied")

    def test_empty_result_exit_code(self):
        """Test exit code 1 without stderr means nothing was listed."""
        executor = Mock()
        executor.execute_command.return_value = _completed([], returncode=1)
        backend = AwsCliBackend(S3ClientConfig(), executor=executor)

        assert backend.list_object_lines("empty") == []

    def test_timeout(self):
        """Test timeouts raise CommandExecutionError."""
        executor = Mock()
        executor.execute_command.side_effect = subprocess.TimeoutExpired("aws", 5)
        backend = AwsCliBackend(S3ClientConfig(), executor=executor, timeout=5)

        with pytest.raises(CommandExecutionError, match="timed out after 5 seconds"):
            backend.list_object_lines("slow")

    @patch("s3_listing.objectstorage.listing.aws_cli.shutil.which")
    def test_ensure_available_missing(self, mock_which):
        """Test a missing aws executable is reported with a hint."""
        mock_which.return_value = None
        backend = AwsCliBackend(S3ClientConfig(), cli_path="aws")

        with pytest.raises(BackendUnavailableError, match="Install it"):
            backend.ensure_available()

    @patch("s3_listing.objectstorage.listing.aws_cli.shutil.which")
    def test_ensure_available_present(self, mock_which):
        """Test an installed aws executable passes."""
        mock_which.return_value = "/usr/local/bin/aws"

        AwsCliBackend(S3ClientConfig()).ensure_available()


class TestLineFormatting:
    """Test boto3 responses render in the CLI layout."""

    def test_format_object_line(self):
        """Test object lines round-trip through the tokenizer."""
        line = format_object_line(
            {
                "Key": "dir/my file.txt",
                "Size": 42,
                "LastModified": datetime(2024, 1, 1, 10, 0, 0),
            }
        )

        assert line == "2024-01-01 10:00:00         42 dir/my file.txt"
        assert parse_listing_line(line).key == "dir/my file.txt"

    def test_format_bucket_line(self):
        """Test bucket lines end with the bucket name."""
        line = format_bucket_line(
            {
                "Name": "my-bucket",
                "CreationDate": datetime(2024, 1, 1, tzinfo=timezone.utc),
            }
        )

        assert parse_bucket_line(line) == "my-bucket"


@mock_aws
class TestBoto3Backend:
    """Test the boto3 backend with mocked S3."""

    def setup_method(self, method):
        """Set up test environment."""

        self.s3_client = boto3.client(
            "s3",
            aws_access_key_id="test_key",
            aws_secret_access_key="test_secret",
            region_name="us-east-1",
        )
        self.s3_client.create_bucket(Bucket="test-bucket")
        self.s3_client.create_bucket(Bucket="empty-bucket")

        self.s3_client.put_object(
            Bucket="test-bucket", Key="data/2023/file1.txt", Body=b"content1"
        )
        self.s3_client.put_object(
            Bucket="test-bucket", Key="data/file2.tmp", Body=b"content2content2"
        )

    def test_list_object_lines(self):
        """Test objects are rendered as parseable listing lines."""
        backend = Boto3Backend(S3ClientConfig(**TEST_CREDENTIALS))

        lines = backend.list_object_lines("test-bucket")

        entries = [parse_listing_line(line) for line in lines]
        assert sorted(entry.key for entry in entries) == [
            "data/2023/file1.txt",
            "data/file2.tmp",
        ]
        assert sorted(entry.size for entry in entries) == [8, 16]

    def test_list_empty_bucket(self):
        """Test an empty bucket yields no lines."""
        backend = Boto3Backend(S3ClientConfig(**TEST_CREDENTIALS))

        assert backend.list_object_lines("empty-bucket") == []

    def test_list_missing_bucket(self):
        """Test a missing bucket raises CommandExecutionError."""
        backend = Boto3Backend(S3ClientConfig(**TEST_CREDENTIALS))

        with pytest.raises(CommandExecutionError, match="no-such-bucket"):
            backend.list_object_lines("no-such-bucket")

    def test_list_bucket_lines(self):
        """Test bucket enumeration lines end with the names."""
        backend = Boto3Backend(S3ClientConfig(**TEST_CREDENTIALS))

        names = [parse_bucket_line(line) for line in backend.list_bucket_lines()]

        assert sorted(names) == ["empty-bucket", "test-bucket"]

    def test_ensure_available_with_explicit_credentials(self):
        """Test explicit credentials satisfy the availability check."""
        Boto3Backend(S3ClientConfig(**TEST_CREDENTIALS)).ensure_available()


class TestBoto3Availability:
    """Test credential checks outside of moto."""

    @patch("s3_listing.objectstorage.clients.s3_client.boto3.Session")
    def test_no_credentials(self, mock_session):
        """Test missing credentials are reported."""
        mock_session.return_value.get_credentials.return_value = None

        with pytest.raises(BackendUnavailableError, match="No AWS credentials"):
            Boto3Backend(S3ClientConfig()).ensure_available()

    def test_unknown_profile(self, monkeypatch, tmp_path):
        """Test an unknown profile is reported."""
        monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "config"))
        monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "credentials"))

        with pytest.raises(BackendUnavailableError, match="not-a-profile"):
            Boto3Backend(S3ClientConfig(aws_profile="not-a-profile")).ensure_available()


class TestCreateBackend:
    """Test backend selection."""

    def test_create_aws_cli(self):
        backend = create_backend("aws-cli", S3ClientConfig(), timeout=10)

        assert isinstance(backend, AwsCliBackend)
        assert backend.timeout == 10

    def test_create_boto3(self):
        assert isinstance(create_backend("boto3", S3ClientConfig()), Boto3Backend)

    def test_unknown_backend(self):
        with pytest.raises(ValidationError, match="Unknown backend"):
            create_backend("gsutil", S3ClientConfig())
