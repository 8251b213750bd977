"""Listing backend that shells out to ``aws s3 ls``."""

import shutil
import subprocess
from typing import Optional

from s3_listing.command_executor import CommandExecutor, LocalCommandExecutor
from s3_listing.core import get_logger, settings
from s3_listing.core.exceptions import BackendUnavailableError, CommandExecutionError
from s3_listing.objectstorage.clients import S3ClientConfig

logger = get_logger(__name__)


class AwsCliBackend:
    """Lists buckets and objects with the AWS CLI."""

    name = "aws-cli"

    def __init__(
        self,
        config: S3ClientConfig,
        executor: Optional[CommandExecutor] = None,
        cli_path: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        """Initialize the AWS CLI backend.

        Args:
            config: Profile, region and endpoint passed through as CLI flags
            executor: Command executor, defaults to running locally
            cli_path: Name or path of the aws executable
            timeout: Per-command timeout in seconds
        """
        self.config = config
        self.executor = executor or LocalCommandExecutor()
        self.cli_path = cli_path or settings.aws_cli_path
        self.timeout = timeout or settings.command_timeout

    def ensure_available(self) -> None:
        """Check the aws executable is on PATH.

        Raises:
            BackendUnavailableError: If the AWS CLI cannot be found
        """
        if shutil.which(self.cli_path) is None:
            logger.error("AWS CLI not found", cli_path=self.cli_path)
            raise BackendUnavailableError(
                f"AWS CLI executable '{self.cli_path}' not found. Install it "
                "(https://aws.amazon.com/cli/) and run 'aws configure', "
                "or use --backend boto3."
            )

    def _command(self, *args: str) -> list[str]:
        command = [self.cli_path, "s3", "ls", *args]
        if self.config.aws_profile:
            command += ["--profile", self.config.aws_profile]
        if self.config.region_name:
            command += ["--region", self.config.region_name]
        if self.config.endpoint_url:
            command += ["--endpoint-url", self.config.endpoint_url]
        return command

    def _run(self, command: list[str]) -> list[str]:
        logger.debug("Running AWS CLI", command=command)

        try:
            result = self.executor.execute_command(command, self.timeout)
        except subprocess.TimeoutExpired:
            raise CommandExecutionError(
                f"Command timed out after {self.timeout} seconds"
            )
        except OSError as e:
            raise CommandExecutionError(f"Failed to run {command[0]}: {e}")

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            # `aws s3 ls` exits 1 with no output when nothing matched
            if result.returncode == 1 and not stderr:
                return []
            raise CommandExecutionError(
                f"Command failed with exit code {result.returncode}: {stderr}"
            )

        # Keys may contain other Unicode line boundaries; only "\n" separates objects
        lines = []
        for line in result.stdout.split("\n"):
            if line.endswith("\r"):
                line = line[:-1]
            if line:
                lines.append(line)
        return lines

    def list_object_lines(self, bucket: str) -> list[str]:
        lines = self._run(self._command(f"s3://{bucket}", "--recursive"))
        logger.info("Bucket listed", bucket=bucket, line_count=len(lines))
        return lines

    def list_bucket_lines(self) -> list[str]:
        lines = self._run(self._command())
        logger.info("Buckets enumerated", line_count=len(lines))
        return lines
