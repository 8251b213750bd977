"""Running external listing commands."""

import subprocess
from typing import Protocol


class CommandExecutor(Protocol):
    """Protocol for executing backend listing commands."""

    def execute_command(
        self, args: list[str], timeout: int
    ) -> subprocess.CompletedProcess[str]:
        """Execute the command and return the result."""
        ...


class LocalCommandExecutor(CommandExecutor):
    """Executes commands on this machine without a shell."""

    def execute_command(
        self, args: list[str], timeout: int
    ) -> subprocess.CompletedProcess[str]:
        return subprocess.run(
            args,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
