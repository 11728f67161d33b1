"""
Shell Executor Module

Runs external programs (helm) on behalf of the update pipeline. Every
command and its output are echoed to the log; any failure raises
ShellError, which the CLI turns into a non-zero exit code.
"""

import logging
import shlex
import subprocess
from typing import Optional, Sequence

from .exceptions import ShellError
from .utils import log_multiline

logger = logging.getLogger(__name__)


class ShellExecutor:
    """Runs commands given as an explicit program and argument list."""

    def run(self, args: Sequence[str], cwd: Optional[str] = None) -> bytes:
        """Run a command and return its standard output.

        Args:
            args: Program followed by its arguments
            cwd: Working directory (defaults to the current one)

        Returns:
            Captured standard output

        Raises:
            ShellError: If the program cannot be launched or exits non-zero
        """
        args = list(args)
        command = shlex.join(args)
        log_multiline(f"$ {command}", logger)

        try:
            result = subprocess.run(args, cwd=cwd, capture_output=True)
        except OSError as e:
            log_multiline(f"{e}", logger, logging.ERROR)
            raise ShellError(f"Failed to run '{command}': {e}", command=args) from e

        stderr = result.stderr.decode("utf-8", errors="replace")
        if result.returncode != 0:
            log_multiline(
                f"exit status {result.returncode}: {stderr}", logger, logging.ERROR
            )
            raise ShellError(
                f"Command '{command}' exited with status {result.returncode}",
                command=args,
                returncode=result.returncode,
                stderr=stderr,
            )

        log_multiline(
            "Result: " + result.stdout.decode("utf-8", errors="replace"), logger
        )
        return result.stdout
