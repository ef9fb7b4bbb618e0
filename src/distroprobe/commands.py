"""Command-running capability used by the detector's last-resort probe."""

from __future__ import annotations

import logging
import subprocess
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from distroprobe.constants import DEFAULT_COMMAND_TIMEOUT
from distroprobe.context import DetectContext
from distroprobe.errors import DetectionError, DetectionTimeoutError

logger = logging.getLogger(__name__)

# Seconds between cancellation checks while a command runs
POLL_INTERVAL = 0.05


@dataclass
class CommandResult:
    """Outcome of running an external command.

    Process failures never raise; they are recorded here instead. ``error``
    is set when the command could not run to completion at all (not found,
    timed out, cancelled), in which case ``exit_code`` is -1.
    """

    command: str = ""
    args: list[str] = field(default_factory=list)
    stdout: bytes = b""
    stderr: bytes = b""
    exit_code: int = 0
    error: Exception | None = None
    duration: float = 0.0  # Seconds

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0 and self.error is None

    @property
    def failed(self) -> bool:
        return not self.succeeded

    @property
    def stdout_text(self) -> str:
        return self.stdout.decode("utf-8", errors="replace")

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace")

    @property
    def stdout_lines(self) -> list[str]:
        """Non-empty stdout split into lines (empty output gives [])."""
        text = self.stdout_text.strip()
        return text.split("\n") if text else []

    @classmethod
    def success(cls, stdout: str | bytes = b"", command: str = "") -> CommandResult:
        if isinstance(stdout, str):
            stdout = stdout.encode()
        return cls(command=command, stdout=stdout)

    @classmethod
    def failure(cls, exit_code: int, stderr: str | bytes = b"", command: str = "") -> CommandResult:
        if isinstance(stderr, str):
            stderr = stderr.encode()
        return cls(command=command, stderr=stderr, exit_code=exit_code)


class CommandRunner(ABC):
    """Runs external commands on behalf of the detector."""

    @abstractmethod
    def run(self, ctx: DetectContext, name: str, *args: str) -> CommandResult:
        """Run ``name`` with ``args`` and capture its output.

        Must honor ``ctx``: a finished context yields a failed result
        without starting the process, and cancelling it stops a process
        that is already running.
        """
        ...


class SubprocessRunner(CommandRunner):
    """CommandRunner that executes real processes with subprocess.

    Args:
        timeout: Upper bound in seconds for any single command. The
            context's remaining time lowers it further.
    """

    def __init__(self, timeout: float = DEFAULT_COMMAND_TIMEOUT) -> None:
        self.timeout = timeout

    def _effective_timeout(self, ctx: DetectContext) -> float:
        remaining = ctx.remaining()
        if remaining is None:
            return self.timeout
        return min(self.timeout, remaining)

    def run(self, ctx: DetectContext, name: str, *args: str) -> CommandResult:
        result = CommandResult(command=name, args=list(args))

        if ctx.done():
            result.exit_code = -1
            result.error = DetectionTimeoutError(f"command not started: {ctx.reason()}", op=name)
            return result

        start = time.monotonic()
        deadline = start + self._effective_timeout(ctx)
        try:
            proc = subprocess.Popen(
                [name, *args],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            # Includes FileNotFoundError when the command is not installed
            result.exit_code = -1
            result.error = DetectionError("command execution failed", op=name, cause=e)
        else:
            self._wait(ctx, proc, deadline, result)
        result.duration = time.monotonic() - start

        logger.debug(
            "Ran %s %s: exit=%d in %.3fs", name, " ".join(args), result.exit_code, result.duration
        )
        return result

    def _wait(
        self,
        ctx: DetectContext,
        proc: subprocess.Popen,
        deadline: float,
        result: CommandResult,
    ) -> None:
        """Collect the process output, killing it on cancellation or timeout."""
        while True:
            slice_ = max(0.0, min(POLL_INTERVAL, deadline - time.monotonic()))
            try:
                stdout, stderr = proc.communicate(timeout=slice_)
            except subprocess.TimeoutExpired as e:
                if ctx.cancelled:
                    reason, cause = f"command aborted: {ctx.reason()}", None
                elif ctx.expired or time.monotonic() >= deadline:
                    reason, cause = "command timed out", e
                else:
                    continue
                logger.debug("Killing %s (pid %d): %s", result.command, proc.pid, reason)
                proc.kill()
                stdout, stderr = proc.communicate()
                result.exit_code = -1
                result.stdout = stdout or b""
                result.stderr = stderr or b""
                result.error = DetectionTimeoutError(reason, op=result.command, cause=cause)
                return
            result.exit_code = proc.returncode
            result.stdout = stdout or b""
            result.stderr = stderr or b""
            return
