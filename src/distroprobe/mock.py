"""In-memory capabilities for exercising the detector without the real OS.

Both mocks are lock-guarded so a single instance can back detectors running
in several threads.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from distroprobe.commands import CommandResult, CommandRunner
from distroprobe.context import DetectContext
from distroprobe.filesystem import FileReader


class MockFileReader(FileReader):
    """FileReader serving files from a dict of path -> content."""

    def __init__(self, files: dict[str, bytes | str] | None = None) -> None:
        self._lock = threading.Lock()
        self._files: dict[str, bytes] = {}
        self._read_errors: dict[str, OSError] = {}
        self._reads: list[str] = []
        self._exists_calls: list[str] = []
        for path, content in (files or {}).items():
            self.set_file(path, content)

    def set_file(self, path: str, content: bytes | str) -> None:
        if isinstance(content, str):
            content = content.encode()
        with self._lock:
            self._files[path] = content

    def remove_file(self, path: str) -> None:
        with self._lock:
            self._files.pop(path, None)

    def set_read_error(self, path: str, error: OSError) -> None:
        """Make ``read(path)`` raise ``error`` while ``exists(path)`` stays true."""
        with self._lock:
            self._read_errors[path] = error

    @property
    def reads(self) -> list[str]:
        """Paths passed to read(), in call order."""
        with self._lock:
            return list(self._reads)

    @property
    def exists_calls(self) -> list[str]:
        """Paths passed to exists(), in call order."""
        with self._lock:
            return list(self._exists_calls)

    @property
    def access_count(self) -> int:
        with self._lock:
            return len(self._reads) + len(self._exists_calls)

    def exists(self, path: str) -> bool:
        with self._lock:
            self._exists_calls.append(path)
            return path in self._files or path in self._read_errors

    def read(self, path: str) -> bytes:
        with self._lock:
            self._reads.append(path)
            if path in self._read_errors:
                raise self._read_errors[path]
            if path not in self._files:
                raise FileNotFoundError(f"file not found: {path}")
            return self._files[path]


@dataclass
class MockCall:
    """One recorded MockCommandRunner invocation."""

    command: str
    args: list[str] = field(default_factory=list)


class MockCommandRunner(CommandRunner):
    """CommandRunner returning canned results keyed by command name.

    Commands without a canned or default response fail with exit code 127,
    the way a shell reports a missing command.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._responses: dict[str, CommandResult] = {}
        self._default: CommandResult | None = None
        self._calls: list[MockCall] = []

    def set_response(self, command: str, result: CommandResult) -> None:
        with self._lock:
            self._responses[command] = result

    def set_default_response(self, result: CommandResult) -> None:
        with self._lock:
            self._default = result

    @property
    def calls(self) -> list[MockCall]:
        with self._lock:
            return list(self._calls)

    @property
    def call_count(self) -> int:
        with self._lock:
            return len(self._calls)

    def was_called(self, command: str) -> bool:
        with self._lock:
            return any(call.command == command for call in self._calls)

    def was_called_with(self, command: str, *args: str) -> bool:
        with self._lock:
            return any(
                call.command == command and call.args == list(args) for call in self._calls
            )

    def reset(self) -> None:
        """Forget recorded calls, keep responses."""
        with self._lock:
            self._calls = []

    def run(self, ctx: DetectContext, name: str, *args: str) -> CommandResult:
        with self._lock:
            self._calls.append(MockCall(command=name, args=list(args)))
            if name in self._responses:
                return self._responses[name]
            if self._default is not None:
                return self._default
        return CommandResult.failure(127, f"{name}: command not found", command=name)
