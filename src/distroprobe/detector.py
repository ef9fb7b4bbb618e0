"""Distribution detection over an ordered chain of sources."""

from __future__ import annotations

import logging
from typing import Callable

from distroprobe.commands import CommandRunner, SubprocessRunner
from distroprobe.constants import (
    ARCH_RELEASE_PATH,
    DEBIAN_VERSION_PATH,
    LSB_RELEASE_ARGS,
    LSB_RELEASE_COMMAND,
    LSB_RELEASE_PATH,
    OS_RELEASE_FALLBACK_PATH,
    OS_RELEASE_PATH,
    REDHAT_RELEASE_PATH,
    SUSE_RELEASE_PATH,
)
from distroprobe.context import DetectContext
from distroprobe.distribution import Distribution
from distroprobe.errors import (
    DetectionError,
    DetectionTimeoutError,
    DistributionNotFoundError,
    SourceNotFoundError,
)
from distroprobe.filesystem import FileReader, LocalFileReader
from distroprobe.parsers import (
    parse_arch_release,
    parse_debian_version,
    parse_lsb_release,
    parse_lsb_release_output,
    parse_os_release,
    parse_redhat_release,
    parse_suse_release,
)

logger = logging.getLogger(__name__)

Parser = Callable[[str], Distribution]

# Standard sources, tried before the cancellation re-check
PRIMARY_SOURCES: list[tuple[str, Parser]] = [
    (OS_RELEASE_PATH, parse_os_release),
    (OS_RELEASE_FALLBACK_PATH, parse_os_release),
    (LSB_RELEASE_PATH, parse_lsb_release),
]

# Vendor release files; parser None means existence alone is enough
FALLBACK_SOURCES: list[tuple[str, Parser | None]] = [
    (REDHAT_RELEASE_PATH, parse_redhat_release),
    (DEBIAN_VERSION_PATH, parse_debian_version),
    (ARCH_RELEASE_PATH, None),
    (SUSE_RELEASE_PATH, parse_suse_release),
]


class Detector:
    """Detects the running Linux distribution.

    Sources are probed in a fixed priority order and the first one that
    exists and can be read wins, even if its content is sparse:

    1. /etc/os-release
    2. /usr/lib/os-release
    3. /etc/lsb-release
    4. /etc/redhat-release
    5. /etc/debian_version
    6. /etc/arch-release (existence only)
    7. /etc/SuSE-release
    8. ``lsb_release -a``

    A Detector keeps no state between calls, so one instance can serve
    concurrent callers as long as its reader and runner can.

    Args:
        runner: Runs the ``lsb_release`` fallback. Without one that step fails.
        reader: File access; defaults to the real filesystem.
    """

    def __init__(self, runner: CommandRunner | None = None, reader: FileReader | None = None) -> None:
        self.runner = runner
        self.reader = reader if reader is not None else LocalFileReader()

    def detect(self, ctx: DetectContext | None = None) -> Distribution:
        """Detect the current distribution.

        Args:
            ctx: Cancellation/deadline for this call (none if omitted)

        Returns:
            Distribution with its family classified

        Raises:
            DetectionTimeoutError: ctx was cancelled or expired
            DistributionNotFoundError: no source produced a result
        """
        op = "distroprobe.detect"
        if ctx is None:
            ctx = DetectContext.background()

        self._check_context(ctx, op)

        for path, parser in PRIMARY_SOURCES:
            try:
                return self._try_file(path, parser)
            except SourceNotFoundError as e:
                logger.debug("Skipping %s: %s", path, e)

        self._check_context(ctx, op)

        for path, parser in FALLBACK_SOURCES:
            try:
                return self._try_file(path, parser)
            except SourceNotFoundError as e:
                logger.debug("Skipping %s: %s", path, e)

        try:
            return self._try_lsb_release_command(ctx)
        except DetectionTimeoutError:
            raise
        except DetectionError as e:
            logger.debug("lsb_release fallback failed: %s", e)

        raise DistributionNotFoundError("could not detect Linux distribution", op=op)

    def _check_context(self, ctx: DetectContext, op: str) -> None:
        reason = ctx.reason()
        if reason is not None:
            raise DetectionTimeoutError(f"detection {reason}", op=op)

    def _try_file(self, path: str, parser: Parser | None) -> Distribution:
        """Probe a single release file.

        Raises:
            SourceNotFoundError: The file is missing or unreadable
        """
        if not self.reader.exists(path):
            raise SourceNotFoundError(f"file not found: {path}")

        if parser is None:
            dist = parse_arch_release()
        else:
            try:
                content = self.reader.read(path)
            except OSError as e:
                raise SourceNotFoundError(f"cannot read {path}", cause=e) from e
            dist = parser(content.decode("utf-8", errors="replace"))

        logger.info("Detected %s (family=%s) from %s", dist.id or "<empty id>", dist.family, path)
        return dist

    def _try_lsb_release_command(self, ctx: DetectContext) -> Distribution:
        op = "distroprobe.lsb_release"
        if self.runner is None:
            raise DetectionError("no executor available", op=op)

        self._check_context(ctx, op)
        result = self.runner.run(ctx, LSB_RELEASE_COMMAND, *LSB_RELEASE_ARGS)
        if isinstance(result.error, DetectionTimeoutError):
            raise DetectionTimeoutError("lsb_release did not complete", op=op, cause=result.error)
        if not result.succeeded:
            raise DetectionError("lsb_release command failed", op=op, cause=result.error)

        dist = parse_lsb_release_output(result.stdout_text)
        if not dist.id:
            raise DetectionError("lsb_release returned no distribution ID", op=op)

        logger.info("Detected %s (family=%s) from lsb_release", dist.id, dist.family)
        return dist


def detect_distribution(
    ctx: DetectContext | None = None,
    runner: CommandRunner | None = None,
    reader: FileReader | None = None,
) -> Distribution:
    """Detect the current distribution using real processes by default."""
    if runner is None:
        runner = SubprocessRunner()
    return Detector(runner=runner, reader=reader).detect(ctx)
