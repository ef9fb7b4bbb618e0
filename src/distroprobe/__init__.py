"""Linux distribution and family detection.

Usage:
    from distroprobe import DetectContext, Detector, SubprocessRunner

    detector = Detector(runner=SubprocessRunner())
    dist = detector.detect(DetectContext.with_timeout(10))
    print(f"Detected: {dist} ({dist.family})")
"""

from distroprobe.commands import CommandResult, CommandRunner, SubprocessRunner
from distroprobe.context import DetectContext
from distroprobe.detector import Detector, detect_distribution
from distroprobe.distribution import Distribution
from distroprobe.errors import (
    DetectionError,
    DetectionTimeoutError,
    DistributionNotFoundError,
    SourceNotFoundError,
)
from distroprobe.family import Family, classify
from distroprobe.filesystem import FileReader, LocalFileReader

__version__ = "0.1.0"

__all__ = [
    "CommandResult",
    "CommandRunner",
    "DetectContext",
    "DetectionError",
    "DetectionTimeoutError",
    "Detector",
    "Distribution",
    "DistributionNotFoundError",
    "Family",
    "FileReader",
    "LocalFileReader",
    "SourceNotFoundError",
    "SubprocessRunner",
    "classify",
    "detect_distribution",
]
