"""Exception types raised by sdkconf."""

from __future__ import annotations

from pathlib import Path


class SDKConfigError(Exception):
    """Base error for sdkconf."""


class PathIsNotDirectoryError(SDKConfigError):
    """Raised when a path expected to be a directory is something else."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"{self.path} exists but is not a directory")


class InvalidTripleError(SDKConfigError, ValueError):
    """Raised when a target triple string cannot be parsed."""


class InvalidPathError(SDKConfigError):
    """Raised when a configured path is not usable, e.g. relative without a base."""


class CodecError(SDKConfigError):
    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class DecodeError(CodecError):
    """Raised when a JSON file does not match the expected schema."""


class EncodeError(CodecError):
    """Raised when a value cannot be serialized to JSON."""


class BundleError(SDKConfigError):
    """Raised when an SDK bundle on disk is malformed."""
