"""Target triple value type."""

from __future__ import annotations

import platform
import re
import sys
from dataclasses import dataclass

from .errors import InvalidTripleError

_OS_VERSION = re.compile(r"[0-9][0-9.]*$")

_MACHINE_ALIASES = {
    "amd64": "x86_64",
    "x64": "x86_64",
    "arm64": "aarch64",
}


@dataclass(frozen=True)
class Triple:
    arch: str
    vendor: str
    os: str
    environment: str | None = None

    def __post_init__(self) -> None:
        if not self.environment:
            object.__setattr__(self, "environment", None)

    @classmethod
    def parse(cls, text: str) -> "Triple":
        parts = text.strip().split("-")
        if len(parts) < 3 or any(not part for part in parts):
            raise InvalidTripleError(f"'{text}' is not a valid target triple")
        arch, vendor, os_name, *rest = parts
        environment = "-".join(rest) if rest else None
        return cls(arch=arch, vendor=vendor, os=os_name, environment=environment)

    @classmethod
    def host(cls) -> "Triple":
        """Best-effort triple for the machine running this process."""
        machine = platform.machine().lower() or "unknown"
        if sys.platform == "darwin":
            machine = "arm64" if machine in {"arm64", "aarch64"} else machine
            return cls(machine, "apple", "macosx")
        machine = _MACHINE_ALIASES.get(machine, machine)
        if sys.platform.startswith("win"):
            return cls(machine, "unknown", "windows", "msvc")
        return cls(machine, "unknown", "linux", "gnu")

    @property
    def triple_string(self) -> str:
        parts = [self.arch, self.vendor, self.os]
        if self.environment:
            parts.append(self.environment)
        return "-".join(parts)

    @property
    def os_name(self) -> str:
        """OS component without a trailing version, e.g. ``macosx13.0`` -> ``macosx``."""
        return _OS_VERSION.sub("", self.os)

    def is_runtime_compatible(self, other: "Triple") -> bool:
        return (
            self.arch == other.arch
            and self.vendor == other.vendor
            and self.os_name == other.os_name
            and self.environment == other.environment
        )

    def __str__(self) -> str:
        return self.triple_string


__all__ = ["Triple"]
