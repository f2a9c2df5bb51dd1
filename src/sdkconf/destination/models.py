"""Destination descriptors and the per-triple properties schema."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..errors import InvalidPathError
from ..triple import Triple

T = TypeVar("T")


class TripleProperties(BaseModel):
    """Optional path properties declared for one target triple.

    This is both the schema of ``targetTriples`` entries in bundle metadata and
    the schema of override files. Unknown keys are ignored and missing keys stay
    ``None``; encoding omits ``None`` values.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    sdk_root_path: Optional[str] = None
    toolchain_path: Optional[str] = None
    resources_path: Optional[str] = None
    static_resources_path: Optional[str] = None
    include_search_paths: Optional[list[str]] = None
    library_search_paths: Optional[list[str]] = None
    toolset_paths: Optional[list[str]] = None


def _pick(override: Optional[T], default: Optional[T]) -> Optional[T]:
    return override if override is not None else default


@dataclass(frozen=True)
class PathsConfiguration:
    sdk_root_path: Path | None = None
    toolchain_path: Path | None = None
    resources_path: Path | None = None
    static_resources_path: Path | None = None
    include_search_paths: list[Path] | None = None
    library_search_paths: list[Path] | None = None
    toolset_paths: list[Path] | None = None

    def merged(self, override: "PathsConfiguration") -> "PathsConfiguration":
        """Combine field by field; ``override`` wins wherever it has a value."""
        return PathsConfiguration(
            sdk_root_path=_pick(override.sdk_root_path, self.sdk_root_path),
            toolchain_path=_pick(override.toolchain_path, self.toolchain_path),
            resources_path=_pick(override.resources_path, self.resources_path),
            static_resources_path=_pick(override.static_resources_path, self.static_resources_path),
            include_search_paths=_pick(override.include_search_paths, self.include_search_paths),
            library_search_paths=_pick(override.library_search_paths, self.library_search_paths),
            toolset_paths=_pick(override.toolset_paths, self.toolset_paths),
        )

    def populated_fields(self) -> list[str]:
        return [item.name for item in fields(self) if getattr(self, item.name) is not None]

    @classmethod
    def from_properties(
        cls, properties: TripleProperties, base_directory: Path | None = None
    ) -> "PathsConfiguration":
        def one(value: str | None) -> Path | None:
            return None if value is None else _resolve_path(value, base_directory)

        def many(values: list[str] | None) -> list[Path] | None:
            if values is None:
                return None
            return [_resolve_path(value, base_directory) for value in values]

        return cls(
            sdk_root_path=one(properties.sdk_root_path),
            toolchain_path=one(properties.toolchain_path),
            resources_path=one(properties.resources_path),
            static_resources_path=one(properties.static_resources_path),
            include_search_paths=many(properties.include_search_paths),
            library_search_paths=many(properties.library_search_paths),
            toolset_paths=many(properties.toolset_paths),
        )

    def to_properties(self) -> TripleProperties:
        def one(value: Path | None) -> str | None:
            return None if value is None else _absolute_text(value)

        def many(values: list[Path] | None) -> list[str] | None:
            return None if values is None else [_absolute_text(value) for value in values]

        return TripleProperties(
            sdk_root_path=one(self.sdk_root_path),
            toolchain_path=one(self.toolchain_path),
            resources_path=one(self.resources_path),
            static_resources_path=one(self.static_resources_path),
            include_search_paths=many(self.include_search_paths),
            library_search_paths=many(self.library_search_paths),
            toolset_paths=many(self.toolset_paths),
        )


def _absolute_text(path: Path) -> str:
    if not Path(path).is_absolute():
        raise InvalidPathError(f"'{path}' must be an absolute path")
    return str(path)


def _resolve_path(value: str, base_directory: Path | None) -> Path:
    path = Path(value)
    if path.is_absolute():
        return path
    if base_directory is None:
        raise InvalidPathError(f"'{value}' must be an absolute path")
    return Path(base_directory) / path


@dataclass(frozen=True)
class Destination:
    target_triple: Triple
    paths_configuration: PathsConfiguration = field(default_factory=PathsConfiguration)

    @classmethod
    def from_properties(
        cls,
        target_triple: Triple,
        properties: TripleProperties,
        base_directory: Path | None = None,
    ) -> "Destination":
        return cls(
            target_triple=target_triple,
            paths_configuration=PathsConfiguration.from_properties(properties, base_directory),
        )

    @property
    def serialized(self) -> tuple[Triple, TripleProperties]:
        return self.target_triple, self.paths_configuration.to_properties()

    def merged_with(self, override: "Destination") -> "Destination":
        if override.target_triple != self.target_triple:
            raise ValueError(
                f"cannot merge {override.target_triple} configuration into {self.target_triple}"
            )
        return replace(
            self,
            paths_configuration=self.paths_configuration.merged(override.paths_configuration),
        )


__all__ = ["Destination", "PathsConfiguration", "TripleProperties"]
