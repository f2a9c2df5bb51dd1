"""Persistent store for per-triple destination overrides."""

from __future__ import annotations

import logging
from pathlib import Path

from .. import codec
from ..bundles import discover_valid_bundles, select_destination
from ..destination import Destination, PathsConfiguration, TripleProperties
from ..errors import PathIsNotDirectoryError
from ..filesystem import FileSystem, LocalFileSystem
from ..triple import Triple

CONFIGURATION_DIRECTORY = "configuration"

logger = logging.getLogger(__name__)


class ConfigurationStore:
    """Overrides for installed SDK destinations, one JSON file per (SDK id, triple).

    The store keeps no state besides the configuration directory: every call
    reads from disk again, so edits made by other processes are picked up on
    the next call.
    """

    def __init__(
        self,
        host_triple: Triple,
        sdks_path: Path,
        filesystem: FileSystem | None = None,
        diagnostics: logging.Logger | None = None,
    ):
        self.host_triple = host_triple
        self.sdks_path = Path(sdks_path)
        self.filesystem = filesystem or LocalFileSystem()
        self.diagnostics = diagnostics or logger
        self.configuration_directory_path = self.sdks_path / CONFIGURATION_DIRECTORY

        if self.filesystem.exists(self.configuration_directory_path):
            if not self.filesystem.is_directory(self.configuration_directory_path):
                raise PathIsNotDirectoryError(self.configuration_directory_path)
        else:
            self.filesystem.create_directory(self.configuration_directory_path, recursive=True)

    def configuration_path(self, sdk_id: str, triple: Triple) -> Path:
        if not sdk_id or "/" in sdk_id or "\\" in sdk_id:
            raise ValueError(f"invalid SDK identifier '{sdk_id}'")
        return self.configuration_directory_path / f"{sdk_id}_{triple.triple_string}.json"

    def update_configuration(self, sdk_id: str, destination: Destination) -> None:
        triple, properties = destination.serialized
        path = self.configuration_path(sdk_id, triple)
        codec.encode(path, self.filesystem, properties)
        self.diagnostics.debug(
            "Stored %s for %s in %s",
            ", ".join(destination.paths_configuration.populated_fields()) or "no fields",
            sdk_id,
            path,
        )

    def read_override(self, sdk_id: str, triple: Triple) -> PathsConfiguration | None:
        """Return the stored override for (sdk_id, triple) without consulting bundles."""
        path = self.configuration_path(sdk_id, triple)
        if not self.filesystem.is_file(path):
            return None
        properties = codec.decode(path, self.filesystem, TripleProperties)
        return Destination.from_properties(triple, properties).paths_configuration

    def read_configuration(self, sdk_id: str, triple: Triple) -> Destination | None:
        """Resolve the bundle default for (sdk_id, triple) with any stored override applied.

        Returns ``None`` when no installed bundle provides ``sdk_id`` for this
        host and ``triple``. A malformed override file raises ``DecodeError``.
        """
        bundles = discover_valid_bundles(self.sdks_path, self.filesystem, self.diagnostics)
        destination = select_destination(bundles, sdk_id, self.host_triple, triple)
        if destination is None:
            self.diagnostics.debug("No bundle provides %s for %s", sdk_id, triple)
            return None

        override = self.read_override(sdk_id, triple)
        if override is None:
            return destination
        return destination.merged_with(Destination(target_triple=triple, paths_configuration=override))

    def reset_configuration(self, sdk_id: str, triple: Triple) -> bool:
        """Remove the override for (sdk_id, triple); False if there was none."""
        path = self.configuration_path(sdk_id, triple)
        if not self.filesystem.is_file(path):
            return False
        self.filesystem.remove_file_tree(path)
        self.diagnostics.debug("Removed %s", path)
        return True


__all__ = ["CONFIGURATION_DIRECTORY", "ConfigurationStore"]
