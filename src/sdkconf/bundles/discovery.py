"""Discover installed SDK bundles and select destinations from them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from .. import codec
from ..destination import Destination
from ..errors import BundleError, SDKConfigError
from ..filesystem import FileSystem
from ..triple import Triple
from .metadata import BundleInfo, SDKMetadata

logger = logging.getLogger(__name__)

BUNDLE_SUFFIX = ".artifactbundle"
BUNDLE_INFO_FILE = "info.json"
SDK_METADATA_FILE = "sdk.json"
SDK_ARTIFACT_TYPE = "sdk"


@dataclass
class SDKVariant:
    metadata_path: Path
    supported_host_triples: list[Triple] | None
    destinations: list[Destination] = field(default_factory=list)

    def is_host_compatible(self, host_triple: Triple) -> bool:
        if self.supported_host_triples is None:
            return True
        return any(triple.is_runtime_compatible(host_triple) for triple in self.supported_host_triples)

    def destination_for(self, target_triple: Triple) -> Destination | None:
        for destination in self.destinations:
            if destination.target_triple == target_triple:
                return destination
        return None


@dataclass
class SDKBundle:
    path: Path
    artifacts: dict[str, list[SDKVariant]] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def identifiers(self) -> list[str]:
        return sorted(self.artifacts)

    def select_destination(
        self, sdk_id: str, host_triple: Triple, target_triple: Triple
    ) -> Destination | None:
        for variant in self.artifacts.get(sdk_id, []):
            if not variant.is_host_compatible(host_triple):
                continue
            destination = variant.destination_for(target_triple)
            if destination is not None:
                return destination
        return None


def select_destination(
    bundles: Iterable[SDKBundle], sdk_id: str, host_triple: Triple, target_triple: Triple
) -> Destination | None:
    """Return the first destination matching id, host and target, in bundle order."""
    for bundle in bundles:
        destination = bundle.select_destination(sdk_id, host_triple, target_triple)
        if destination is not None:
            return destination
    return None


def _load_variant(bundle_path: Path, variant_path: str, supported: list[str] | None, filesystem: FileSystem) -> SDKVariant:
    metadata_path = bundle_path / variant_path / SDK_METADATA_FILE
    if not filesystem.is_file(metadata_path):
        raise BundleError(f"{metadata_path} is missing")
    metadata = codec.decode(metadata_path, filesystem, SDKMetadata)
    destinations = [
        Destination.from_properties(Triple.parse(triple), properties, base_directory=metadata_path.parent)
        for triple, properties in metadata.target_triples.items()
    ]
    hosts = [Triple.parse(triple) for triple in supported] if supported is not None else None
    return SDKVariant(metadata_path=metadata_path, supported_host_triples=hosts, destinations=destinations)


def load_bundle(path: Path, filesystem: FileSystem) -> SDKBundle:
    info_path = path / BUNDLE_INFO_FILE
    if not filesystem.is_file(info_path):
        raise BundleError(f"{info_path} is missing")
    info = codec.decode(info_path, filesystem, BundleInfo)
    bundle = SDKBundle(path=path)
    for artifact_id, artifact in info.artifacts.items():
        if artifact.type != SDK_ARTIFACT_TYPE:
            continue
        if not artifact_id or "/" in artifact_id:
            raise BundleError(f"invalid artifact identifier '{artifact_id}' in {info_path}")
        bundle.artifacts[artifact_id] = [
            _load_variant(path, variant.path, variant.supported_triples, filesystem)
            for variant in artifact.variants
        ]
    return bundle


def discover_valid_bundles(
    root: Path, filesystem: FileSystem, diagnostics: logging.Logger | None = None
) -> list[SDKBundle]:
    """Parse every bundle under ``root``, skipping (and reporting) invalid ones."""
    log = diagnostics or logger
    root = Path(root)
    if not filesystem.is_directory(root):
        return []
    bundles = []
    for entry in filesystem.list_directory(root):
        if not entry.endswith(BUNDLE_SUFFIX):
            continue
        path = root / entry
        if not filesystem.is_directory(path):
            log.warning("Ignoring %s: bundles must be directories", path)
            continue
        try:
            bundles.append(load_bundle(path, filesystem))
        except (SDKConfigError, OSError) as exc:
            log.warning("Skipping invalid bundle %s: %s", path, exc)
    return bundles


__all__ = [
    "SDKBundle",
    "SDKVariant",
    "discover_valid_bundles",
    "load_bundle",
    "select_destination",
]
