"""Schemas for the JSON metadata files shipped inside SDK bundles."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..destination import TripleProperties

SUPPORTED_SCHEMA_VERSIONS = {"1.0"}


class _Metadata(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _check_schema_version(value: str) -> str:
    if value not in SUPPORTED_SCHEMA_VERSIONS:
        raise ValueError(f"unsupported schema version {value}")
    return value


class VariantMetadata(_Metadata):
    path: str = Field(..., description="Variant directory, relative to the bundle root")
    supported_triples: Optional[list[str]] = Field(
        None, description="Host triples able to run this variant; absent means any host"
    )


class ArtifactMetadata(_Metadata):
    type: str
    version: str
    variants: list[VariantMetadata]


class BundleInfo(_Metadata):
    """Contents of ``info.json`` at the root of a bundle."""

    schema_version: str
    artifacts: Dict[str, ArtifactMetadata]

    @field_validator("schema_version")
    @classmethod
    def check_schema_version(cls, value: str) -> str:
        return _check_schema_version(value)


class SDKMetadata(_Metadata):
    """Contents of ``sdk.json`` inside a bundle variant."""

    schema_version: str
    target_triples: Dict[str, TripleProperties]

    @field_validator("schema_version")
    @classmethod
    def check_schema_version(cls, value: str) -> str:
        return _check_schema_version(value)


__all__ = ["ArtifactMetadata", "BundleInfo", "SDKMetadata", "VariantMetadata", "SUPPORTED_SCHEMA_VERSIONS"]
