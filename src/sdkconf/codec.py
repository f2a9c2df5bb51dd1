"""JSON encode/decode of pydantic schemas through a FileSystem."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from .errors import DecodeError, EncodeError
from .filesystem import FileSystem

ModelT = TypeVar("ModelT", bound=BaseModel)


def dumps(model: BaseModel) -> str:
    payload = model.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(payload, indent=2, sort_keys=True) + "\n"


def encode(path: Path, filesystem: FileSystem, model: BaseModel) -> None:
    """Write ``model`` as pretty-printed JSON, omitting absent fields."""
    try:
        text = dumps(model)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise EncodeError(path, str(exc)) from exc
    filesystem.write_text(path, text)


def decode(path: Path, filesystem: FileSystem, schema: type[ModelT]) -> ModelT:
    try:
        text = filesystem.read_text(path)
    except UnicodeDecodeError as exc:
        raise DecodeError(path, f"is not valid UTF-8: {exc}") from exc
    try:
        return schema.model_validate_json(text)
    except ValidationError as exc:
        raise DecodeError(path, f"does not match {schema.__name__}: {exc}") from exc


__all__ = ["decode", "dumps", "encode"]
