"""
Storage
File: objects.py

Purpose: Persist structured objects to disk and load them back.

Types opt into persistence explicitly:
- Pydantic models (PersistableModel is the recommended base), or
- any class satisfying the Persistable protocol (to_dict/from_dict), or
- plain JSON containers (dict/list) of JSON values.

The on-disk form is a single canonical JSON document (sorted keys, no
whitespace, UTF-8). There is no schema versioning: a file written for a
different structure fails to decode instead of loading partially.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, ConfigDict

from chainutil.schemas.canonical import dumps_canonical
from chainutil.schemas.errors import (
    CanonicalizationException,
    DecodeException,
    EncodeException,
    FileCreateException,
    FileOpenException,
    PersistenceIOException,
)
from chainutil.storage.raw import PathLike, open_for_write

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PersistableModel(BaseModel):
    """
    Base class for models written with encode_save_to_disk().

    Unknown fields are rejected on load, bytes travel as base64 and
    non-finite floats are handed to the encoder (which refuses them)
    instead of being turned into null.
    """

    model_config = ConfigDict(
        extra="forbid",
        ser_json_bytes="base64",
        val_json_bytes="base64",
        ser_json_inf_nan="constants",
    )


@runtime_checkable
class Persistable(Protocol):
    """Persistence contract for types that are not pydantic models."""

    def to_dict(self) -> dict[str, Any]: ...

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Any: ...


def _where(path: PathLike | None) -> str:
    return f" for file {os.fspath(path)}" if path is not None else ""


def _find_non_json(value: Any, location: str = "") -> tuple[str, str] | None:
    """Return (location, type name) of the first value that is not plain JSON."""
    if value is None or type(value) in (bool, int, float, str):
        return None
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                return location, f"{type(key).__name__} key"
            found = _find_non_json(item, f"{location}.{key}" if location else key)
            if found is not None:
                return found
        return None
    if isinstance(value, list):
        for i, item in enumerate(value):
            found = _find_non_json(item, f"{location}[{i}]")
            if found is not None:
                return found
        return None
    return location, type(value).__name__


def _require_plain_json(payload: Any, obj: Any, path: PathLike | None) -> None:
    found = _find_non_json(payload)
    if found is None:
        return
    location, type_name = found
    raise EncodeException(
        f"Unable to encode {type(obj).__name__}{_where(path)}: "
        f"{type_name} at '{location or '$'}' is not a plain JSON value",
        path=path,
        details={"location": location, "type": type_name},
    )


def encode_object(obj: Any, path: PathLike | None = None) -> bytes:
    """
    Encode an object to its canonical on-disk bytes.

    Plain containers and Persistable payloads must hold only JSON values
    (None, bool, int, finite float, str, list, dict with str keys) so they
    load back equal. Bytes, datetimes, tuples and enums belong in a model.

    Args:
        obj: A pydantic model, a Persistable, or a dict/list of JSON values
        path: Only used to enrich error messages

    Raises:
        EncodeException: If the object has no persistence contract or
            contains a value the encoding cannot represent
    """
    try:
        if isinstance(obj, BaseModel):
            try:
                payload: Any = obj.model_dump(mode="json", by_alias=True)
            except ValueError as e:
                raise EncodeException(
                    f"Unable to encode {type(obj).__name__}{_where(path)}: {e}",
                    path=path,
                    cause=e,
                ) from e
        elif isinstance(obj, (dict, list)):
            payload = obj
            _require_plain_json(payload, obj, path)
        elif isinstance(obj, Persistable):
            try:
                payload = obj.to_dict()
            except Exception as e:
                raise EncodeException(
                    f"Unable to encode {type(obj).__name__}{_where(path)}: "
                    f"to_dict() failed: {type(e).__name__}: {e}",
                    path=path,
                    cause=e,
                ) from e
            if not isinstance(payload, dict):
                raise EncodeException(
                    f"Unable to encode {type(obj).__name__}{_where(path)}: "
                    f"to_dict() returned {type(payload).__name__}",
                    path=path,
                )
            _require_plain_json(payload, obj, path)
        else:
            raise EncodeException(
                f"Unable to encode {type(obj).__name__}{_where(path)}: "
                "type does not implement a persistence contract",
                path=path,
                details={"type": type(obj).__name__},
            )

        return dumps_canonical(payload).encode("utf-8")
    except CanonicalizationException as e:
        raise EncodeException(
            f"Unable to encode {type(obj).__name__}{_where(path)}: {e.message}",
            path=path,
            cause=e,
            details=e.details,
        ) from e
    except RecursionError as e:
        raise EncodeException(
            f"Unable to encode {type(obj).__name__}{_where(path)}: cyclic or too deeply nested value",
            path=path,
            cause=e,
        ) from e


def decode_object(data: bytes, target_type: type[T], path: PathLike | None = None) -> T:
    """
    Decode canonical bytes into a fresh instance of target_type.

    Args:
        data: Encoded bytes as produced by encode_object()
        target_type: Pydantic model class, Persistable class, dict or list
        path: Only used to enrich error messages

    Raises:
        DecodeException: If the bytes are truncated or malformed, or their
            shape does not match target_type
    """
    name = getattr(target_type, "__name__", repr(target_type))

    if isinstance(target_type, type) and issubclass(target_type, BaseModel):
        try:
            return target_type.model_validate_json(data)
        except ValueError as e:
            raise DecodeException(
                f"Unable to decode {name}{_where(path)}: {e}",
                path=path,
                cause=e,
            ) from e

    try:
        payload = json.loads(data)
    except ValueError as e:
        raise DecodeException(
            f"Unable to decode {name}{_where(path)}: malformed document: {e}",
            path=path,
            cause=e,
        ) from e

    if target_type in (dict, list):
        if not isinstance(payload, target_type):
            raise DecodeException(
                f"Unable to decode {name}{_where(path)}: "
                f"document holds {type(payload).__name__}",
                path=path,
            )
        return payload

    if not isinstance(target_type, type) or not callable(getattr(target_type, "from_dict", None)):
        raise DecodeException(
            f"Unable to decode {name}{_where(path)}: type does not implement a persistence contract",
            path=path,
        )

    if not isinstance(payload, dict):
        raise DecodeException(
            f"Unable to decode {name}{_where(path)}: document holds {type(payload).__name__}",
            path=path,
        )
    try:
        return target_type.from_dict(payload)
    except Exception as e:
        raise DecodeException(
            f"Unable to decode {name}{_where(path)}: {type(e).__name__}: {e}",
            path=path,
            cause=e,
        ) from e


def encode_save_to_disk(path: PathLike, obj: Any) -> None:
    """
    Encode an object and save it to disk.

    The file is created (mode 0644) or truncated first, then the encoded
    document is written. The handle is closed on every exit path.

    Raises:
        FileCreateException: If the file cannot be created
        EncodeException: If the object cannot be encoded
        PersistenceIOException: If the encoded bytes cannot be written
    """
    try:
        handle = open_for_write(path)
    except OSError as e:
        logger.error("Unable to create file %s: %s", os.fspath(path), e)
        raise FileCreateException(path, e) from e

    try:
        with handle:
            try:
                data = encode_object(obj)
            except EncodeException as e:
                raise EncodeException(
                    f"Unable to encode object before saving to file {os.fspath(path)}: {e.message}",
                    path=path,
                    cause=e,
                    details=e.details,
                ) from e
            handle.write(data)
    except OSError as e:
        logger.error("Unable to write to file %s: %s", os.fspath(path), e)
        raise PersistenceIOException(path, e, message=f"Unable to write to file {os.fspath(path)}: {e}") from e

    logger.debug("Saved %s (%d bytes) to %s", type(obj).__name__, len(data), os.fspath(path))


def load_decode_from_disk(path: PathLike, target_type: type[T]) -> T:
    """
    Load a file from disk and decode it into a new target_type instance.

    Nothing is returned on failure, so a partially decoded value can
    never be mistaken for a successful load.

    Raises:
        FileOpenException: If the file is missing or unreadable
        DecodeException: If the content does not decode into target_type
    """
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as e:
        logger.error("Unable to load file %s: %s", os.fspath(path), e)
        raise FileOpenException(path, e) from e

    try:
        value = decode_object(data, target_type)
    except DecodeException as e:
        raise DecodeException(
            f"Unable to decode loaded file {os.fspath(path)}: {e.message}",
            path=path,
            cause=e,
        ) from e

    logger.debug("Loaded %s (%d bytes) from %s", type(value).__name__, len(data), os.fspath(path))
    return value


__all__ = [
    "PersistableModel",
    "Persistable",
    "encode_object",
    "decode_object",
    "encode_save_to_disk",
    "load_decode_from_disk",
]
