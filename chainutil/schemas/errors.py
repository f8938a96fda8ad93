"""
Schemas & Canonicalization
File: errors.py

Purpose: Standard error taxonomy for chainutil.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across chainutil."""

    # Serialization Errors
    CANONICALIZATION_ERROR = "CANONICALIZATION_ERROR"
    ENCODE_ERROR = "ENCODE_ERROR"
    DECODE_ERROR = "DECODE_ERROR"

    # Storage Errors
    STORAGE_IO_ERROR = "STORAGE_IO_ERROR"
    STORAGE_CREATE_ERROR = "STORAGE_CREATE_ERROR"
    STORAGE_OPEN_ERROR = "STORAGE_OPEN_ERROR"

    # Identity & Time Errors
    RANDOM_SOURCE_UNAVAILABLE = "RANDOM_SOURCE_UNAVAILABLE"
    TIMESTAMP_INVALID = "TIMESTAMP_INVALID"

    # Configuration Errors
    CONFIG_ERROR = "CONFIG_ERROR"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class ChainError(BaseModel):
    """
    Base error model for structured error communication.

    Lets callers pass failures across boundaries (logs, reports, RPC
    payloads) without holding on to live exception objects.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.STORAGE_IO_ERROR],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )
    fatal: bool = Field(
        default=False,
        description="Whether the failure must halt the calling operation",
    )

    def to_exception(self) -> "ChainException":
        """Convert this error model to a raised exception."""
        return ChainException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
            fatal=self.fatal,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class ChainException(Exception):
    """
    Base exception for all chainutil errors.

    This exception carries structured error information and can be
    converted to/from ChainError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "CHAIN_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
        fatal: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable
        self.fatal = fatal

    def to_error_model(self) -> ChainError:
        """Convert this exception to a ChainError model."""
        return ChainError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
            fatal=self.fatal,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


def _path_details(
    path: str | os.PathLike[str] | None,
    cause: BaseException | None,
    details: dict[str, Any] | None,
) -> dict[str, Any]:
    full_details = dict(details or {})
    if path is not None:
        full_details["path"] = os.fspath(path)
    if cause is not None:
        full_details["cause"] = str(cause)
        full_details["cause_type"] = type(cause).__name__
    return full_details


class CanonicalizationException(ChainException):
    """Exception raised when canonical serialization fails."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.CANONICALIZATION_ERROR,
            details=details,
            retryable=False,
        )


class PersistenceIOException(ChainException):
    """
    Exception raised when a filesystem operation fails.

    Covers open, create, read and write failures. The offending path and
    the underlying OS error are kept both in the message and in details.
    """

    default_code = ErrorCodes.STORAGE_IO_ERROR
    action = "access"

    def __init__(
        self,
        path: str | os.PathLike[str],
        cause: BaseException | None = None,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.path = os.fspath(path)
        self.cause = cause
        if message is None:
            message = f"Unable to {self.action} file {self.path}: {cause}"
        super().__init__(
            message=message,
            code=self.default_code,
            details=_path_details(path, cause, details),
            retryable=False,
        )


class FileCreateException(PersistenceIOException):
    """Exception raised when a target file cannot be created or truncated."""

    default_code = ErrorCodes.STORAGE_CREATE_ERROR
    action = "create"


class FileOpenException(PersistenceIOException):
    """Exception raised when a source file is missing or cannot be opened."""

    default_code = ErrorCodes.STORAGE_OPEN_ERROR
    action = "load"


class EncodeException(ChainException):
    """Exception raised when an object cannot be serialized."""

    def __init__(
        self,
        message: str,
        path: str | os.PathLike[str] | None = None,
        cause: BaseException | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.path = os.fspath(path) if path is not None else None
        self.cause = cause
        super().__init__(
            message=message,
            code=ErrorCodes.ENCODE_ERROR,
            details=_path_details(path, cause, details),
            retryable=False,
        )


class DecodeException(ChainException):
    """Exception raised when a byte stream cannot be decoded into the requested type."""

    def __init__(
        self,
        message: str,
        path: str | os.PathLike[str] | None = None,
        cause: BaseException | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.path = os.fspath(path) if path is not None else None
        self.cause = cause
        super().__init__(
            message=message,
            code=ErrorCodes.DECODE_ERROR,
            details=_path_details(path, cause, details),
            retryable=False,
        )


class RandomSourceException(ChainException):
    """
    Exception raised when the secure random source cannot supply bytes.

    Always fatal: identifier generation must never degrade to a
    predictable value, so callers are expected to abort the operation
    chain (or apply their own policy) rather than continue.
    """

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.cause = cause
        super().__init__(
            message=message,
            code=ErrorCodes.RANDOM_SOURCE_UNAVAILABLE,
            details=_path_details(None, cause, details),
            retryable=False,
            fatal=True,
        )


class TimestampException(ChainException):
    """Exception raised when a Timestamp has no calendar (datetime) form."""

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.cause = cause
        super().__init__(
            message=message,
            code=ErrorCodes.TIMESTAMP_INVALID,
            details=_path_details(None, cause, details),
            retryable=False,
        )


class ConfigException(ChainException):
    """Exception raised for invalid runtime configuration."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIG_ERROR,
            details=details,
            retryable=False,
        )
