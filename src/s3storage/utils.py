"""Utility functions for key prefixing and input validation."""

from __future__ import annotations

import re

from .exceptions import (
    StorageValidationError,
    StorageValidationErrorCode,
    assert_validation_error,
)
from .types import AccessLevel, InputType, PathInput

_ACCOUNT_ID_PATTERN = re.compile(r"\d{12}", re.ASCII)


def resolve_prefix(access_level: AccessLevel, target_identity_id: str | None = None) -> str:
    """Resolve the key prefix for an access level.

    Parameters
    ----------
    access_level : AccessLevel
        One of ``"guest"``, ``"private"`` or ``"protected"``.
    target_identity_id : str | None, optional
        Identity owning the object. Required for private and protected.

    Returns
    -------
    str
        Prefix ending in a slash, e.g. ``"protected/us-east-1:abc/"``.

    Raises
    ------
    StorageValidationError
        If the access level is unknown or an identity id is required but missing.
    """
    if access_level == "guest":
        return "public/"
    if access_level in ("private", "protected"):
        assert_validation_error(target_identity_id, StorageValidationErrorCode.NO_IDENTITY_ID)
        return f"{access_level}/{target_identity_id}/"
    raise StorageValidationError(StorageValidationErrorCode.INVALID_ACCESS_LEVEL)


def validate_storage_operation_input(
    key: str | None,
    path: PathInput | None,
    identity_id: str | None = None,
) -> tuple[InputType, str]:
    """Check that exactly one of *key* / *path* is given and return the object key.

    Parameters
    ----------
    key : str | None
        Logical key, prefixed later according to the access level.
    path : PathInput | None
        Full object path, or a callable ``path(identity_id=...)`` producing one.
    identity_id : str | None, optional
        Caller identity, handed to a callable path.

    Returns
    -------
    tuple[InputType, str]
        ``("key", key)`` or ``("path", resolved_path)``.

    Raises
    ------
    StorageValidationError
        If both or neither are given, or the path is not a string or starts with ``/``.
    """
    assert_validation_error(
        bool(key) != bool(path),
        StorageValidationErrorCode.INVALID_STORAGE_OPERATION_INPUT,
    )
    if path:
        object_path = path if isinstance(path, str) else path(identity_id=identity_id)
        assert_validation_error(
            isinstance(object_path, str) and not object_path.startswith("/"),
            StorageValidationErrorCode.INVALID_STORAGE_PATH_INPUT,
        )
        return "path", object_path
    return "key", key  # type: ignore[return-value]


def validate_bucket_owner_id(account_id: str | None) -> None:
    """Reject an expected bucket owner that is not a 12-digit AWS account id."""
    if account_id is None:
        return
    assert_validation_error(
        _ACCOUNT_ID_PATTERN.fullmatch(account_id),
        StorageValidationErrorCode.INVALID_AWS_ACCOUNT_ID,
    )
