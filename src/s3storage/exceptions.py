"""Domain-specific exceptions for s3storage."""

from __future__ import annotations

from enum import Enum


class StorageError(Exception):
    """Base exception for s3storage errors."""
    pass


class StorageValidationErrorCode(str, Enum):
    """Validation failures raised before any request reaches the backend."""

    NO_CREDENTIALS = "NoCredentials"
    NO_IDENTITY_ID = "NoIdentityId"
    NO_BUCKET = "NoBucket"
    NO_REGION = "NoRegion"
    INVALID_STORAGE_BUCKET = "InvalidStorageBucket"
    INVALID_ACCESS_LEVEL = "InvalidAccessLevel"
    INVALID_STORAGE_OPERATION_INPUT = "InvalidStorageOperationInput"
    INVALID_STORAGE_PATH_INPUT = "InvalidStoragePathInput"
    INVALID_AWS_ACCOUNT_ID = "InvalidAWSAccountID"


_MESSAGES: dict[StorageValidationErrorCode, str] = {
    StorageValidationErrorCode.NO_CREDENTIALS: "Credentials should not be empty.",
    StorageValidationErrorCode.NO_IDENTITY_ID: (
        "Missing identity ID when accessing objects in protected or private access level."
    ),
    StorageValidationErrorCode.NO_BUCKET: "Missing bucket name while accessing object.",
    StorageValidationErrorCode.NO_REGION: "Missing region while accessing object.",
    StorageValidationErrorCode.INVALID_STORAGE_BUCKET: (
        "Unable to lookup bucket from provided name in storage configuration."
    ),
    StorageValidationErrorCode.INVALID_ACCESS_LEVEL: (
        "Access level must be one of 'guest', 'private' or 'protected'."
    ),
    StorageValidationErrorCode.INVALID_STORAGE_OPERATION_INPUT: (
        "Path or key parameter must be specified in the input. "
        "Both can not be specified at the same time."
    ),
    StorageValidationErrorCode.INVALID_STORAGE_PATH_INPUT: (
        "Input `path` does not allow a leading slash (/)."
    ),
    StorageValidationErrorCode.INVALID_AWS_ACCOUNT_ID: "Invalid AWS account ID was provided.",
}


class StorageValidationError(StorageError):
    """Raised when the input or configuration of a storage call is invalid."""
    def __init__(self, code: StorageValidationErrorCode) -> None:
        self.code = code
        self.name = code.value
        super().__init__(_MESSAGES[code])


def assert_validation_error(condition: object, code: StorageValidationErrorCode) -> None:
    """Raise :class:`StorageValidationError` with *code* unless *condition* holds."""
    if not condition:
        raise StorageValidationError(code)
