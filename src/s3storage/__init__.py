"""s3storage - metadata accessor for S3-compatible object storage."""

from __future__ import annotations

__version__ = "0.1.0"

from .auth import Boto3AuthProvider, StaticAuthProvider
from .client import (
    StorageAction,
    create_s3_client,
    get_storage_user_agent_value,
    head_object,
)
from .config import resolve_bucket, resolve_s3_config_and_input
from .exceptions import (
    StorageError,
    StorageValidationError,
    StorageValidationErrorCode,
)
from .settings import BucketSettings, S3Settings
from .store import S3Storage, ScopedStorage, get_properties
from .types import (
    AccessLevel,
    AuthSession,
    AuthSessionProvider,
    BucketInfo,
    Credentials,
    GetPropertiesOptions,
    ItemProperties,
    ResolvedInput,
    ResolvedS3Config,
)
from .utils import (
    resolve_prefix,
    validate_bucket_owner_id,
    validate_storage_operation_input,
)

__all__ = [
    # Main classes
    "S3Storage",
    "ScopedStorage",
    "get_properties",
    # Settings and auth
    "S3Settings",
    "BucketSettings",
    "StaticAuthProvider",
    "Boto3AuthProvider",
    # Types
    "AccessLevel",
    "AuthSession",
    "AuthSessionProvider",
    "BucketInfo",
    "Credentials",
    "GetPropertiesOptions",
    "ItemProperties",
    "ResolvedInput",
    "ResolvedS3Config",
    # Exceptions
    "StorageError",
    "StorageValidationError",
    "StorageValidationErrorCode",
    # Client
    "StorageAction",
    "create_s3_client",
    "get_storage_user_agent_value",
    "head_object",
    # Resolution and validation
    "resolve_bucket",
    "resolve_s3_config_and_input",
    "resolve_prefix",
    "validate_bucket_owner_id",
    "validate_storage_operation_input",
]
