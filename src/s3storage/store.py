"""Main S3Storage and ScopedStorage classes."""

from __future__ import annotations

import logging
from typing import Any

from .client import ClientFactory, StorageAction, create_s3_client, head_object
from .config import resolve_s3_config_and_input
from .settings import S3Settings
from .types import (
    AuthSessionProvider,
    GetPropertiesOptions,
    HeadObjectParams,
    ItemProperties,
    PathInput,
)
from .utils import (
    resolve_prefix,
    validate_bucket_owner_id,
    validate_storage_operation_input,
)

logger = logging.getLogger(__name__)


class ScopedStorage:
    """Convenience wrapper with pre-filled call options."""

    def __init__(
        self,
        storage: S3Storage,
        options: GetPropertiesOptions,
    ) -> None:
        """Initialize scoped storage.

        Parameters
        ----------
        storage : S3Storage
            Parent S3Storage instance.
        options : GetPropertiesOptions
            Options applied to every call; per-call options take precedence.
        """
        self._storage = storage
        self._options = options

    def get_properties(
        self,
        key: str | None = None,
        *,
        path: PathInput | None = None,
        options: GetPropertiesOptions | None = None,
    ) -> ItemProperties:
        """Same as :meth:`S3Storage.get_properties` with the scoped options merged in."""
        merged = GetPropertiesOptions(**{**self._options, **(options or {})})
        return self._storage.get_properties(key, path=path, options=merged)


class S3Storage:
    """Storage accessor bound to one configuration and auth session provider.

    Credentials are fetched from the provider on every call, so the instance
    can be kept for the lifetime of the application.
    """

    def __init__(
        self,
        settings: S3Settings | None = None,
        auth_provider: AuthSessionProvider | None = None,
        *,
        client_factory: ClientFactory = create_s3_client,
    ) -> None:
        """Initialize the storage accessor.

        Parameters
        ----------
        settings : S3Settings | None
            Storage settings. Loaded from the environment when *None*.
        auth_provider : AuthSessionProvider | None
            Source of credentials and identity. Derived from *settings* when
            *None*.
        client_factory : ClientFactory
            Builds a boto3 S3 client from a resolved per-call configuration.
        """
        self.settings = settings if settings is not None else S3Settings()
        self.auth_provider = (
            auth_provider if auth_provider is not None else self.settings.create_auth_provider()
        )
        self.client_factory = client_factory

    def scope(self, **options: Any) -> ScopedStorage:
        """Create a scoped accessor with pre-filled options.

        Parameters
        ----------
        **options : Any
            Any :class:`GetPropertiesOptions` field.

        Returns
        -------
        ScopedStorage
        """
        return ScopedStorage(self, GetPropertiesOptions(**options))

    def get_properties(
        self,
        key: str | None = None,
        *,
        path: PathInput | None = None,
        options: GetPropertiesOptions | None = None,
        action: StorageAction | str = StorageAction.GET_PROPERTIES,
    ) -> ItemProperties:
        """Fetch the properties and metadata of an object without its body.

        Address the object either by *key* (prefixed according to the access
        level) or by *path* (used as-is), never both.

        Parameters
        ----------
        key : str | None
            Logical key below the access-level prefix.
        path : PathInput | None
            Full object path, or ``callable(identity_id=...) -> str``.
        options : GetPropertiesOptions | None
            Access level, bucket override, expected bucket owner, etc.
        action : StorageAction | str
            Operation name reported in the user agent.

        Returns
        -------
        ItemProperties
            Carries ``key`` or ``path`` (as given by the caller) plus the
            object's size, content type, ETag, user metadata, last
            modification time and version id.

        Raises
        ------
        StorageValidationError
            For invalid input or configuration, before any request is sent.
        botocore.exceptions.ClientError
            Backend errors, unchanged (e.g. 404 ``NotFound``).
        """
        options = options or {}
        resolved = resolve_s3_config_and_input(self.settings, self.auth_provider, options, action)
        input_type, object_key = validate_storage_operation_input(key, path, resolved.identity_id)
        expected_bucket_owner = options.get("expected_bucket_owner")
        validate_bucket_owner_id(expected_bucket_owner)

        if input_type == "key":
            final_key = self._key_prefix(options, resolved.identity_id) + object_key
        else:
            final_key = object_key
        logger.debug("get properties of %s from %s", object_key, final_key)

        params: HeadObjectParams = {"Bucket": resolved.bucket, "Key": final_key}
        if expected_bucket_owner is not None:
            params["ExpectedBucketOwner"] = expected_bucket_owner

        response = head_object(resolved.s3_config, params, self.client_factory)

        result = ItemProperties(
            size=response.get("ContentLength"),
            content_type=response.get("ContentType"),
            etag=response.get("ETag"),
            metadata=response.get("Metadata"),
            last_modified=response.get("LastModified"),
            version_id=response.get("VersionId"),
        )
        result[input_type] = object_key
        return result

    def _key_prefix(self, options: GetPropertiesOptions, identity_id: str | None) -> str:
        access_level = options.get("access_level") or self.settings.default_access_level
        if access_level == "protected":
            return resolve_prefix(access_level, options.get("target_identity_id") or identity_id)
        return resolve_prefix(access_level, identity_id)


def get_properties(
    storage: S3Storage,
    key: str | None = None,
    *,
    path: PathInput | None = None,
    options: GetPropertiesOptions | None = None,
) -> ItemProperties:
    """Functional form of :meth:`S3Storage.get_properties`."""
    return storage.get_properties(key, path=path, options=options)
