"""Per-call configuration resolution.

Merges the global :class:`S3Settings` with the options of a single call and
the credentials of the current auth session.
"""

from __future__ import annotations

import logging

from .client import StorageAction, get_storage_user_agent_value
from .exceptions import StorageValidationErrorCode, assert_validation_error
from .settings import S3Settings
from .types import (
    AuthSessionProvider,
    BucketOption,
    GetPropertiesOptions,
    ResolvedInput,
    ResolvedS3Config,
)

logger = logging.getLogger(__name__)


def resolve_bucket(settings: S3Settings, bucket: BucketOption | None = None) -> tuple[str | None, str | None]:
    """Resolve the target bucket name and region.

    Parameters
    ----------
    settings : S3Settings
        Global settings holding the default and the registered buckets.
    bucket : BucketOption | None
        Registered bucket name, explicit :class:`BucketInfo`, or *None* for
        the default bucket.

    Returns
    -------
    tuple[str | None, str | None]
        ``(bucket_name, region)``.

    Raises
    ------
    StorageValidationError
        If a bucket name is given that is not registered.
    """
    if not bucket:
        return settings.bucket, settings.region
    if isinstance(bucket, str):
        bucket_info = settings.get_bucket(bucket)
        assert_validation_error(bucket_info, StorageValidationErrorCode.INVALID_STORAGE_BUCKET)
        return bucket_info["bucket_name"], bucket_info["region"]  # type: ignore[index]
    return bucket["bucket_name"], bucket["region"]


def resolve_s3_config_and_input(
    settings: S3Settings,
    auth_provider: AuthSessionProvider,
    options: GetPropertiesOptions | None = None,
    action: StorageAction | str = StorageAction.GET_PROPERTIES,
) -> ResolvedInput:
    """Resolve client configuration, bucket and caller identity for one call.

    Raises
    ------
    StorageValidationError
        If credentials, bucket or region cannot be resolved.
    """
    options = options or {}

    session = auth_provider.fetch_auth_session()
    location_credentials_provider = options.get("location_credentials_provider")
    if location_credentials_provider is not None:
        credentials = location_credentials_provider()
    else:
        credentials = session.credentials
    assert_validation_error(credentials, StorageValidationErrorCode.NO_CREDENTIALS)

    bucket, region = resolve_bucket(settings, options.get("bucket"))
    assert_validation_error(bucket, StorageValidationErrorCode.NO_BUCKET)
    assert_validation_error(region, StorageValidationErrorCode.NO_REGION)

    s3_config = ResolvedS3Config(
        credentials=credentials,  # type: ignore[arg-type]
        region=region,  # type: ignore[arg-type]
        user_agent_value=get_storage_user_agent_value(action),
        use_accelerate_endpoint=options.get("use_accelerate_endpoint"),
        endpoint_url=settings.endpoint_url,
        force_path_style=settings.force_path_style,
    )
    logger.debug("Resolved bucket %s in region %s", bucket, region)
    return ResolvedInput(s3_config=s3_config, bucket=bucket, identity_id=session.identity_id)  # type: ignore[arg-type]
