"""Type definitions for s3storage."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Literal, Protocol, TypedDict, Union

AccessLevel = Literal["guest", "private", "protected"]

InputType = Literal["key", "path"]


class BucketInfo(TypedDict):
    """Explicit bucket target, bypassing the configured default."""

    bucket_name: str
    region: str


# A bucket override is either a registered bucket name or an explicit BucketInfo
BucketOption = Union[str, BucketInfo]


@dataclass(frozen=True)
class Credentials:
    """AWS credentials used to sign a single request."""

    access_key_id: str
    secret_access_key: str
    session_token: str | None = None


@dataclass
class AuthSession:
    """Result of asking the identity layer for the current session."""

    credentials: Credentials | None = None
    identity_id: str | None = None


class AuthSessionProvider(Protocol):
    """Anything able to hand out the current :class:`AuthSession`."""

    def fetch_auth_session(self) -> AuthSession: ...


# Per-location credentials, used instead of the auth session when supplied
LocationCredentialsProvider = Callable[[], Credentials]

# Path input may be computed from the caller's identity id
PathInput = Union[str, Callable[..., str]]


class GetPropertiesOptions(TypedDict, total=False):
    """Per-call options for :meth:`S3Storage.get_properties`."""

    access_level: AccessLevel
    target_identity_id: str  # only honoured for "protected"
    bucket: BucketOption
    expected_bucket_owner: str  # 12-digit AWS account id
    use_accelerate_endpoint: bool
    location_credentials_provider: LocationCredentialsProvider


@dataclass
class ResolvedS3Config:
    """Client configuration derived for one call."""

    credentials: Credentials
    region: str
    user_agent_value: str
    use_accelerate_endpoint: bool | None = None
    endpoint_url: str | None = None
    force_path_style: bool = False


@dataclass
class ResolvedInput:
    """Output of config resolution: client config, target bucket and caller identity."""

    s3_config: ResolvedS3Config
    bucket: str
    identity_id: str | None = None


class ItemProperties(TypedDict, total=False):
    """Normalized HeadObject result.

    Exactly one of ``key`` or ``path`` is present, mirroring how the object
    was addressed.
    """

    key: str
    path: str
    size: int | None
    content_type: str | None
    etag: str | None
    metadata: dict[str, str] | None
    last_modified: datetime | None
    version_id: str | None


# Raw kwargs forwarded to boto3's head_object
HeadObjectParams = dict[str, Any]
