from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from .types import BucketInfo, Credentials

if TYPE_CHECKING:
    from .auth import AuthProvider


class BucketSettings(BaseModel):
    """A registered bucket, addressable by its friendly name."""

    bucket_name: str
    region: str

    def to_bucket_info(self) -> BucketInfo:
        return BucketInfo(bucket_name=self.bucket_name, region=self.region)


class S3Settings(BaseSettings):
    """Settings for the storage accessor.

    You can adapt the following settings in your environment variables (or using and .env file):
    - S3_ENDPOINT_URL: The URL of an S3-compatible server. Leave unset for AWS
    - S3_REGION: The region of the default bucket
    - S3_BUCKET: The default bucket
    - S3_BUCKETS: JSON mapping of friendly names to {"bucket_name": ..., "region": ...}
    - S3_DEFAULT_ACCESS_LEVEL: guest, private or protected
    - S3_AWS_ACCESS_KEY_ID: The access key ID
    - S3_AWS_SECRET_ACCESS_KEY: The secret access key
    - S3_AWS_SESSION_TOKEN: Optional session token
    - S3_IDENTITY_ID: Identity used for private and protected prefixes

    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="S3_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # The endpoint URL of an S3-compatible server
    endpoint_url: str | None = None

    # Use path-style addressing (needed by most S3-compatible servers)
    force_path_style: bool = False

    # The region of the default bucket
    region: str | None = None

    # The default bucket
    bucket: str | None = None

    # Additional buckets, addressable by name through the ``bucket`` option
    buckets: dict[str, BucketSettings] = {}

    # Access level used when a call does not specify one
    default_access_level: Literal["guest", "private", "protected"] = "guest"

    # The access key ID. When unset, boto3's default credential chain is used
    aws_access_key_id: str | None = None

    # The secret access key
    aws_secret_access_key: str | None = None

    # Optional session token for temporary credentials
    aws_session_token: str | None = None

    # Identity of the caller, used to build private/protected prefixes
    identity_id: str | None = None

    def get_bucket(self, name: str) -> BucketInfo | None:
        """Look up a registered bucket by its friendly name."""
        bucket = self.buckets.get(name)
        return bucket.to_bucket_info() if bucket is not None else None

    def create_auth_provider(self) -> AuthProvider:
        """Create an auth session provider from the settings."""

        from .auth import Boto3AuthProvider, StaticAuthProvider

        if self.aws_access_key_id and self.aws_secret_access_key:
            credentials = Credentials(
                access_key_id=self.aws_access_key_id,
                secret_access_key=self.aws_secret_access_key,
                session_token=self.aws_session_token,
            )
            return StaticAuthProvider(credentials, identity_id=self.identity_id)
        return Boto3AuthProvider(identity_id=self.identity_id)
