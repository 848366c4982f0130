"""Shared fixtures for s3storage tests."""

from __future__ import annotations

import os
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from s3storage import Credentials, S3Settings, S3Storage, StaticAuthProvider

BUCKET = "bucket"
REGION = "region"
DEFAULT_IDENTITY_ID = "defaultIdentityId"
LAST_MODIFIED = datetime(1980, 1, 1, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep S3_* variables from the surrounding shell out of every test."""
    for name in list(os.environ):
        if name.upper().startswith("S3_"):
            monkeypatch.delenv(name)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(
        access_key_id="accessKeyId",
        secret_access_key="secretAccessKey",
        session_token="sessionToken",
    )


@pytest.fixture
def settings() -> S3Settings:
    return S3Settings(
        _env_file=None,
        bucket=BUCKET,
        region=REGION,
        buckets={"default-bucket": {"bucket_name": BUCKET, "region": REGION}},
    )


@pytest.fixture
def auth_provider(credentials: Credentials) -> StaticAuthProvider:
    return StaticAuthProvider(credentials, identity_id=DEFAULT_IDENTITY_ID)


@pytest.fixture
def head_response() -> dict:
    return {
        "ContentLength": 100,
        "ContentType": "text/plain",
        "ETag": "etag",
        "LastModified": LAST_MODIFIED,
        "Metadata": {"key": "value"},
        "VersionId": "version-id",
        "ResponseMetadata": {"HTTPStatusCode": 200},
    }


@pytest.fixture
def client_factory(head_response: dict) -> MagicMock:
    """Client factory returning a mock client whose head_object succeeds."""
    factory = MagicMock()
    factory.return_value.head_object.return_value = head_response
    return factory


@pytest.fixture
def storage(settings: S3Settings, auth_provider: StaticAuthProvider, client_factory: MagicMock) -> S3Storage:
    return S3Storage(settings, auth_provider, client_factory=client_factory)
