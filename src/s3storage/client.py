"""boto3 client construction and the HeadObject call."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable

import boto3
from botocore.client import BaseClient
from botocore.config import Config

from . import __version__
from .types import HeadObjectParams, ResolvedS3Config

logger = logging.getLogger(__name__)

ClientFactory = Callable[[ResolvedS3Config], BaseClient]


class StorageAction(str, Enum):
    """Storage operations, as reported in the user agent."""

    GET_PROPERTIES = "GetProperties"


def get_storage_user_agent_value(action: StorageAction | str) -> str:
    """Build the user agent suffix sent with every request of *action*."""
    action_name = action.value if isinstance(action, StorageAction) else action
    return f"s3storage/{__version__} storage/{action_name}"


def create_s3_client(config: ResolvedS3Config) -> BaseClient:
    """Create a boto3 S3 client for one resolved configuration.

    Parameters
    ----------
    config : ResolvedS3Config
        Credentials, region, user agent and endpoint options for the call.

    Returns
    -------
    BaseClient
    """
    s3_options: dict[str, Any] = {}
    if config.use_accelerate_endpoint is not None:
        s3_options["use_accelerate_endpoint"] = config.use_accelerate_endpoint
    if config.force_path_style:
        s3_options["addressing_style"] = "path"

    return boto3.client(
        "s3",
        endpoint_url=config.endpoint_url,
        region_name=config.region,
        aws_access_key_id=config.credentials.access_key_id,
        aws_secret_access_key=config.credentials.secret_access_key,
        aws_session_token=config.credentials.session_token,
        config=Config(user_agent_extra=config.user_agent_value, s3=s3_options or None),
    )


def head_object(
    config: ResolvedS3Config,
    params: HeadObjectParams,
    client_factory: ClientFactory = create_s3_client,
) -> dict[str, Any]:
    """Issue a HeadObject request.

    Backend errors (``botocore.exceptions.ClientError``) are not caught.

    Parameters
    ----------
    config : ResolvedS3Config
        Per-call client configuration.
    params : HeadObjectParams
        Keyword arguments for ``head_object`` (``Bucket``, ``Key``, ...).
    client_factory : ClientFactory
        Builds the client from *config*.

    Returns
    -------
    dict[str, Any]
        Raw HeadObject response.
    """
    client = client_factory(config)
    logger.debug("HeadObject %s/%s in %s", params.get("Bucket"), params.get("Key"), config.region)
    return client.head_object(**params)
