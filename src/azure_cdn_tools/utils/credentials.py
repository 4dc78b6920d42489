"""Client credential authentication against an identity authority."""
from __future__ import annotations

import logging
from typing import Callable
from urllib import parse

from azure.core.credentials import AccessToken
from azure.identity import ClientSecretCredential

from azure_cdn_tools.errors import ConfigurationError
from azure_cdn_tools.models.settings import DEFAULT_MANAGEMENT_RESOURCE

log = logging.getLogger(__name__)

CredentialFactory = Callable[..., ClientSecretCredential]


def split_authority(authority: str) -> tuple[str, str]:
    """Split https://login.microsoftonline.com/{tenant} into host and tenant."""
    parts = parse.urlsplit(authority.strip())
    tenant = parts.path.strip("/")
    if not parts.scheme or not parts.netloc or not tenant or "/" in tenant:
        raise ConfigurationError(
            f"authority {authority!r} must look like https://{{host}}/{{tenant}}",
            ["authority"],
        )
    return f"{parts.scheme}://{parts.netloc}", tenant


def resource_scope(resource: str) -> str:
    return f"{resource.rstrip('/')}/.default"


class ClientSecretTokenProvider:
    def __init__(
        self,
        resource: str = DEFAULT_MANAGEMENT_RESOURCE,
        credential_factory: CredentialFactory = ClientSecretCredential,
    ):
        """Fetches tokens for `resource` using the client credentials grant."""
        self.resource = resource
        self.credential_factory = credential_factory

    def acquire_token(
        self, authority: str, client_id: str, client_secret: str
    ) -> AccessToken:
        """Request a bearer token. Blocks until the authority responds."""
        host, tenant_id = split_authority(authority)
        log.info("Requesting access token for tenant %s from %s", tenant_id, host)

        with self.credential_factory(
            tenant_id=tenant_id,
            client_id=client_id,
            client_secret=client_secret,
            authority=host,
        ) as credential:
            return credential.get_token(resource_scope(self.resource))


class StaticTokenCredential:
    """
    Credential that always hands out the same token.
    The token is never renewed, once it expires requests fail with 401.
    """

    def __init__(self, token: AccessToken):
        self.token = token

    def get_token(self, *scopes: str, **kwargs) -> AccessToken:
        return self.token
