"""Collaborators consumed by the delivery service."""
from __future__ import annotations

from typing import Any, Iterable, Protocol

from azure.core.credentials import AccessToken


class PathService(Protocol):
    """Maps a content item to the paths it is publicly served at."""

    def generate_paths(self, item: Any) -> Iterable[str]:
        ...


class CredentialProvider(Protocol):
    """Exchanges client credentials for a bearer token."""

    def acquire_token(
        self, authority: str, client_id: str, client_secret: str
    ) -> AccessToken:
        ...


class CdnSettings(Protocol):
    authority: str
    client_id: str
    client_secret: str
    subscription_id: str
    resource_group_name: str
    profile_name: str
    endpoint_name: str
