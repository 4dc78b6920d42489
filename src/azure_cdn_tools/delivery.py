"""Purges content from an Azure CDN endpoint."""
from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Iterable

from azure.core.credentials import TokenCredential
from azure.mgmt.cdn import CdnManagementClient
from azure.mgmt.cdn.models import PurgeParameters

from azure_cdn_tools.errors import ConfigurationError
from azure_cdn_tools.models.settings import DEFAULT_MANAGEMENT_RESOURCE, REQUIRED_FIELDS
from azure_cdn_tools.ports import CdnSettings, CredentialProvider, PathService
from azure_cdn_tools.utils.credentials import (
    ClientSecretTokenProvider,
    StaticTokenCredential,
)
from azure_cdn_tools.utils.uris import ROOT_PATH

log = logging.getLogger(__name__)

ClientFactory = Callable[[TokenCredential, str], CdnManagementClient]


def create_cdn_client(credential: TokenCredential, subscription_id: str) -> CdnManagementClient:
    return CdnManagementClient(credential=credential, subscription_id=subscription_id)


def validate_settings(settings: CdnSettings) -> None:
    """Raise ConfigurationError if any required setting is missing or empty."""
    missing = [name for name in REQUIRED_FIELDS if not getattr(settings, name, None)]
    if missing:
        raise ConfigurationError(
            f"settings is not fully instantiated, missing: {', '.join(missing)}", missing
        )


class AzureDeliveryService:
    def __init__(
        self,
        path_service: PathService,
        settings: CdnSettings,
        credential_provider: CredentialProvider | None = None,
        client_factory: ClientFactory = create_cdn_client,
    ):
        """
        Dispatches purge requests for content items.

        Args:
            path_service: Generates the public paths of an item.
            settings: Identity and CDN endpoint settings, all required.
            credential_provider: Fetches the bearer token, defaults to the
                client credentials grant against `settings.authority`.
            client_factory: Builds the management client from a credential
                and subscription id.
        """
        validate_settings(settings)

        self.path_service = path_service
        self.settings = settings
        self.credential_provider = credential_provider or ClientSecretTokenProvider(
            resource=getattr(settings, "management_resource", DEFAULT_MANAGEMENT_RESOURCE)
        )
        self.client_factory = client_factory

        self._cdn_client: CdnManagementClient | None = None
        self._cdn_client_lock = threading.Lock()

    @property
    def cdn_client(self) -> CdnManagementClient:
        """
        Management client for purge requests, created on first access.

        Authenticates once. The token is not renewed, so a long-lived
        service starts failing with 401 after the token expires.
        """
        if self._cdn_client is None:
            with self._cdn_client_lock:
                if self._cdn_client is None:
                    credential = self.get_service_credentials(
                        self.settings.authority,
                        self.settings.client_id,
                        self.settings.client_secret,
                    )
                    self._cdn_client = self.client_factory(
                        credential, self.settings.subscription_id
                    )
        return self._cdn_client

    def get_service_credentials(
        self, authority: str, client_id: str, client_secret: str
    ) -> TokenCredential:
        token = self.credential_provider.acquire_token(authority, client_id, client_secret)
        return StaticTokenCredential(token)

    def collect_urls(self, items: Iterable[Any]) -> list[str]:
        """Distinct paths of all items, in first-seen order, without the root path."""
        urls = list(
            dict.fromkeys(
                url for item in items for url in self.path_service.generate_paths(item)
            )
        )

        if ROOT_PATH in urls:
            urls.remove(ROOT_PATH)

        return urls

    def purge(self, items: Iterable[Any]) -> None:
        """Purge the items from the CDN endpoint."""
        items = list(items)
        if not items:
            return

        urls = self.collect_urls(items)
        log.debug("Collected %d path(s) from %d item(s): %s", len(urls), len(items), urls)
        self.purge_urls(urls)

    def purge_urls(self, urls: list[str]) -> None:
        """Send one purge request for already collected paths, even if empty."""
        log.info(
            "Purging %d path(s) from %s/%s/%s",
            len(urls),
            self.settings.resource_group_name,
            self.settings.profile_name,
            self.settings.endpoint_name,
        )
        poller = self.cdn_client.endpoints.begin_purge_content(
            resource_group_name=self.settings.resource_group_name,
            profile_name=self.settings.profile_name,
            endpoint_name=self.settings.endpoint_name,
            content_file_paths=PurgeParameters(content_paths=urls),
        )
        poller.result()
