from __future__ import annotations

import logging
from typing import Any

import dotenv
import keyring.errors
from pydantic.v1 import BaseSettings, ValidationError, validator

from azure_cdn_tools.errors import ConfigurationError
from azure_cdn_tools.models.keyring_config import ConfigKey, KeyringConfig

log = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "authority",
    "client_id",
    "client_secret",
    "subscription_id",
    "resource_group_name",
    "profile_name",
    "endpoint_name",
)

DEFAULT_MANAGEMENT_RESOURCE = "https://management.core.windows.net/"

KEYRING_FIELDS = {
    ConfigKey.CLIENT_ID: "client_id",
    ConfigKey.CLIENT_SECRET: "client_secret",
}


def keyring_settings(settings: BaseSettings) -> dict[str, Any]:
    """Secrets stored with `config set`, used when the environment has none."""
    try:
        config = KeyringConfig.load_from_keyring()
    except keyring.errors.KeyringError as e:
        log.debug("Keyring unavailable: %s", e)
        return {}

    return {
        field: config[key.value]
        for key, field in KEYRING_FIELDS.items()
        if config.get(key.value)
    }


class AzureSettings(BaseSettings):
    # identity
    authority: str
    client_id: str
    client_secret: str

    # cdn endpoint
    subscription_id: str
    resource_group_name: str
    profile_name: str
    endpoint_name: str

    management_resource: str = DEFAULT_MANAGEMENT_RESOURCE

    # public host, only used to display purged urls
    public_root: str | None = None

    # debug
    verbose: bool = False

    @validator(*REQUIRED_FIELDS)
    def not_empty(cls, value: str, field):
        if not value:
            raise ValueError(f"{field.name} must not be empty")
        return value

    def masked(self) -> dict[str, Any]:
        """Settings as a dict with the client secret hidden."""
        data = self.dict()
        data["client_secret"] = "********"
        return data

    class Config:
        env_file = dotenv.find_dotenv(usecwd=True)
        env_prefix = "cdn_"
        allow_mutation = False

        @classmethod
        def customise_sources(cls, init_settings, env_settings, file_secret_settings):
            return init_settings, env_settings, keyring_settings, file_secret_settings


def load_settings(**values: Any) -> AzureSettings:
    """Load settings from arguments, environment, .env and keyring."""
    try:
        return AzureSettings(**values)
    except ValidationError as e:
        fields = [str(err["loc"][0]) for err in e.errors()]
        raise ConfigurationError(
            f"Azure settings are not fully configured: {', '.join(fields)}", fields
        ) from e
