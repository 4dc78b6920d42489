import keyring
import pytest

SETTINGS = {
    "authority": "https://login.microsoftonline.com/tenant-id",
    "client_id": "client-id",
    "client_secret": "client-secret",
    "subscription_id": "subscription-id",
    "resource_group_name": "web-rg",
    "profile_name": "web-cdn",
    "endpoint_name": "web-endpoint",
}


@pytest.fixture(autouse=True)
def keyring_store(monkeypatch) -> dict:
    """In-memory keyring, shared by all tests in place of the OS backend."""
    store = {}

    def get_password(service, username):
        return store.get((service, username))

    def set_password(service, username, password):
        store[(service, username)] = password

    monkeypatch.setattr(keyring, "get_password", get_password)
    monkeypatch.setattr(keyring, "set_password", set_password)
    return store


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (*SETTINGS, "management_resource", "public_root", "verbose"):
        monkeypatch.delenv(f"CDN_{name.upper()}", raising=False)


@pytest.fixture
def settings_values() -> dict:
    return dict(SETTINGS)


@pytest.fixture
def azure_env(monkeypatch, settings_values):
    for name, value in settings_values.items():
        monkeypatch.setenv(f"CDN_{name.upper()}", value)
