from __future__ import annotations

import enum
import json
import keyring


class ConfigKey(enum.StrEnum):
    CLIENT_ID = "CLIENT_ID"
    CLIENT_SECRET = "CLIENT_SECRET"


class KeyringConfig(dict[str, str]):
    KR_SERVICE_NAME: str = "azure-cdn-tools"
    KR_USERNAME: str = "config"

    def __enter__(self) -> KeyringConfig:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.save()

    @classmethod
    def load_from_keyring(cls) -> KeyringConfig:
        """Load the configuration from the keyring."""
        json_str = keyring.get_password(cls.KR_SERVICE_NAME, cls.KR_USERNAME)
        if json_str is None:
            return cls()
        return cls(**json.loads(json_str))

    def save(self):
        """Save the configuration to the keyring."""
        json_str = json.dumps(self)
        keyring.set_password(self.KR_SERVICE_NAME, self.KR_USERNAME, json_str)

    def to_keys_json(self) -> str:
        """Show which keys are configured without revealing values."""
        result = {}
        for key in ConfigKey:
            if key.value in self:
                if self[key.value]:
                    # valid key
                    result[key.value] = "********"
                else:
                    # empty key
                    result[key.value] = ""
            else:
                # missing key
                result[key.value] = "(not set)"

        return json.dumps(result, indent=2)
