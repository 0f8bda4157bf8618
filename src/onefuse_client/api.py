from __future__ import annotations

from typing import Any, Dict, Optional, Union

from . import resources
from .client import OneFuseClient
from .core.config import Config, load_env_config
from .models import CustomName, MicrosoftAdPolicy, MicrosoftEndpoint


class OneFuseAPIClient:
    """
    One method per (resource, verb) pair over a shared OneFuseClient.

    Holds nothing but the client; every call is a fresh exchange, so a single
    instance can serve concurrent callers.
    """

    def __init__(self, config_or_client: Union[Config, OneFuseClient], **kwargs: Any):
        if isinstance(config_or_client, OneFuseClient):
            self.client = config_or_client
            self._owns_client = False
        else:
            self.client = OneFuseClient(config_or_client, **kwargs)
            self._owns_client = True

    @classmethod
    def from_env(cls, **kwargs: Any) -> "OneFuseAPIClient":
        return cls(load_env_config(), **kwargs)

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "OneFuseAPIClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # --- Custom names ---

    def generate_custom_name(
        self,
        dns_suffix: str,
        naming_policy_id: int | str,
        workspace_id: str = "",
        template_properties: Optional[Dict[str, Any]] = None,
    ) -> CustomName:
        return resources.generate_custom_name(
            self.client, dns_suffix, naming_policy_id, workspace_id, template_properties
        )

    def get_custom_name(self, custom_name_id: int) -> CustomName:
        return resources.get_custom_name(self.client, custom_name_id)

    def delete_custom_name(self, custom_name_id: int) -> None:
        resources.delete_custom_name(self.client, custom_name_id)

    # --- Microsoft endpoints ---

    def create_microsoft_endpoint(
        self, new_endpoint: MicrosoftEndpoint
    ) -> MicrosoftEndpoint:
        return resources.create_microsoft_endpoint(self.client, new_endpoint)

    def get_microsoft_endpoint(self, endpoint_id: int) -> MicrosoftEndpoint:
        return resources.get_microsoft_endpoint(self.client, endpoint_id)

    def get_microsoft_endpoint_by_name(self, name: str) -> MicrosoftEndpoint:
        return resources.get_microsoft_endpoint_by_name(self.client, name)

    def update_microsoft_endpoint(
        self, endpoint_id: int, updated_endpoint: MicrosoftEndpoint
    ) -> MicrosoftEndpoint:
        return resources.update_microsoft_endpoint(
            self.client, endpoint_id, updated_endpoint
        )

    def delete_microsoft_endpoint(self, endpoint_id: int) -> None:
        resources.delete_microsoft_endpoint(self.client, endpoint_id)

    # --- Microsoft AD policies ---

    def create_microsoft_ad_policy(
        self, new_policy: MicrosoftAdPolicy
    ) -> MicrosoftAdPolicy:
        return resources.create_microsoft_ad_policy(self.client, new_policy)

    def get_microsoft_ad_policy(self, policy_id: int) -> MicrosoftAdPolicy:
        return resources.get_microsoft_ad_policy(self.client, policy_id)

    def update_microsoft_ad_policy(
        self, policy_id: int, updated_policy: MicrosoftAdPolicy
    ) -> MicrosoftAdPolicy:
        return resources.update_microsoft_ad_policy(
            self.client, policy_id, updated_policy
        )

    def delete_microsoft_ad_policy(self, policy_id: int) -> None:
        resources.delete_microsoft_ad_policy(self.client, policy_id)


__all__ = ["OneFuseAPIClient"]
