from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from onefuse_client.client import (
    NAMING_POLICY_RESOURCE_TYPE,
    NAMING_RESOURCE_TYPE,
    WORKSPACE_RESOURCE_TYPE,
    OneFuseClient,
    decode_record,
    relative_ref,
)
from onefuse_client.core.observability import log_event
from onefuse_client.models import CustomName
from onefuse_client.resources.capabilities import Verb, require
from onefuse_client.resources.workspaces import find_default_workspace_id

log = logging.getLogger("onefuse_client.resources.custom_names")


def generate_custom_name(
    client: OneFuseClient,
    dns_suffix: str,
    naming_policy_id: int | str,
    workspace_id: str = "",
    template_properties: Optional[Dict[str, Any]] = None,
) -> CustomName:
    """
    Reserve a custom name from a naming policy.

    An empty workspace_id falls back to the Default workspace, resolved once
    before the create is sent. A 2xx reply that does not carry a name record
    raises OneFuseDecodeError.
    """
    require(NAMING_RESOURCE_TYPE, Verb.CREATE)
    url = client.collection_url(NAMING_RESOURCE_TYPE)
    log.info(
        "reserving custom name from %s dnsSuffix=%s",
        url,
        dns_suffix,
        extra={"resource": NAMING_RESOURCE_TYPE},
    )

    if not workspace_id:
        workspace_id = find_default_workspace_id(client)

    body = {
        "namingPolicy": relative_ref(NAMING_POLICY_RESOURCE_TYPE, naming_policy_id),
        "templateProperties": template_properties or {},
        "workspace": relative_ref(WORKSPACE_RESOURCE_TYPE, workspace_id),
    }
    response = client.post(url, json=body, resource=NAMING_RESOURCE_TYPE)
    custom_name = decode_record(CustomName, response, required=True)

    log_event(
        "custom_name_reserved",
        custom_name_id=custom_name.id,
        custom_name=custom_name.name,
        dns_suffix=custom_name.dns_suffix,
    )
    return custom_name


def get_custom_name(client: OneFuseClient, custom_name_id: int) -> CustomName:
    require(NAMING_RESOURCE_TYPE, Verb.READ)
    response = client.get(
        client.item_url(NAMING_RESOURCE_TYPE, custom_name_id),
        resource=NAMING_RESOURCE_TYPE,
    )
    return decode_record(CustomName, response)


def delete_custom_name(client: OneFuseClient, custom_name_id: int) -> None:
    require(NAMING_RESOURCE_TYPE, Verb.DELETE)
    client.delete(
        client.item_url(NAMING_RESOURCE_TYPE, custom_name_id),
        resource=NAMING_RESOURCE_TYPE,
    )


__all__ = ["generate_custom_name", "get_custom_name", "delete_custom_name"]
