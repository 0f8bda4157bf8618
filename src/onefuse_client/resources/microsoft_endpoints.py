from __future__ import annotations

from onefuse_client.client import (
    MODULE_ENDPOINT_RESOURCE_TYPE,
    OneFuseClient,
    decode_json,
    parse_record,
)
from onefuse_client.core.hal import get_embedded_list
from onefuse_client.models import MicrosoftEndpoint
from onefuse_client.resources.capabilities import Verb, require, unsupported


def get_microsoft_endpoint_by_name(
    client: OneFuseClient, name: str
) -> MicrosoftEndpoint:
    """
    Look up a Microsoft endpoint through the server-side name filter.

    The filter is trusted as-is: the first element of the filtered collection
    is returned, or an empty MicrosoftEndpoint when nothing matched.
    """
    require(MODULE_ENDPOINT_RESOURCE_TYPE, Verb.READ_BY_NAME)
    url = (
        f"{client.collection_url(MODULE_ENDPOINT_RESOURCE_TYPE)}"
        f"?filter=name:{name};type:microsoft"
    )
    response = client.get(url, resource=MODULE_ENDPOINT_RESOURCE_TYPE)
    payload = decode_json(response)

    # Collections wrap matches in _embedded; a bare object is the record itself.
    if "_embedded" in payload:
        matches = get_embedded_list(payload, MODULE_ENDPOINT_RESOURCE_TYPE)
        payload = matches[0] if matches else {}

    return parse_record(MicrosoftEndpoint, payload)


def create_microsoft_endpoint(
    client: OneFuseClient, new_endpoint: MicrosoftEndpoint
) -> MicrosoftEndpoint:
    raise unsupported(MODULE_ENDPOINT_RESOURCE_TYPE, Verb.CREATE)


def get_microsoft_endpoint(
    client: OneFuseClient, endpoint_id: int
) -> MicrosoftEndpoint:
    raise unsupported(MODULE_ENDPOINT_RESOURCE_TYPE, Verb.READ)


def update_microsoft_endpoint(
    client: OneFuseClient, endpoint_id: int, updated_endpoint: MicrosoftEndpoint
) -> MicrosoftEndpoint:
    raise unsupported(MODULE_ENDPOINT_RESOURCE_TYPE, Verb.UPDATE)


def delete_microsoft_endpoint(client: OneFuseClient, endpoint_id: int) -> None:
    raise unsupported(MODULE_ENDPOINT_RESOURCE_TYPE, Verb.DELETE)


__all__ = [
    "get_microsoft_endpoint_by_name",
    "create_microsoft_endpoint",
    "get_microsoft_endpoint",
    "update_microsoft_endpoint",
    "delete_microsoft_endpoint",
]
