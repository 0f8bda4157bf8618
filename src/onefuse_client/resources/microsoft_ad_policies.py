from __future__ import annotations

import logging

from onefuse_client.client import (
    MICROSOFT_AD_POLICY_RESOURCE_TYPE,
    OneFuseClient,
    decode_record,
)
from onefuse_client.models import MicrosoftAdPolicy
from onefuse_client.resources.capabilities import Verb, require, unsupported

log = logging.getLogger("onefuse_client.resources.microsoft_ad_policies")


def create_microsoft_ad_policy(
    client: OneFuseClient, new_policy: MicrosoftAdPolicy
) -> MicrosoftAdPolicy:
    """POST a policy; the reply must carry the created record."""
    require(MICROSOFT_AD_POLICY_RESOURCE_TYPE, Verb.CREATE)
    response = client.post(
        client.collection_url(MICROSOFT_AD_POLICY_RESOURCE_TYPE),
        json=new_policy.to_create_payload(),
        resource=MICROSOFT_AD_POLICY_RESOURCE_TYPE,
    )
    policy = decode_record(MicrosoftAdPolicy, response, required=True)
    log.info(
        "microsoft ad policy created id=%s name=%s",
        policy.id,
        policy.name,
        extra={"resource": MICROSOFT_AD_POLICY_RESOURCE_TYPE},
    )
    return policy


def get_microsoft_ad_policy(client: OneFuseClient, policy_id: int) -> MicrosoftAdPolicy:
    require(MICROSOFT_AD_POLICY_RESOURCE_TYPE, Verb.READ)
    response = client.get(
        client.item_url(MICROSOFT_AD_POLICY_RESOURCE_TYPE, policy_id),
        resource=MICROSOFT_AD_POLICY_RESOURCE_TYPE,
    )
    return decode_record(MicrosoftAdPolicy, response)


def update_microsoft_ad_policy(
    client: OneFuseClient, policy_id: int, updated_policy: MicrosoftAdPolicy
) -> MicrosoftAdPolicy:
    raise unsupported(MICROSOFT_AD_POLICY_RESOURCE_TYPE, Verb.UPDATE)


def delete_microsoft_ad_policy(client: OneFuseClient, policy_id: int) -> None:
    require(MICROSOFT_AD_POLICY_RESOURCE_TYPE, Verb.DELETE)
    client.delete(
        client.item_url(MICROSOFT_AD_POLICY_RESOURCE_TYPE, policy_id),
        resource=MICROSOFT_AD_POLICY_RESOURCE_TYPE,
    )


__all__ = [
    "create_microsoft_ad_policy",
    "get_microsoft_ad_policy",
    "update_microsoft_ad_policy",
    "delete_microsoft_ad_policy",
]
