from __future__ import annotations

import logging

from onefuse_client.client import WORKSPACE_RESOURCE_TYPE, OneFuseClient, decode_record
from onefuse_client.core.errors import DefaultWorkspaceNotFoundError
from onefuse_client.models import WorkspacesListResponse

DEFAULT_WORKSPACE_NAME = "Default"

log = logging.getLogger("onefuse_client.resources.workspaces")


def find_default_workspace_id(client: OneFuseClient) -> str:
    """
    Resolve the id of the workspace named exactly "Default".

    The remote ordering is authoritative: with several matches the first one
    wins. No match means the environment is misconfigured; raises
    DefaultWorkspaceNotFoundError so dependent creates never go out.
    """
    url = (
        f"{client.collection_url(WORKSPACE_RESOURCE_TYPE)}"
        f"?filter=name.exact:{DEFAULT_WORKSPACE_NAME}"
    )
    response = client.get(url, resource=WORKSPACE_RESOURCE_TYPE)
    listing = decode_record(WorkspacesListResponse, response)

    if not listing.workspaces:
        raise DefaultWorkspaceNotFoundError("Unable to find default workspace.")

    workspace_id = listing.workspaces[0].id
    if not workspace_id:
        raise DefaultWorkspaceNotFoundError(
            "Default workspace listing returned an entry without an id."
        )
    log.debug(
        "default workspace resolved",
        extra={"workspace_id": workspace_id, "resource": WORKSPACE_RESOURCE_TYPE},
    )
    return workspace_id


__all__ = ["DEFAULT_WORKSPACE_NAME", "find_default_workspace_id"]
