"""
Resource operations for the OneFuse API.

Each function takes a OneFuseClient first and performs a single exchange
(the custom name create may resolve the Default workspace first).
"""

from .capabilities import CAPABILITIES, Verb, supports
from .custom_names import delete_custom_name, generate_custom_name, get_custom_name
from .microsoft_ad_policies import (
    create_microsoft_ad_policy,
    delete_microsoft_ad_policy,
    get_microsoft_ad_policy,
    update_microsoft_ad_policy,
)
from .microsoft_endpoints import (
    create_microsoft_endpoint,
    delete_microsoft_endpoint,
    get_microsoft_endpoint,
    get_microsoft_endpoint_by_name,
    update_microsoft_endpoint,
)
from .workspaces import DEFAULT_WORKSPACE_NAME, find_default_workspace_id

__all__ = [
    "CAPABILITIES",
    "Verb",
    "supports",
    "DEFAULT_WORKSPACE_NAME",
    "find_default_workspace_id",
    "generate_custom_name",
    "get_custom_name",
    "delete_custom_name",
    "create_microsoft_endpoint",
    "get_microsoft_endpoint",
    "get_microsoft_endpoint_by_name",
    "update_microsoft_endpoint",
    "delete_microsoft_endpoint",
    "create_microsoft_ad_policy",
    "get_microsoft_ad_policy",
    "update_microsoft_ad_policy",
    "delete_microsoft_ad_policy",
]
