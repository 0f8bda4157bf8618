"""
Which verbs each resource type supports.

Stubbed verbs are declared here rather than discovered at call time:
`require` raises UnsupportedOperationError before any request is built.
"""

from enum import Enum
from typing import Dict, FrozenSet

from onefuse_client.client import (
    MICROSOFT_AD_POLICY_RESOURCE_TYPE,
    MODULE_ENDPOINT_RESOURCE_TYPE,
    NAMING_RESOURCE_TYPE,
    WORKSPACE_RESOURCE_TYPE,
)
from onefuse_client.core.errors import UnsupportedOperationError


class Verb(str, Enum):
    CREATE = "create"
    READ = "read"
    READ_BY_NAME = "read_by_name"
    UPDATE = "update"
    DELETE = "delete"


CAPABILITIES: Dict[str, FrozenSet[Verb]] = {
    NAMING_RESOURCE_TYPE: frozenset({Verb.CREATE, Verb.READ, Verb.DELETE}),
    MODULE_ENDPOINT_RESOURCE_TYPE: frozenset({Verb.READ_BY_NAME}),
    MICROSOFT_AD_POLICY_RESOURCE_TYPE: frozenset(
        {Verb.CREATE, Verb.READ, Verb.DELETE}
    ),
    WORKSPACE_RESOURCE_TYPE: frozenset({Verb.READ_BY_NAME}),
}


def supports(resource_type: str, verb: Verb) -> bool:
    return verb in CAPABILITIES.get(resource_type, frozenset())


def unsupported(resource_type: str, verb: Verb) -> UnsupportedOperationError:
    return UnsupportedOperationError(resource_type, verb.value)


def require(resource_type: str, verb: Verb) -> None:
    if not supports(resource_type, verb):
        raise unsupported(resource_type, verb)


__all__ = ["Verb", "CAPABILITIES", "supports", "unsupported", "require"]
