from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .core.hal import id_segment_from_href


class _Value(BaseModel):
    """Immutable decoded value; JSON nulls fall back to the field default."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class LinkRef(_Value):
    href: Optional[str] = None
    title: Optional[str] = None


class Workspace(_Value):
    name: str = ""
    id: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        # OneFuse returns numeric ids; the client treats them as opaque tokens.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @classmethod
    def from_link(cls, link: Optional[LinkRef]) -> Optional["Workspace"]:
        if link is None:
            return None
        return cls(name=link.title or "", id=id_segment_from_href(link.href) or "")


class _WorkspacesEmbedded(_Value):
    workspaces: List[Workspace] = Field(default_factory=list)


class WorkspacesListResponse(_Value):
    """Envelope of a filtered workspace collection; only used while resolving."""

    embedded: _WorkspacesEmbedded = Field(
        default_factory=_WorkspacesEmbedded, alias="_embedded"
    )

    @property
    def workspaces(self) -> List[Workspace]:
        return self.embedded.workspaces


class _Record(_Value):
    """Remote record addressed by a server-issued integer id."""

    id: int = 0
    name: str = ""

    @property
    def is_empty(self) -> bool:
        return self.id == 0 and not self.name


class CustomName(_Record):
    version: int = 0
    dns_suffix: str = Field(default="", alias="dnsSuffix")


class ComputerNameLetterCase(str, Enum):
    AS_IS = "asIs"
    UPPER = "upper"
    LOWER = "lower"


# --- Link references ---


class EndpointLinks(_Value):
    workspace: Optional[LinkRef] = None


class EndpointLinkMeta(_Value):
    name: str = ""
    url: str = ""


class PolicyLinks(_Value):
    workspace: Optional[LinkRef] = None
    microsoft_endpoint: Optional[LinkRef] = Field(
        default=None, alias="microsoftEndpoint"
    )


# --- Resources ---


class MicrosoftEndpoint(_Record):
    description: str = ""
    host: str = ""
    port: int = 0
    use_tls: bool = Field(default=False, alias="ssl")
    directory_version: int = Field(default=0, alias="microsoftVersion")
    links: EndpointLinks = Field(default_factory=EndpointLinks, alias="_links")

    @property
    def workspace_ref(self) -> Optional[Workspace]:
        return Workspace.from_link(self.links.workspace)


class MicrosoftAdPolicy(_Record):
    description: str = ""
    microsoft_endpoint: str = Field(default="", alias="microsoftEndpoint")
    computer_name_letter_case: Optional[ComputerNameLetterCase] = Field(
        default=None, alias="computerNameLetterCase"
    )
    organizational_unit: str = Field(default="", alias="ou")
    links: PolicyLinks = Field(default_factory=PolicyLinks, alias="_links")

    @property
    def workspace_ref(self) -> Optional[Workspace]:
        return Workspace.from_link(self.links.workspace)

    @property
    def endpoint_link_meta(self) -> Optional[EndpointLinkMeta]:
        link = self.links.microsoft_endpoint
        if link is None:
            return None
        return EndpointLinkMeta(name=link.title or "", url=link.href or "")

    def to_create_payload(self) -> Dict[str, Any]:
        """Request body for a create: aliased keys, no server-owned fields."""
        payload = self.model_dump(
            by_alias=True,
            mode="json",
            exclude={"id", "links"},
            exclude_none=True,
        )
        workspace = self.links.workspace
        if workspace is not None and workspace.href:
            payload["workspace"] = workspace.href
        return payload


__all__ = [
    "LinkRef",
    "Workspace",
    "WorkspacesListResponse",
    "CustomName",
    "ComputerNameLetterCase",
    "EndpointLinks",
    "EndpointLinkMeta",
    "PolicyLinks",
    "MicrosoftEndpoint",
    "MicrosoftAdPolicy",
]
