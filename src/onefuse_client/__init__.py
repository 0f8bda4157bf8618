"""onefuse_client package exports."""

from .api import OneFuseAPIClient
from .client import (
    MICROSOFT_AD_POLICY_RESOURCE_TYPE,
    MODULE_ENDPOINT_RESOURCE_TYPE,
    NAMING_RESOURCE_TYPE,
    WORKSPACE_RESOURCE_TYPE,
    OneFuseClient,
    collection_url,
    item_url,
)
from .core.config import Config, load_env_config
from .core.errors import (
    ConfigError,
    DefaultWorkspaceNotFoundError,
    OneFuseClientError,
    OneFuseDecodeError,
    OneFuseServerError,
    OneFuseTransportError,
    UnsupportedOperationError,
)
from .core.logging import setup_logging
from .models import (
    ComputerNameLetterCase,
    CustomName,
    MicrosoftAdPolicy,
    MicrosoftEndpoint,
    Workspace,
)

__version__ = "0.1.0"

__all__ = [
    # Clients
    "OneFuseClient",
    "OneFuseAPIClient",
    "Config",
    "load_env_config",
    "setup_logging",
    # URL helpers
    "collection_url",
    "item_url",
    "NAMING_RESOURCE_TYPE",
    "WORKSPACE_RESOURCE_TYPE",
    "MICROSOFT_AD_POLICY_RESOURCE_TYPE",
    "MODULE_ENDPOINT_RESOURCE_TYPE",
    # Exceptions
    "OneFuseClientError",
    "ConfigError",
    "OneFuseTransportError",
    "OneFuseServerError",
    "OneFuseDecodeError",
    "UnsupportedOperationError",
    "DefaultWorkspaceNotFoundError",
    # Models
    "Workspace",
    "CustomName",
    "ComputerNameLetterCase",
    "MicrosoftEndpoint",
    "MicrosoftAdPolicy",
]
