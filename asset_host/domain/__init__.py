"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from asset_host.domain.enums import RewriteContext
from asset_host.domain.exceptions import (
    AssetHostException,
    ConfigurationException,
    DirectoryQueryFailedException,
    MalformedUrlException,
    NotInitializedException,
)

__all__ = [
    "AssetHostException",
    "ConfigurationException",
    "DirectoryQueryFailedException",
    "MalformedUrlException",
    "NotInitializedException",
    "RewriteContext",
]
