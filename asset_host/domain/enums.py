"""Domain enumerations for the asset host.

Enums represent fixed sets of domain values (e.g. rewrite context).
"""

from enum import Enum


class RewriteContext(str, Enum):
    """Emission point that produced a URL to rewrite.

    Selects context-specific policy (e.g. the plugin asset extension
    allow-list); never persisted.
    """

    SCRIPT_LOADER_SRC = "script_loader_src"
    STYLE_LOADER_SRC = "style_loader_src"
    TEMPLATE_DIRECTORY_URI = "template_directory_uri"
    STYLESHEET_DIRECTORY_URI = "stylesheet_directory_uri"
    STYLESHEET_URI = "stylesheet_uri"
    PLUGINS_URL = "plugins_url"
    THIRD_PARTY_STATIC_URL = "third_party_static_url"
    UPLOAD_URL_PATH = "upload_url_path"
    CONCAT_SITE_URL = "concat_site_url"

