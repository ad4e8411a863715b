"""Core constants: cache key names and fixed rewrite rules.

Single source of truth for cache key structure and the extension and
domain lists the rewriter checks against.
"""

# Cache key prefix and names (network/mapped domain sets, file mtimes)
CACHE_PREFIX = "asset_host"
CACHE_NAME_NETWORK_DOMAINS = "network_domains"
CACHE_NAME_MAPPED_DOMAINS = "mapped_domains"
CACHE_NAME_MTIMES = "mtimes"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Extensions starting with this marker are server-executed; never rewritten.
DYNAMIC_EXTENSION_MARKER = "php"

# Plugin assets are only rewritten for these extensions (case-sensitive).
PLUGIN_ASSET_EXTENSIONS = frozenset({"gif", "png", "jpg", "jpeg", "js", "css"})

# Registrable domains whose assets are already CDN-served.
CDN_SERVED_DOMAINS = frozenset({"wordpress.com", "wp.com"})

# Upload path synthesis
UPLOADS_PATH = "/wp-content/uploads"
SECONDARY_TENANT_ID = 2

# Tenant id used for every host in a single-tenant deployment.
DEFAULT_TENANT_ID = 1

# Query argument carrying the file mtime (cache buster)
CACHE_BUSTER_QUERY_ARG = "m"
