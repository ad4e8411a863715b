"""asset-host: rewrite CMS asset URLs onto a static (CDN) host."""

__version__ = "1.1.0"
