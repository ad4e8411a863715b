"""Cache buster: append the file's modification time to rewritten URLs.

Maps the URL path onto the document root, stats the file, and appends
m=<mtime>. The mtime is cached per path: briefly when the file is not
found (the current time stands in), for a day once a real file is seen.
"""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Callable
from pathlib import Path
from urllib.parse import quote, urlsplit

from asset_host.core.config import Settings
from asset_host.core.constants import CACHE_BUSTER_QUERY_ARG
from asset_host.infrastructure.cache.cache_protocol import CacheProtocol
from asset_host.infrastructure.cache.keys import mtime_key

logger = logging.getLogger(__name__)

_FILE_PATH_RE = re.compile(r"[A-Z0-9\-_]+\.[A-Z0-9]+$", re.IGNORECASE)


def add_query_arg(url: str, name: str, value: str) -> str:
    """Return url with query argument name set to value (replacing any existing one).

    Works on the raw query text: other arguments keep their exact encoding.
    """
    base, hash_mark, fragment = url.partition("#")
    path, _, query = base.partition("?")
    segments = [
        segment
        for segment in (query.split("&") if query else [])
        if segment.partition("=")[0] != name
    ]
    segments.append(f"{name}={quote(value, safe='')}")
    return f"{path}?{'&'.join(segments)}{hash_mark}{fragment}"


class CacheBuster:
    """Post-processor appending m=<mtime> to asset URLs."""

    def __init__(
        self,
        cache: CacheProtocol | None,
        document_root: str | Path,
        *,
        ttl_missing: int = 900,
        ttl_found: int = 86400,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.cache = cache
        self.document_root = Path(document_root)
        self.ttl_missing = ttl_missing
        self.ttl_found = ttl_found
        self.clock = clock

    @classmethod
    def from_settings(cls, settings: Settings, cache: CacheProtocol | None) -> CacheBuster:
        return cls(
            cache,
            settings.document_root,
            ttl_missing=settings.mtime_cache_ttl_missing,
            ttl_found=settings.mtime_cache_ttl_found,
        )

    async def apply(self, url: str) -> str:
        """Return url with m=<mtime> added; unchanged if the path is not file-like."""
        try:
            path = urlsplit(url).path
        except ValueError:
            return url
        if not path or not _FILE_PATH_RE.search(path):
            return url

        mtime = await self._mtime(path)
        if not mtime:
            return url
        return add_query_arg(url, CACHE_BUSTER_QUERY_ARG, str(mtime))

    async def _mtime(self, path: str) -> int:
        key = mtime_key(path)
        if self.cache is not None and self.cache.is_available():
            cached = await self.cache.get(key)
            if isinstance(cached, int) and cached:
                return cached

        mtime = int(self.clock())
        expiry = self.ttl_missing

        relative = path.lstrip("/")
        if relative and ".." not in Path(relative).parts:
            file_path = self.document_root / relative
            try:
                if file_path.is_file():
                    mtime = int(file_path.stat().st_mtime)
                    expiry = self.ttl_found
            except OSError as e:
                logger.debug("Cannot stat %s: %s", file_path, e)

        # Always cache a value, even for missing files.
        if self.cache is not None and self.cache.is_available():
            await self.cache.set(key, mtime, ttl=expiry)
        return mtime
