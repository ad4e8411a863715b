"""URL rewriter: point eligible asset URLs at the static host.

rewrite() swaps the host of a local, static-looking URL for the static
host. Every failure resolves to returning the URL as given: the caller is
rendering a page and must never fail because of us.
"""

from __future__ import annotations

import logging
from urllib.parse import SplitResult, urlsplit, urlunsplit

from asset_host.application.interfaces import RewriteVetoPolicy, UrlPostProcessor
from asset_host.application.services.domain_resolver import DomainResolver
from asset_host.core.constants import (
    CDN_SERVED_DOMAINS,
    DYNAMIC_EXTENSION_MARKER,
    PLUGIN_ASSET_EXTENSIONS,
    SECONDARY_TENANT_ID,
    UPLOADS_PATH,
)
from asset_host.core.execution_context import ExecutionContext
from asset_host.domain.enums import RewriteContext
from asset_host.domain.exceptions import MalformedUrlException, NotInitializedException

logger = logging.getLogger(__name__)


def _split(url: str) -> SplitResult:
    try:
        return urlsplit(url)
    except ValueError as e:
        raise MalformedUrlException(url, str(e)) from e


def _hostname(url: str, parts: SplitResult) -> str | None:
    try:
        return parts.hostname
    except ValueError as e:
        raise MalformedUrlException(url, str(e)) from e


def path_extension(path: str) -> str:
    """Return the extension of the last path segment ('' when there is none).

    Case is preserved: callers compare against lowercase lists, so
    "photo.JPG" yields "JPG" and does not match "jpg".
    """
    basename = path.rsplit("/", 1)[-1]
    if "." not in basename:
        return ""
    return basename.rsplit(".", 1)[1]


def registrable_domain(host: str) -> str:
    """Return the last two labels of host (e.g. i0.wp.com -> wp.com)."""
    labels = host.split(".")
    if len(labels) > 1:
        return ".".join(labels[-2:])
    return host


class UrlRewriter:
    """Rewrites URLs for one execution context.

    Args:
        static_host: Host to rewrite to; None/empty means not initialized.
        resolver: Domain resolver for the same execution context.
        context: Execution context (request scheme, current tenant id).
        rewrite_veto: Optional policy; returning True keeps the URL as is.
        post_processor: Optional step applied to rewritten URLs (cache buster).
    """

    def __init__(
        self,
        static_host: str | None,
        resolver: DomainResolver,
        context: ExecutionContext | None = None,
        *,
        rewrite_veto: RewriteVetoPolicy | None = None,
        post_processor: UrlPostProcessor | None = None,
    ) -> None:
        self.static_host = static_host or None
        self.resolver = resolver
        self.context = context or ExecutionContext()
        self.rewrite_veto = rewrite_veto
        self.post_processor = post_processor

    async def rewrite(self, url: str, context: RewriteContext) -> str:
        """Return url with its host replaced by the static host, when eligible.

        Unchanged when: not initialized, dynamic (php*) extension, plugin
        asset outside the extension allow-list, relative URL, already on the
        static host, host not local, or vetoed by policy.
        """
        try:
            return await self._rewrite(url, context)
        except NotInitializedException:
            logger.debug("Rewrite skipped, static host not configured: %s", url)
            return url
        except MalformedUrlException as e:
            logger.debug("Rewrite skipped: %s", e.message)
            return url

    async def _rewrite(self, url: str, context: RewriteContext) -> str:
        static_host = self._require_static_host()
        parts = _split(url)

        extension = path_extension(parts.path)
        if extension.startswith(DYNAMIC_EXTENSION_MARKER):
            return url
        if context is RewriteContext.PLUGINS_URL and extension not in PLUGIN_ASSET_EXTENSIONS:
            return url

        host = _hostname(url, parts)
        if not host or host == static_host.lower():
            return url
        if not await self.resolver.is_local(host):
            return url
        if self.rewrite_veto is not None and self.rewrite_veto(host, url, context):
            logger.debug("Rewrite vetoed by policy: %s (%s)", url, context.value)
            return url

        rewritten = self._replace_host(url, parts, static_host)
        if self.post_processor is not None:
            rewritten = await self.post_processor.apply(rewritten)
        return rewritten

    async def rewrite_third_party_static(self, url: str) -> str:
        """Rewrite a third-party static URL unless it is already CDN-served."""
        try:
            host = _hostname(url, _split(url))
        except MalformedUrlException as e:
            logger.debug("Rewrite skipped: %s", e.message)
            return url
        if host and registrable_domain(host) in CDN_SERVED_DOMAINS:
            return url
        return await self.rewrite(url, RewriteContext.THIRD_PARTY_STATIC_URL)

    def rewrite_for_upload(self, url: str = "", tenant_id: int | None = None) -> str:
        """Return the uploads base URL on the static host.

        The tenant defaults to the execution context's tenant; the secondary
        tenant gets its /sites/<id> sub-path. Returns url as given when the
        static host is not configured.
        """
        if not self.static_host:
            return url
        if tenant_id is None:
            tenant_id = self.context.tenant_id
        upload_url = f"https://{self.static_host}{UPLOADS_PATH}"
        if tenant_id == SECONDARY_TENANT_ID:
            upload_url += f"/sites/{tenant_id}"
        return upload_url

    def rewrite_for_concat_base(self, url: str = "") -> str:
        """Return the static host base URL, scheme following the request."""
        if not self.static_host:
            return url
        scheme = "https" if self.context.is_secure else "http"
        return f"{scheme}://{self.static_host}"

    async def rewrite_for_context(self, url: str, context: RewriteContext) -> str:
        """Dispatch url to the rewrite variant for context."""
        if context is RewriteContext.THIRD_PARTY_STATIC_URL:
            return await self.rewrite_third_party_static(url)
        if context is RewriteContext.UPLOAD_URL_PATH:
            return self.rewrite_for_upload(url)
        if context is RewriteContext.CONCAT_SITE_URL:
            return self.rewrite_for_concat_base(url)
        return await self.rewrite(url, context)

    def _require_static_host(self) -> str:
        if not self.static_host:
            raise NotInitializedException()
        return self.static_host

    @staticmethod
    def _replace_host(url: str, parts: SplitResult, static_host: str) -> str:
        try:
            port = parts.port
        except ValueError as e:
            raise MalformedUrlException(url, str(e)) from e
        userinfo, at, _ = parts.netloc.rpartition("@")
        netloc = f"{userinfo}{at}{static_host}"
        if port is not None:
            netloc += f":{port}"
        # Splice into the original text so empty "?" and "#" survive.
        start = url.find("//") + 2
        end = start + len(parts.netloc)
        if url[start:end] != parts.netloc:
            return urlunsplit(parts._replace(netloc=netloc))
        return url[:start] + netloc + url[end:]
