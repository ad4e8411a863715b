"""Tests for cache key builders."""

import hashlib

from asset_host.infrastructure.cache.keys import (
    mapped_domains_key,
    mtime_key,
    network_domains_key,
)


def test_domain_set_keys_are_fixed_and_distinct() -> None:
    """Domain set keys are fixed and namespaced."""
    assert network_domains_key() == "asset_host:network_domains"
    assert mapped_domains_key() == "asset_host:mapped_domains"


def test_mtime_key_hashes_path() -> None:
    """mtime keys are md5 of the namespace plus the path."""
    digest = hashlib.md5(b"asset_host:mtimes/a:b/c.css").hexdigest()
    assert mtime_key("/a:b/c.css") == f"asset_host:mtimes:{digest}"
    assert mtime_key("/a.css") != mtime_key("/b.css")
