"""DNS prefetch resource hints for the page head."""

from html import escape


def render_dns_prefetch(hosts: list[str]) -> str:
    """Return one <link rel='dns-prefetch'> tag per host, newline separated."""
    return "\n".join(
        f"<link rel='dns-prefetch' href='//{escape(host, quote=True)}'>" for host in hosts
    )
