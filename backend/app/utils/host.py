"""Request host helpers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping
from urllib.parse import quote


@dataclass(frozen=True)
class HostParts:
    """Host split on its first dot (e.g., stops.r-forge.r-project.org)."""

    group_name: str
    domain: str

    def fragment_url(self, path: str) -> str:
        """Absolute URL of a per-project endpoint on the forge domain."""
        return f"http://{self.domain}{path}?group_name={quote(self.group_name, safe='')}"


def split_host(host: str | None) -> HostParts:
    """Split host into (group_name, domain) on the first ".".

    foo.example.org -> ("foo", "example.org"); a.b.c -> ("a", "b.c").
    A host without a dot keeps the whole value as group name and an empty
    domain; a missing host gives two empty parts.
    """
    group_name, _, domain = (host or "").partition(".")
    return HostParts(group_name=group_name, domain=domain)


def request_host(headers: Mapping[str, str]) -> str:
    """Raw Host header value, as received."""
    return (headers.get("host") or "").strip()
