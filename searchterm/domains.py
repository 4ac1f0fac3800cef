from __future__ import annotations
import ipaddress
import logging
from typing import Iterable, Protocol

import tldextract

from .normalize import Uri

log = logging.getLogger(__name__)


class DomainResolutionError(ValueError):
    """The host has no base domain or public suffix we can report."""


class DomainResolver(Protocol):
    def base_domain(self, host: str) -> str: ...

    def public_suffix(self, uri: Uri) -> str: ...


class TldextractResolver:
    """DomainResolver backed by the public-suffix snapshot bundled with tldextract.

    The list is never fetched over the network and never cached on disk, so
    resolution is a pure in-memory lookup once the snapshot has been loaded.

    Errors mirror what a browser's effective-TLD service reports: an empty
    host, an IP address, a host with no known public suffix, and a host that
    is itself a public suffix all raise DomainResolutionError. Hosts are
    lowercased first, so results are always lowercase.
    """

    def __init__(self, include_psl_private_domains: bool = False, extra_suffixes: Iterable[str] = ()):
        self.include_psl_private_domains = include_psl_private_domains
        self.extra_suffixes = tuple(extra_suffixes)
        self._extract = tldextract.TLDExtract(
            cache_dir=None,
            suffix_list_urls=(),
            fallback_to_snapshot=True,
            include_psl_private_domains=include_psl_private_domains,
            extra_suffixes=self.extra_suffixes,
        )

    def _split(self, host: str):
        host = (host or "").lower()
        if not host:
            raise DomainResolutionError("empty host")
        try:
            ipaddress.ip_address(host)
        except ValueError:
            pass
        else:
            raise DomainResolutionError(f"host is an IP address: {host}")
        ext = self._extract(host)
        if not ext.suffix:
            raise DomainResolutionError(f"no known public suffix for host: {host}")
        return ext

    def base_domain(self, host: str) -> str:
        ext = self._split(host)
        if not ext.domain:
            raise DomainResolutionError(f"insufficient domain levels: {host}")
        return ".".join([ext.domain, ext.suffix])

    def public_suffix(self, uri: Uri) -> str:
        return self._split(uri.host).suffix
