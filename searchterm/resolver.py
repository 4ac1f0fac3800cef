"""Search term and key extraction for navigation URIs.

A SearchTermResolver answers four questions about a URI: its base domain
(eTLD+1), whether it is a known search provider's result page, the search
term on that page, and a short hashed key for a host or a query. Domain
resolution, hashing and query parsing are injected so tests can swap in
fakes; the defaults use tldextract, hashlib and urllib.

Usage::

    resolver = SearchTermResolver()
    resolver.search_term(parse_uri("https://www.google.com/search?q=kittens"))
    # -> "kittens"

The module-level functions at the bottom bind the same operations to a
shared default resolver.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Optional, Union

from .config import Config
from .domains import DomainResolver, TldextractResolver
from .hashing import KEY_BYTES, Hasher, Sha256Hasher, truncated_hex
from .normalize import Uri
from .providers import DEFAULT_PROVIDERS, ProviderTable, build_table
from .querystring import QueryParseError, QueryStringParser, UrllibQueryParser, decode_uri

log = logging.getLogger(__name__)


class SearchTermResolver:
    def __init__(self,
                 domains: Optional[DomainResolver] = None,
                 hasher: Optional[Hasher] = None,
                 providers: ProviderTable = DEFAULT_PROVIDERS,
                 query_parser: Optional[QueryStringParser] = None,
                 key_bytes: int = KEY_BYTES):
        if not 0 < key_bytes <= 32:
            raise ValueError(f"key_bytes must be between 1 and 32, got {key_bytes}")
        self.domains = domains if domains is not None else TldextractResolver()
        self.hasher = hasher if hasher is not None else Sha256Hasher()
        self.providers = providers
        self.query_parser = query_parser if query_parser is not None else UrllibQueryParser()
        self.key_bytes = key_bytes

    @classmethod
    def from_config(cls, cfg: Union[Config, Dict[str, Any], None]) -> "SearchTermResolver":
        """Build a resolver from the ``domains``, ``providers`` and ``hash`` config sections."""
        if not isinstance(cfg, Config):
            cfg = Config(cfg or {})
        domains_cfg = cfg.section("domains")
        hash_cfg = cfg.section("hash")
        extra_suffixes = domains_cfg.get("extra_suffixes") or ()
        if not isinstance(extra_suffixes, (list, tuple)):
            raise ValueError(f"domains.extra_suffixes must be a list, got {extra_suffixes!r}")
        try:
            key_bytes = int(hash_cfg.get("key_bytes", KEY_BYTES))
        except TypeError as e:
            raise ValueError(f"hash.key_bytes must be an integer: {e}") from e
        return cls(
            domains=TldextractResolver(
                include_psl_private_domains=bool(domains_cfg.get("include_psl_private_domains", False)),
                extra_suffixes=extra_suffixes,
            ),
            providers=build_table(cfg.section("providers")),
            key_bytes=key_bytes,
        )

    # --- domain resolution ---
    def base_domain(self, host: str) -> str:
        """Base domain (eTLD+1) of ``host``, or ``host`` itself if it cannot be resolved."""
        try:
            return self.domains.base_domain(host)
        except Exception as e:
            log.warning("Domain resolver error getting base domain from %r: %s", host, e)
            return host

    def public_suffix(self, uri: Uri) -> str:
        """Public suffix of ``uri.host``, or ``uri.host`` itself if none can be found."""
        try:
            return self.domains.public_suffix(uri)
        except Exception as e:
            log.warning("Domain resolver error getting public suffix of %r: %s", uri.host, e)
            return uri.host

    # --- search terms ---
    def search_term(self, uri: Uri) -> str:
        """Return the lowercased search term of a provider result page, or "".

        Only the first ``+`` in the term becomes a space; further ones are
        kept literally.
        """
        host = self.base_domain(uri.host)
        suffix = self.public_suffix(uri)
        if suffix not in host:
            return ""
        # "google" from "google.com"
        name = host[:max(0, len(host) - len(suffix) - 1)]
        provider = self.providers.get(name)
        if provider is None:
            return ""

        path = uri.path
        if not path.startswith(provider.path_prefix):
            log.debug("Path %s does not match %s prefix %s", path, name, provider.path_prefix)
            return ""
        try:
            params = self.query_parser.parse(path[len(provider.path_prefix):])
            value = params.get(provider.query_param)
            if value is None:
                return ""
            value = decode_uri(value)
        except QueryParseError as e:
            log.warning("Couldn't parse %s: %s", path, e)
            return ""
        # first "+" only
        return value.lower().replace("+", " ", 1)

    # --- keys ---
    def key_for(self, host_or_query: str) -> str:
        """Hex of the first ``key_bytes`` bytes of the UTF-8 input's digest."""
        return truncated_hex(self.hasher.digest(host_or_query.encode("utf-8")), self.key_bytes)

    def key_for_host(self, host: str) -> str:
        return self.key_for(self.base_domain(host))

    def key_for_query(self, query: str) -> str:
        return self.key_for(query)


_default: Optional[SearchTermResolver] = None

def default_resolver() -> SearchTermResolver:
    """Shared resolver with the default collaborators, built on first use."""
    global _default
    if _default is None:
        _default = SearchTermResolver()
    return _default

def search_term(uri: Uri) -> str:
    return default_resolver().search_term(uri)

def base_domain(host: str) -> str:
    return default_resolver().base_domain(host)

def key_for_host(host: str) -> str:
    return default_resolver().key_for_host(host)

def key_for_query(query: str) -> str:
    return default_resolver().key_for_query(query)
