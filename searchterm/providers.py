"""Search providers recognized by the search term extractor.

The table maps a provider short-name (the label in front of the public
suffix, e.g. ``google`` for ``google.co.uk``) to the path prefix of its
result pages and the query parameter carrying the search term. The default
set comes from the en-US Firefox search plugins and is intentionally small;
more providers are added through the ``providers`` config section.
"""
from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class ProviderEntry:
    name: str
    path_prefix: str
    query_param: str

    def __post_init__(self):
        if not isinstance(self.path_prefix, str) or not (
                self.path_prefix.startswith("/") and self.path_prefix.endswith("?")):
            raise ValueError(f"provider {self.name!r}: path prefix must start with '/' and end with '?', "
                             f"got {self.path_prefix!r}")
        if not isinstance(self.query_param, str) or not self.query_param:
            raise ValueError(f"provider {self.name!r}: query parameter must be a non-empty string")


ProviderTable = Mapping[str, ProviderEntry]

DEFAULT_PROVIDERS: ProviderTable = MappingProxyType({
    "amazon": ProviderEntry("amazon", "/exec/obidos/external-search?", "field-keywords"),
    "bing": ProviderEntry("bing", "/search?", "q"),
    "google": ProviderEntry("google", "/search?", "q"),
    "yahoo": ProviderEntry("yahoo", "/search?", "p"),
})


def build_table(overrides: Optional[Dict[str, Any]] = None,
                base: ProviderTable = DEFAULT_PROVIDERS) -> ProviderTable:
    """Return a read-only table of ``base`` with ``overrides`` added or replaced.

    ``overrides`` uses the config layout ``{name: {"path": ..., "query": ...}}``.
    """
    table: Dict[str, ProviderEntry] = dict(base)
    for name, entry in (overrides or {}).items():
        if not isinstance(entry, dict):
            raise ValueError(f"provider {name!r}: expected a mapping with 'path' and 'query'")
        table[name] = ProviderEntry(name, entry.get("path"), entry.get("query"))
    return MappingProxyType(table)
