# tests/conftest.py
from __future__ import annotations
import hashlib
import pytest

from searchterm.config import Config
from searchterm.domains import DomainResolutionError
from searchterm.resolver import SearchTermResolver


@pytest.fixture
def tmp_config(tmp_path) -> Config:
    cfg = {
        "logging": {
            "level": "DEBUG",
            "console": False,
            "file": str(tmp_path / "logs" / "searchterm.log"),
        },
        "domains": {
            "include_psl_private_domains": False,
            "extra_suffixes": [],
        },
        "providers": {
            "duckduckgo": {"path": "/?", "query": "q"},
        },
        "hash": {"key_bytes": 24},
    }
    return Config(cfg)


# --- Fake collaborators for SearchTermResolver ---
class FakeDomains:
    """Table-driven DomainResolver; hosts missing from the table fail like the eTLD service."""
    def __init__(self, base=None, suffix=None):
        self.base = base or {}
        self.suffix = suffix or {}
        self.calls = []

    def base_domain(self, host):
        self.calls.append(("base_domain", host))
        if host not in self.base:
            raise DomainResolutionError(f"unknown host {host!r}")
        return self.base[host]

    def public_suffix(self, uri):
        self.calls.append(("public_suffix", uri.host))
        if uri.host not in self.suffix:
            raise DomainResolutionError(f"unknown host {uri.host!r}")
        return self.suffix[uri.host]


class FakeHasher:
    """Records inputs and returns a real sha256 digest."""
    def __init__(self):
        self.seen = []

    def digest(self, data):
        self.seen.append(data)
        return hashlib.sha256(data).digest()


@pytest.fixture
def fake_domains() -> FakeDomains:
    return FakeDomains(
        base={
            "www.google.com": "google.com",
            "google.com": "google.com",
            "www.bing.com": "bing.com",
            "search.yahoo.co.jp": "yahoo.co.jp",
            "www.example.org": "example.org",
        },
        suffix={
            "www.google.com": "com",
            "google.com": "com",
            "www.bing.com": "com",
            "search.yahoo.co.jp": "co.jp",
            "www.example.org": "org",
        },
    )


@pytest.fixture
def fake_hasher() -> FakeHasher:
    return FakeHasher()


@pytest.fixture
def fake_resolver(fake_domains, fake_hasher) -> SearchTermResolver:
    return SearchTermResolver(domains=fake_domains, hasher=fake_hasher)


@pytest.fixture(scope="session")
def resolver() -> SearchTermResolver:
    # tldextract-backed; loading the bundled suffix list once per session is enough
    return SearchTermResolver()
