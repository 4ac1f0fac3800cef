# tests/test_domains.py
import pytest
from searchterm.domains import DomainResolutionError, TldextractResolver
from searchterm.normalize import Uri


@pytest.fixture(scope="module")
def domains():
    return TldextractResolver()


def test_base_domain(domains):
    assert domains.base_domain("www.google.com") == "google.com"
    assert domains.base_domain("a.b.example.co.nz") == "example.co.nz"
    assert domains.base_domain("example.nz") == "example.nz"


def test_public_suffix(domains):
    assert domains.public_suffix(Uri("www.google.co.uk", "/")) == "co.uk"
    assert domains.public_suffix(Uri("www.bing.com", "/search?q=x")) == "com"
    # a bare suffix still has a suffix, it just has no base domain
    assert domains.public_suffix(Uri("com", "/")) == "com"


@pytest.mark.parametrize("host", ["", "127.0.0.1", "::1", "localhost", "com", "co.uk"])
def test_base_domain_failures(domains, host):
    with pytest.raises(DomainResolutionError):
        domains.base_domain(host)


@pytest.mark.parametrize("host", ["", "10.0.0.1", "intranet"])
def test_public_suffix_failures(domains, host):
    with pytest.raises(DomainResolutionError):
        domains.public_suffix(Uri(host, "/"))


def test_resolution_error_is_value_error():
    assert issubclass(DomainResolutionError, ValueError)


def test_private_domains_opt_in():
    assert TldextractResolver().base_domain("foo.blogspot.com") == "blogspot.com"
    private = TldextractResolver(include_psl_private_domains=True)
    assert private.base_domain("foo.blogspot.com") == "foo.blogspot.com"


def test_extra_suffixes():
    domains = TldextractResolver(extra_suffixes=["lan"])
    assert domains.base_domain("printer.office.lan") == "office.lan"
    assert domains.public_suffix(Uri("printer.office.lan", "/")) == "lan"


def test_mixed_case_hosts_are_lowercased(domains):
    assert domains.base_domain("WWW.Google.COM") == "google.com"
    assert domains.public_suffix(Uri("WWW.Google.CO.UK", "/")) == "co.uk"
