from __future__ import annotations
import argparse
import logging
import sys
import yaml
from .config import Config
from .logging_setup import setup_logging
from .normalize import parse_uri
from .resolver import SearchTermResolver

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(
        prog="searchterm",
        description="Print base domain, search term, host key and query key for each URL.")
    ap.add_argument("--config", help="Path to config.yaml")
    ap.add_argument("urls", nargs="*", help="URLs to inspect; read one per line from stdin when omitted")
    args = ap.parse_args(argv)

    try:
        cfg = Config.load(args.config) if args.config else Config()
    except (OSError, ValueError, yaml.YAMLError) as e:
        ap.error(f"cannot load config {args.config}: {e}")
    setup_logging(cfg.data)
    log = logging.getLogger(__name__)
    log.debug("Using config: %s", args.config or "<defaults>")

    try:
        resolver = SearchTermResolver.from_config(cfg)
    except ValueError as e:
        log.error("Invalid configuration: %s", e)
        return 2

    urls = args.urls or [line.strip() for line in sys.stdin if line.strip()]
    status = 0
    for url in urls:
        try:
            uri = parse_uri(url)
        except ValueError as e:
            log.error("Skipping malformed URL %s: %s", url, e)
            status = 1
            continue
        term = resolver.search_term(uri)
        base = resolver.base_domain(uri.host)
        print("\t".join([
            base,
            term,
            resolver.key_for(base),
            resolver.key_for_query(term) if term else "",
        ]))
    return status

if __name__ == "__main__":
    sys.exit(main())
