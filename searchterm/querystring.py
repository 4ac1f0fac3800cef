from __future__ import annotations
import re
from typing import Mapping, Optional, Protocol
from urllib.parse import parse_qsl, unquote


class QueryParseError(ValueError):
    """The query string could not be turned into a parameter mapping."""


class QueryStringParser(Protocol):
    def parse(self, query: str) -> Mapping[str, str]: ...


class UrllibQueryParser:
    """URL-encoded query parsing on top of urllib.parse.parse_qsl.

    Values come back percent-decoded. Unlike form decoding, a literal ``+``
    is kept as-is; turning it into a space is left to the caller. When a key
    repeats, the last value wins.
    """

    def __init__(self, max_num_fields: Optional[int] = 1000):
        self.max_num_fields = max_num_fields

    def parse(self, query: str) -> Mapping[str, str]:
        try:
            pairs = parse_qsl(
                query.replace("+", "%2B"),
                keep_blank_values=True,
                errors="strict",
                max_num_fields=self.max_num_fields,
            )
        except ValueError as e:
            # UnicodeDecodeError is a ValueError too
            raise QueryParseError(f"{query!r}: {e}") from e
        return dict(pairs)


# escapes of ;/?:@&=+$,# survive decode_uri
_RESERVED_ESCAPE_RE = re.compile(r'(%(?:2[346BbCcFf]|3[AaBbDdFf]|40))')


def decode_uri(value: str) -> str:
    """Percent-decode ``value`` except for escapes of reserved URI characters.

    Raises QueryParseError when the escapes are not valid UTF-8.
    """
    parts = _RESERVED_ESCAPE_RE.split(value)
    try:
        # odd indexes are the reserved escapes captured by split
        return "".join(p if i % 2 else unquote(p, errors="strict") for i, p in enumerate(parts))
    except UnicodeDecodeError as e:
        raise QueryParseError(f"{value!r}: {e}") from e
