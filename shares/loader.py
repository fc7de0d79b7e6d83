"""Reading share documents and turning them into integer points.

Expected document shape:

    {
      "keys": {"n": 4, "k": 3},
      "1": {"base": "10", "value": "4"},
      "2": {"base": "2",  "value": "111"},
      ...
    }

Top-level names made only of decimal digits are points; everything else
(including "keys") is metadata and skipped.
"""

import json
from dataclasses import dataclass

from core.digits import decode_digits, parse_base
from core.errors import MalformedDocument
from core.points import Point

METADATA_FIELD = "keys"


@dataclass(frozen=True)
class Share:
    """One point entry as written in the document, not yet decoded."""
    identifier: str
    base: str
    digits: str


@dataclass(frozen=True)
class ShareSet:
    n: int
    k: int
    shares: list[Share]


def _is_point_name(name: str) -> bool:
    return name != "" and all('0' <= ch <= '9' for ch in name)


def _must(node, key: str, where: str = ""):
    if not isinstance(node, dict) or key not in node:
        field = f"{where}.{key}" if where else key
        raise MalformedDocument(f"missing field: {field}", field=field)
    return node[key]


def _as_int(value, field: str) -> int:
    if isinstance(value, bool):
        raise MalformedDocument(f"{field} must be an integer", field=field)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError:
            pass
    raise MalformedDocument(f"{field} must be an integer", field=field)


def _as_text(value, field: str) -> str:
    if isinstance(value, bool) or isinstance(value, (dict, list)) or value is None:
        raise MalformedDocument(f"{field} must be a string or number",
                                field=field)
    return str(value)


def read_document(doc) -> ShareSet:
    """Validate a parsed document and collect its raw shares in order."""
    if not isinstance(doc, dict):
        raise MalformedDocument("document must be a JSON object")

    keys = _must(doc, METADATA_FIELD)
    n = _as_int(_must(keys, "n", METADATA_FIELD), "keys.n")
    k = _as_int(_must(keys, "k", METADATA_FIELD), "keys.k")
    if k < 1:
        raise MalformedDocument("k must be >= 1", field="keys.k")
    if n < k:
        raise MalformedDocument("n must be >= k", field="keys.n")

    shares = []
    for name, entry in doc.items():
        if name == METADATA_FIELD or not _is_point_name(name):
            continue
        base = _as_text(_must(entry, "base", name), f"{name}.base")
        value = _as_text(_must(entry, "value", name), f"{name}.value")
        shares.append(Share(name, base, value))
    return ShareSet(n, k, shares)


def load_document(path) -> ShareSet:
    try:
        with open(path, encoding="utf-8") as f:
            raw = f.read()
    except OSError as e:
        raise MalformedDocument(f"cannot read {path}: {e.strerror}") from e
    except UnicodeDecodeError as e:
        raise MalformedDocument(f"{path} is not valid UTF-8: {e.reason}") from e
    try:
        doc = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedDocument(f"invalid JSON in {path}: {e.msg}") from e
    except ValueError as e:
        # int literals past sys.get_int_max_str_digits()
        raise MalformedDocument(f"invalid JSON in {path}: {e}") from e
    return read_document(doc)


def decode_shares(shares) -> list[Point]:
    """x from the identifier (plain base 10), y via positional decoding."""
    points = []
    for s in shares:
        try:
            x = int(s.identifier, 10)
        except ValueError as e:
            raise MalformedDocument(
                f"point name too long to read ({len(s.identifier)} digits)",
                field=s.identifier[:20]) from e
        y = decode_digits(s.digits, parse_base(s.base))
        points.append(Point(x, y))
    return points
