"""Test utilities: reference oracles independent of the code under test."""

import json
from fractions import Fraction

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def encode_digits(value: int, base: int) -> str:
    """Standard positional encoding of a non-negative int."""
    if value == 0:
        return "0"
    out = []
    while value:
        value, d = divmod(value, base)
        out.append(ALPHABET[d])
    return "".join(reversed(out))


def reference_at_zero(points):
    """Plain Lagrange form at x=0 over Fractions: sum y_i * prod x_j/(x_j - x_i)."""
    total = Fraction(0)
    for i, (xi, yi) in enumerate(points):
        term = Fraction(yi)
        for j, (xj, _) in enumerate(points):
            if i != j:
                term *= Fraction(xj, xj - xi)
        total += term
    return total


def write_document(tmp_path, doc, name="testcase.json"):
    path = tmp_path / name
    path.write_text(json.dumps(doc))
    return path


def make_document(k, entries, n=None):
    """entries: list of (identifier, base, value) triples."""
    doc = {"keys": {"n": len(entries) if n is None else n, "k": k}}
    for ident, base, value in entries:
        doc[str(ident)] = {"base": str(base), "value": value}
    return doc
