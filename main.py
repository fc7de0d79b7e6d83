"""Recover the constant term c = f(0) from base-encoded shares: entry point.

Usage: python main.py <path/to/testcase.json>

Reads k and the point entries, decodes each value in its own base,
keeps the k lowest distinct x's and interpolates exactly at x=0.
"""

import sys

from core.errors import RecoveryError
from core.points import Point, select_points
from core.polynomial import interpolate_at_zero
from core.rational import Rational
from shares.loader import ShareSet, decode_shares, load_document
from shares.report import format_report

EXIT_USAGE = 1
EXIT_INVALID = 2

# no cap on int <-> decimal text conversion; values are unbounded
INT_MAX_STR_DIGITS = 0


def recover(share_set: ShareSet) -> tuple[list[Point], Rational]:
    """Decode, select k points, interpolate. Returns (chosen, secret)."""
    pool = decode_shares(share_set.shares)
    chosen = select_points(pool, share_set.k)
    return chosen, interpolate_at_zero(chosen)


def main(argv: list[str] | None = None) -> int:
    sys.set_int_max_str_digits(INT_MAX_STR_DIGITS)
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("usage: python main.py <path/to/testcase.json>", file=sys.stderr)
        return EXIT_USAGE

    try:
        share_set = load_document(args[0])
        chosen, secret = recover(share_set)
    except RecoveryError as e:
        print(e.message, file=sys.stderr)
        return EXIT_INVALID

    print(format_report(share_set.k, chosen, secret))
    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
