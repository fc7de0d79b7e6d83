"""Plain-text report of a recovery run."""

from core.points import Point
from core.rational import Rational

METHOD = "barycentric lagrange @ x=0 (exact)"


def format_report(k: int, chosen: list[Point], secret: Rational) -> str:
    lines = [f"k = {k} (degree {k - 1})", "points used:"]
    for p in chosen:
        lines.append(f"  x={p.x}, y={p.y}")
    lines.append("")
    lines.append(f"method: {METHOD}")
    lines.append(f"secret c = {secret}")
    return "\n".join(lines)
