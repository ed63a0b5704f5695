import sys
from typing import Iterable, Optional, TextIO, Tuple

SEPARATOR = "-" * 80

Point = Tuple[float, float]


def format_predictions(points: Iterable[Point], num_decimals: int = 1) -> str:
    """Render (input, prediction) pairs as a separator-bracketed text block."""
    blocks = [
        f"Input: {x:.{num_decimals}f}\nPredicted output: {y:.{num_decimals}f}\n"
        for x, y in points
    ]
    return f"{SEPARATOR}\n" + "\n".join(blocks) + f"{SEPARATOR}\n\n"


def write_predictions(points: Iterable[Point], sink: Optional[TextIO] = None, num_decimals: int = 1) -> None:
    if sink is None:
        sink = sys.stdout
    sink.write(format_predictions(points, num_decimals))


def report_error(exc: Exception, stream: Optional[TextIO] = None) -> None:
    if stream is None:
        stream = sys.stderr
    print(f"Error: {exc}\n", file=stream)
