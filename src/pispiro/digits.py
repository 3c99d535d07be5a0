"""Digit resource: reading and generating decimal expansions of pi."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def load_digits(path: str | Path, max_digits: int | None = None) -> list[int]:
    """Read digits from the first line of path.

    Non-digit characters are skipped. At least one digit is required.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        first_line = f.readline()

    digits = [ord(c) - ord("0") for c in first_line if "0" <= c <= "9"]
    if max_digits is not None:
        digits = digits[:max_digits]
    if not digits:
        raise ValueError(f"No digits in first line of {path}")

    logger.info("Loaded %d digits from %s", len(digits), path)
    return digits


def pi_digits(count: int) -> str:
    """First count decimals of pi after the point."""
    import mpmath

    # a few guard digits so the last requested one is not rounded
    with mpmath.workdps(count + 10):
        text = mpmath.nstr(mpmath.pi, count + 5, strip_zeros=False)
    return text.split(".", 1)[1][:count]


def write_digits(path: str | Path, count: int = 100_000) -> Path:
    """Write the first count decimals of pi as a single line."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(pi_digits(count) + "\n")
    logger.info("Wrote %d digits to %s", count, path)
    return path
