"""
flakeid.formatting - Display wrapping for Snowflake IDs.

IDs are plain integers everywhere inside the package. Some deployments show
them with a fixed prefix and suffix (for example ``IND7263...TD``); these
helpers add and strip that wrapping.
"""

from typing import Optional

from . import env


def format_id(id_val: int, prefix: Optional[str] = None, suffix: Optional[str] = None) -> str:
    """
    Render an ID as ``prefix + digits + suffix``.

    Args:
        id_val: Snowflake ID
        prefix: Text placed before the digits; defaults to FLAKEID_PREFIX
        suffix: Text placed after the digits; defaults to FLAKEID_SUFFIX
    """
    if prefix is None:
        prefix = env.FLAKEID_PREFIX
    if suffix is None:
        suffix = env.FLAKEID_SUFFIX
    return f"{prefix}{id_val}{suffix}"


def parse_id(text: str, prefix: Optional[str] = None, suffix: Optional[str] = None) -> int:
    """
    Recover the integer ID from its display form.

    Args:
        text: Formatted ID
        prefix: Expected prefix; defaults to FLAKEID_PREFIX
        suffix: Expected suffix; defaults to FLAKEID_SUFFIX

    Returns:
        int: The Snowflake ID

    Raises:
        ValueError: If the prefix or suffix is missing, or the remaining
            text is not a non-negative integer
    """
    if prefix is None:
        prefix = env.FLAKEID_PREFIX
    if suffix is None:
        suffix = env.FLAKEID_SUFFIX

    if not text.startswith(prefix):
        raise ValueError(f"ID {text!r} does not start with prefix {prefix!r}")
    body = text[len(prefix):]
    if suffix:
        if not body.endswith(suffix):
            raise ValueError(f"ID {text!r} does not end with suffix {suffix!r}")
        body = body[: -len(suffix)]

    if not body.isascii() or not body.isdigit():
        raise ValueError(f"ID {text!r} has no numeric part between prefix and suffix")
    return int(body)
