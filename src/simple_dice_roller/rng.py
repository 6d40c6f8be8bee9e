"""Unbiased random integers from cryptographically strong bytes."""

from __future__ import annotations

import logging
import secrets
from typing import Callable, TypeAlias

from .errors import DiceError


logger = logging.getLogger(__name__)

TokenBytes: TypeAlias = Callable[[int], bytes]

BYTE_DOMAIN = 256


def random_int(minimum: int, maximum: int, token_bytes: TokenBytes = secrets.token_bytes) -> int:
    """Return an integer uniformly distributed over ``[minimum, maximum]``.

    One random byte is drawn per attempt. Bytes at or above the largest
    multiple of the span that fits in a byte are rejected and redrawn, so
    ``byte % span`` never favours the low end of the range.

    Raises DiceError if the span is empty or wider than one byte.
    """

    span = maximum - minimum + 1
    if span < 1 or span > BYTE_DOMAIN:
        raise DiceError(
            f"[INVALID_RANGE] Cannot draw from [{minimum}, {maximum}]; the range must hold 1 to {BYTE_DOMAIN} values."
        )

    limit = (BYTE_DOMAIN // span) * span
    while True:
        value = token_bytes(1)[0]
        if value < limit:
            return minimum + value % span
        logger.debug("Rejected byte %d for span %d", value, span)
