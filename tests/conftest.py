from collections.abc import Callable, Iterable

import pytest


@pytest.fixture
def scripted_bytes() -> Callable[[Iterable[int]], Callable[[int], bytes]]:
    """Build a token_bytes replacement that hands out the given byte values in order."""

    def make(values: Iterable[int]) -> Callable[[int], bytes]:
        it = iter(values)

        def token_bytes(n: int) -> bytes:
            return bytes(next(it) for _ in range(n))

        return token_bytes

    return make
