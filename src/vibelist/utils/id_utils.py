"""Task ID generation and display helpers.

IDs combine the creation timestamp with a short random base-36 token,
e.g. ``1718000000000-k3j9x0a2q``. There is no counter and no collision
check; within one session a clash is negligible, not impossible.
"""

from __future__ import annotations

import random
import string
import time

BASE36_ALPHABET = string.digits + string.ascii_lowercase
TOKEN_LENGTH = 9

_rng = random.SystemRandom()


def now_ms() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)


def to_base36(value: int) -> str:
    """Encode a non-negative integer in base 36.

    Raises:
        ValueError: If value is negative
    """
    if value < 0:
        raise ValueError("base36 encoding requires a non-negative integer")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(BASE36_ALPHABET[rem])
    return "".join(reversed(digits))


def random_token(length: int = TOKEN_LENGTH, rng: random.Random | None = None) -> str:
    """Short random base-36 token."""
    rng = rng or _rng
    return to_base36(rng.getrandbits(64)).rjust(length, "0")[-length:]


def generate_task_id(timestamp_ms: int | None = None, rng: random.Random | None = None) -> str:
    """Generate a task ID from a timestamp and a random token.

    Args:
        timestamp_ms: Creation time; defaults to now
        rng: Random source (injectable for deterministic tests)

    Returns:
        ID string of the form ``<epoch-ms>-<token>``
    """
    if timestamp_ms is None:
        timestamp_ms = now_ms()
    return f"{timestamp_ms}-{random_token(rng=rng)}"


def find_shortest_unique_suffix(task_ids: list[str], target_id: str) -> str:
    """Find the shortest suffix of target_id that no other ID ends with.

    Args:
        task_ids: All task IDs
        target_id: The task ID to find a unique suffix for

    Returns:
        The shortest unique suffix (the full ID as a fallback)
    """
    for length in range(1, len(target_id) + 1):
        suffix = target_id[-length:]
        matches = [tid for tid in task_ids if tid.endswith(suffix)]
        if len(matches) == 1:
            return suffix
    return target_id
