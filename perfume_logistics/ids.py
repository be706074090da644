"""Client-side ids of the form <prefix>-<base36 epoch millis>-<random>."""
import random
import string
import time

_BASE36 = string.digits + string.ascii_lowercase


def to_base36(value: int) -> str:
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits)) or "0"


def generate_id(prefix: str, random_length: int = 6) -> str:
    stamp = to_base36(int(time.time() * 1000))
    suffix = "".join(random.choices(_BASE36, k=random_length))
    return f"{prefix}-{stamp}-{suffix}"
