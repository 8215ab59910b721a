# largeprimes/operations/utils.py


def require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def trailing_zero_count(num: int) -> int:
    """Number of consecutive zero bits at the low end of ``num``.

    ``num`` must be positive; zero has no set bit to stop at and raises
    ``ValueError``.
    """
    require_non_negative("num", num)
    if num == 0:
        raise ValueError("trailing_zero_count() is undefined for 0")
    count = 0
    while num & 1 == 0:
        num >>= 1
        count += 1
    return count
