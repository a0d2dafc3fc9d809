def increment(buffer: bytearray):
    """
    Add one to ``buffer`` in place, reading it as a little-endian unsigned integer.

    Carry runs from index 0 upward. An all-0xFF buffer wraps to all zeroes;
    the length never changes.
    """
    for i in range(len(buffer)):
        if buffer[i] < 255:
            buffer[i] += 1
            return
        buffer[i] = 0


def count_leading_zero_bits(digest: bytes) -> int:
    """
    Count zero bits starting at bit 0 of byte 0, stopping at the first set bit.

    Returns ``8 * len(digest)`` when no bit is set.
    """
    value = int.from_bytes(digest, 'little')
    if value == 0:
        return 8 * len(digest)
    return (value & -value).bit_length() - 1
