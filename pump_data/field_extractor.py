def big_endian_uint(data: bytes) -> int:
    if len(data) > 4:
        raise ValueError("Expected at most 4 bytes, got {0}".format(len(data)))
    result = 0
    for byte in data:
        result = (result << 8) | byte
    return result


def sign_stitched_glucose(low_byte: int, overflow_byte: int, overflow_shift: int) -> int:
    """
    Rebuild a 9 bit glucose value from its low byte and one bit of a distant overflow byte.

    The overflow byte is shifted left by ``overflow_shift`` inside an 8 bit register, so bits
    pushed past bit 7 are lost and the bit that ends up in bit 7 is the borrowed one.
    It is appended below the low byte and the 16 bit word is shifted right by 7:

        ((low_byte << 8) | ((overflow_byte << overflow_shift) & 0xFF)) >> 7

    ``overflow_shift=7`` borrows bit 0 of the overflow byte, ``overflow_shift=6`` borrows bit 1.
    The result is ``(low_byte << 1) | borrowed_bit``.
    """
    high_word = (low_byte & 0xFF) << 8
    borrowed = (overflow_byte << overflow_shift) & 0xFF
    return (high_word | borrowed) >> 7
