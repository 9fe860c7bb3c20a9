import math

from Crypto.Util.strxor import strxor

from ..utils.helpers import repeat_mask


def xor_mask(buffer, mask):
    """
    XORs byte i of buffer with mask[i % len(mask)].
    Returns a new bytes object; applying the same mask twice restores the input.
    """
    if not mask:
        raise ValueError("mask must be at least one byte long")
    if not buffer:
        return b""
    return strxor(bytes(buffer), repeat_mask(mask, len(buffer)))


def masks_equivalent(m1, m2):
    """
    Two masks are equivalent when repeating both to the lcm of their
    lengths yields the same bytes, e.g. b"ab" and b"abab".
    """
    if not m1 or not m2:
        return False
    length = math.lcm(len(m1), len(m2))
    return repeat_mask(m1, length) == repeat_mask(m2, length)
