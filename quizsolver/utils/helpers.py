import base64
import binascii

from ..errors import TokenParseError

HEX_DIGITS = frozenset(b"0123456789abcdef")


def is_hex_digit(value):
    """Checks if a byte is a lowercase hexadecimal digit in ASCII."""
    return value in HEX_DIGITS


def repeat_mask(mask, length):
    """Repeats mask cyclically until it is exactly `length` bytes long."""
    reps, extra = divmod(length, len(mask))
    return bytes(mask) * reps + bytes(mask[:extra])


def decode_session_token(token):
    """Base64-decodes the session token header."""
    if isinstance(token, str):
        token = token.encode("ascii", errors="replace")
    try:
        return base64.b64decode(token, validate=True)
    except (binascii.Error, ValueError) as e:
        raise TokenParseError(f"parse session token: {e}") from e
