from ..errors import AmbiguousOrNoMask
from ..utils.helpers import is_hex_digit
from .xor import masks_equivalent

# Characters an arithmetic result can render to
MASK_ALPHABET = b"-0123456789."
MAX_MASK_LENGTH = 8


def candidate_bytes(token, length, position):
    """
    Mask bytes that turn every token byte at position, position + length, ...
    into a hex digit.
    """
    column = token[position::length]
    return [m for m in MASK_ALPHABET
            if all(is_hex_digit(c ^ m) for c in column)]


def mask_for_length(token, length):
    """Returns the mask for this period, or None if any position is not unique."""
    mask = []
    for position in range(length):
        candidates = candidate_bytes(token, length, position)
        if len(candidates) != 1:
            return None
        mask.append(candidates[0])
    return bytes(mask)


def possible_masks(token):
    # Every length is evaluated: a true mask of length n also fits 2n, 3n...
    masks = (mask_for_length(token, n) for n in range(1, MAX_MASK_LENGTH + 1))
    return [m for m in masks if m is not None]


def collapse_equivalent(masks):
    """Keeps the first representative of each cyclic equivalence class."""
    kept = []
    for mask in masks:
        if not any(masks_equivalent(mask, k) for k in kept):
            kept.append(mask)
    return kept


class MaskBruteForcer:
    """
    Recovers the XOR mask from the token alone, using the fact that the
    plaintext token consists only of hex digits.
    """
    def recover(self, token):
        print(f"[*] Attempting mask brute force on {len(token)} token bytes...")
        token = bytes(token)
        masks = collapse_equivalent(possible_masks(token))
        if len(masks) != 1:
            print(f"[-] Found {len(masks)} possible masks")
            raise AmbiguousOrNoMask(len(masks))

        print(f"[+] Recovered mask {masks[0]!r}")
        return masks[0]
