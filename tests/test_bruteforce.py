import pytest

from quizsolver.errors import AmbiguousOrNoMask
from quizsolver.modules.bruteforce import (
    MASK_ALPHABET,
    MaskBruteForcer,
    candidate_bytes,
    collapse_equivalent,
    mask_for_length,
    possible_masks,
)
from quizsolver.modules.xor import masks_equivalent, xor_mask

from mock_session import AMBIGUOUS_TOKEN, hex_plaintext, mask_token


@pytest.mark.parametrize("mask", [b"-12", b"7", b"14", b"1000000", b"19602", b"-1.5"])
def test_recover_returns_equivalent_mask(mask):
    token = mask_token(hex_plaintext(), mask)
    recovered = MaskBruteForcer().recover(token)
    assert masks_equivalent(recovered, mask)
    assert xor_mask(token, recovered) == hex_plaintext().encode()


def test_true_mask_survives_at_its_multiples_only():
    token = mask_token(hex_plaintext(), b"-12")
    assert possible_masks(token) == [b"-12", b"-12-12"]
    assert collapse_equivalent(possible_masks(token)) == [b"-12"]


def test_single_byte_mask_fits_every_length():
    token = mask_token(hex_plaintext(), b"7")
    masks = possible_masks(token)
    assert masks == [b"7" * n for n in range(1, 9)]
    assert collapse_equivalent(masks) == [b"7"]


def test_candidate_bytes_single_column():
    assert candidate_bytes(AMBIGUOUS_TOKEN, 2, 0) == [ord("-")]
    assert candidate_bytes(AMBIGUOUS_TOKEN, 2, 1) == [ord(".")]
    assert candidate_bytes(AMBIGUOUS_TOKEN, 1, 0) == []


def test_empty_column_admits_every_symbol():
    assert candidate_bytes(b"\x15", 2, 1) == list(MASK_ALPHABET)
    assert mask_for_length(b"\x15", 2) is None


def test_ambiguous_lengths_fail():
    assert possible_masks(AMBIGUOUS_TOKEN) == [b"-.", b"-.-"]
    with pytest.raises(AmbiguousOrNoMask) as excinfo:
        MaskBruteForcer().recover(AMBIGUOUS_TOKEN)
    assert excinfo.value.count == 2


@pytest.mark.parametrize("token", [b"", b"\xff", b"\xff" * 32])
def test_no_mask_fails(token):
    with pytest.raises(AmbiguousOrNoMask) as excinfo:
        MaskBruteForcer().recover(token)
    assert excinfo.value.count == 0


def test_collapse_keeps_first_representative():
    masks = [b"ab", b"abab", b"ba", b"abababab", b"baba"]
    assert collapse_equivalent(masks) == [b"ab", b"ba"]
