"""Tests for challenge signing and verification."""

import pytest

from hdauth import AuthKeyParams, InvalidKey, sign_challenge, verify_challenge_signature
from hdauth.constants import SECP256K1_ORDER

TEST_RPID = "auth.example.com"
TEST_MESSAGE = b"Liberty is always freedom from the government. -Ludwig von Mises"


@pytest.fixture(scope="module")
def key(ctx):
    return ctx.derive_auth_key(AuthKeyParams(rp_id=TEST_RPID, device_id=0, key_index=0))


@pytest.fixture(scope="module")
def other_key(ctx):
    return ctx.derive_auth_key(AuthKeyParams(rp_id="other.example.com"))


def test_sign_and_verify_round_trip(key):
    signature = sign_challenge(key.priv_key, TEST_MESSAGE)
    assert len(signature) == 64
    assert verify_challenge_signature(key.pub_key, TEST_MESSAGE, signature)


def test_empty_message(key):
    signature = sign_challenge(key.priv_key, b"")
    assert verify_challenge_signature(key.pub_key, b"", signature)


def test_signing_is_deterministic(key):
    assert sign_challenge(key.priv_key, TEST_MESSAGE) == sign_challenge(key.priv_key, TEST_MESSAGE)
    assert sign_challenge(key.priv_key, TEST_MESSAGE) != sign_challenge(key.priv_key, b"other")


def test_str_message_signs_utf8_bytes(key):
    signature = sign_challenge(key.priv_key, "héllo")
    assert verify_challenge_signature(key.pub_key, "héllo".encode("utf-8"), signature)


def test_signature_is_low_s(key):
    signature = sign_challenge(key.priv_key, TEST_MESSAGE)
    assert int.from_bytes(signature[32:], "big") <= SECP256K1_ORDER // 2


@pytest.mark.parametrize("bit", [0, 7, 100, 255, 256, 300, 511])
def test_bit_flip_fails(key, bit):
    signature = bytearray(sign_challenge(key.priv_key, TEST_MESSAGE))
    signature[bit // 8] ^= 1 << (bit % 8)
    assert not verify_challenge_signature(key.pub_key, TEST_MESSAGE, bytes(signature))


def test_different_message_fails(key):
    signature = sign_challenge(key.priv_key, TEST_MESSAGE)
    assert not verify_challenge_signature(key.pub_key, TEST_MESSAGE + b".", signature)


def test_cross_key_fails(key, other_key):
    signature = sign_challenge(key.priv_key, TEST_MESSAGE)
    assert not verify_challenge_signature(other_key.pub_key, TEST_MESSAGE, signature)


@pytest.mark.parametrize(
    "pub_key, signature",
    [
        (b"", None),
        (b"\x02" * 32, None),
        (None, b"\x01" * 63),
        (None, b"\x01" * 65),
        (None, "not bytes"),
        ("not bytes", None),
    ],
)
def test_malformed_inputs_return_false(key, pub_key, signature):
    good = sign_challenge(key.priv_key, TEST_MESSAGE)
    assert (
        verify_challenge_signature(
            key.pub_key if pub_key is None else pub_key,
            TEST_MESSAGE,
            good if signature is None else signature,
        )
        is False
    )


def test_non_bytes_message_returns_false(key):
    signature = sign_challenge(key.priv_key, TEST_MESSAGE)
    assert verify_challenge_signature(key.pub_key, 12345, signature) is False


@pytest.mark.parametrize(
    "priv_key",
    [
        b"",
        b"\x01" * 31,
        b"\x01" * 33,
        b"\x00" * 32,
        SECP256K1_ORDER.to_bytes(32, "big"),
        b"\xff" * 32,
    ],
)
def test_invalid_private_key(priv_key):
    with pytest.raises(InvalidKey):
        sign_challenge(priv_key, TEST_MESSAGE)


def test_verify_lone_surrogate_message_returns_false(key):
    assert verify_challenge_signature(key.pub_key, "\ud800", b"\x01" * 64) is False


def test_lone_surrogate_message_signs_as_replacement_char(key):
    signature = sign_challenge(key.priv_key, "nonce-\ud800")
    assert verify_challenge_signature(key.pub_key, "nonce-\ud800", signature)
    assert verify_challenge_signature(key.pub_key, "nonce-\ufffd".encode("utf-8"), signature)
