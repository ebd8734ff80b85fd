import base64

import pytest

from core.auth import auth_from_keypair, keypair_to_auth
from core.domain.models import KeypairEntry


def _decode(header: str) -> tuple[str, str]:
    scheme, _, payload = header.partition(" ")
    assert scheme == "Basic"
    key, _, secret = base64.b64decode(payload).decode("utf-8").partition(":")
    return key, secret


def test_known_value():
    assert keypair_to_auth("key", "secret") == "Basic a2V5OnNlY3JldA=="


@pytest.mark.parametrize(
    ("key", "secret"),
    [
        ("ABCD", "s3cret"),
        ("ÄÖÜ", "pässwörd"),
        ("鍵", "秘密"),
        ("emoji", "🔑🛒"),
        ("key", "with:colons:inside"),
        ("", ""),
    ],
)
def test_round_trip(key, secret):
    assert _decode(keypair_to_auth(key, secret)) == (key, secret)


def test_multibyte_is_encoded_once():
    header = keypair_to_auth("ü", "é")
    assert base64.b64decode(header.split(" ", 1)[1]) == "ü:é".encode("utf-8")


def test_auth_from_keypair():
    entry = KeypairEntry(server="http://x", key="k", secret="s")
    assert auth_from_keypair(entry) == keypair_to_auth("k", "s")
