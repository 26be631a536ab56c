"""
Test access token generation and normalization.
"""

from utils import token_utils
from utils.token_utils import TOKEN_ALPHABET, generate_token, generate_unique_token, normalize_token


def test_generate_token_draws_from_secrets(monkeypatch):
    monkeypatch.setattr(token_utils.secrets, "choice", lambda alphabet: alphabet[-1])
    assert generate_token() == "99999999"


def test_generate_token_alphabet():
    token = generate_token(64)
    assert len(token) == 64
    assert set(token) <= set(TOKEN_ALPHABET)


def test_generate_unique_token_gives_up_after_collisions():
    calls = []

    def always_taken(token):
        calls.append(token)
        return True

    assert generate_unique_token(always_taken, max_attempts=3) is None
    assert len(calls) == 3


def test_normalize_token():
    assert normalize_token("  ab12cd34 ") == "AB12CD34"
    assert normalize_token(None) == ""
