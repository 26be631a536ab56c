import secrets
import string
from typing import Callable, Optional

TOKEN_LENGTH = 8
TOKEN_ALPHABET = string.ascii_uppercase + string.digits


def normalize_token(token: Optional[str]) -> str:
    """Trim and upper-case an access token. None becomes ""."""
    if token is None:
        return ""
    return str(token).strip().upper()


def generate_token(length: int = TOKEN_LENGTH) -> str:
    return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(length))


def generate_unique_token(exists: Callable[[str], bool], max_attempts: int = 10) -> Optional[str]:
    """
    Generate a token that `exists` reports as unused.

    Returns:
        The token, or None when every attempt collided
    """
    for _ in range(max_attempts):
        token = generate_token()
        if not exists(token):
            return token
    return None
