import secrets

from jobtracker.utils.hashing import sha256_text


def generate_token() -> str:
    return secrets.token_hex(32)


def hash_token(token: str) -> str:
    # Only the hash is persisted
    return sha256_text(token)
