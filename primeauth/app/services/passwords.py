"""
Password hashing helpers (bcrypt).

Cost comes from ApplicationConfig.BCRYPT_ROUNDS so tests can lower it.
"""

from functools import lru_cache

import bcrypt

from config import ApplicationConfig

# bcrypt only looks at the first 72 bytes; newer releases raise instead of truncating
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


@lru_cache(maxsize=4)
def _dummy_hash(rounds: int) -> bytes:
    return bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds))


def dummy_verify(password: str) -> None:
    """Run one bcrypt comparison against a throwaway hash (unknown-user path)"""
    bcrypt.checkpw(_encode(password), _dummy_hash(ApplicationConfig.BCRYPT_ROUNDS))
