import base64
import hashlib

import bcrypt


def _prehash(password: str) -> bytes:
    # bcrypt only accepts 72 bytes; a base64 SHA-256 digest is always 44
    digest = hashlib.sha256(password.encode("utf-8")).digest()
    return base64.b64encode(digest)


def hash_password(password: str) -> str:
    """Return a salted bcrypt hash of ``password`` suitable for storage."""
    return bcrypt.hashpw(_prehash(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Return whether ``password`` matches a hash from ``hash_password``."""
    return bcrypt.checkpw(_prehash(password), password_hash.encode("utf-8"))
