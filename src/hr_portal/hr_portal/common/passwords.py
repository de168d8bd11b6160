from __future__ import annotations

import hmac
import logging

from werkzeug.security import check_password_hash, generate_password_hash

logger = logging.getLogger(__name__)

# Prefixes produced by werkzeug's generate_password_hash.
_HASH_METHODS = ("scrypt:", "pbkdf2:")


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def is_password_hash(stored: str) -> bool:
    return bool(stored) and stored.startswith(_HASH_METHODS) and stored.count("$") == 2


def verify_password(stored: str, candidate: str) -> bool:
    """Check ``candidate`` against a stored werkzeug hash.

    Records seeded before hashing was introduced still hold the raw password;
    those are compared in constant time.
    """
    if not stored:
        return False

    if is_password_hash(stored):
        try:
            return check_password_hash(stored, candidate)
        except ValueError:
            # e.g. a hash method this werkzeug build does not support
            logger.warning("Unsupported password hash format")
            return False

    logger.warning("Account password is stored unhashed; re-save it to upgrade")
    return hmac.compare_digest(stored.encode("utf-8"), (candidate or "").encode("utf-8"))
