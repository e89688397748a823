from django.contrib.auth.hashers import BCryptPasswordHasher, BCryptSHA256PasswordHasher

# Bare modular-crypt bcrypt hashes, as written by earlier deployments
# sharing the ``sellers`` collection.
RAW_BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


class SellerBCryptPasswordHasher(BCryptSHA256PasswordHasher):
    """bcrypt (over a SHA-256 pre-hash) with a work factor of 10."""

    rounds = 10


def normalize_stored_hash(encoded: str) -> str:
    """Tag a bare bcrypt hash so Django's ``bcrypt`` hasher can verify it."""
    if encoded.startswith(RAW_BCRYPT_PREFIXES):
        return f"{BCryptPasswordHasher.algorithm}${encoded}"
    return encoded
