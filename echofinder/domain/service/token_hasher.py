"""Hashing for non-password bearer tokens (invite tokens, reset tokens, API keys).

hash = SHA-256(prefix_salt + value + suffix_salt), hex encoded.

Salts are deployment secrets shared by every hash of a kind. They defeat
precomputed tables while keeping hashes deterministic, so a stored hash can
be found again by re-hashing the raw token.
"""

import hashlib
import hmac
import secrets

from echofinder.domain.error import ConfigurationError, InternalError, ValidationError

from .base import Service

PREFIX_SALT_SETTING = "HASH__PREFIX_SALT"
SUFFIX_SALT_SETTING = "HASH__SUFFIX_SALT"


# Unicode whitespace such as \xa0 counts as blank
def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class TokenHasher(Service):
    """Deterministic salted hashing and verification of opaque tokens.

    Stateless after construction. Does not log.
    """

    def __init__(self, prefix_salt: str | None, suffix_salt: str | None) -> None:
        """Initialize hasher.

        Args:
            prefix_salt: Salt prepended to every value
            suffix_salt: Salt appended to every value

        Raises:
            ConfigurationError: If either salt is missing or blank
        """
        if _is_blank(prefix_salt):
            raise ConfigurationError(PREFIX_SALT_SETTING)
        if _is_blank(suffix_salt):
            raise ConfigurationError(SUFFIX_SALT_SETTING)
        self._prefix_salt = prefix_salt
        self._suffix_salt = suffix_salt

    def hash(self, value: str | None) -> str:
        """Hash a token value.

        Args:
            value: Raw token value

        Returns:
            64 character lowercase hex SHA-256 digest

        Raises:
            ValidationError: If value is None or blank
            InternalError: If SHA-256 is unavailable in this runtime
        """
        if _is_blank(value):
            raise ValidationError("Value to hash cannot be null or blank")

        salted = f"{self._prefix_salt}{value}{self._suffix_salt}".encode("utf-8")
        try:
            digest = hashlib.new("sha256", salted)
        except ValueError as e:
            raise InternalError("SHA-256 algorithm not available") from e
        return digest.hexdigest()

    def verify(self, raw_token: str | None, stored_hash: str | None) -> bool:
        """Check a raw token against a stored hash.

        Missing data is a negative result, not an error.

        Args:
            raw_token: Token presented by the caller
            stored_hash: Hash previously produced by `hash`

        Returns:
            True if hash(raw_token) equals stored_hash
        """
        if raw_token is None or stored_hash is None:
            return False
        return hmac.compare_digest(
            self.hash(raw_token).encode("ascii"), stored_hash.encode("utf-8")
        )

    @staticmethod
    def generate_token() -> str:
        """Generate a new URL-safe raw token with 256 bits of entropy."""
        return secrets.token_urlsafe(32)
