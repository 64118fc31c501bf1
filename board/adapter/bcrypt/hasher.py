"""bcrypt implementation of the password hashing port."""

import bcrypt
import logfire

from board.domain.service.password import PasswordHasher


class BcryptPasswordHasher(PasswordHasher):
    """Hashes passwords with bcrypt."""

    def __init__(self, rounds: int = 10) -> None:
        """Initialize hasher.

        Args:
            rounds: bcrypt cost factor
        """
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a password using bcrypt."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a password against a bcrypt hash.

        A malformed or empty stored hash never matches.
        """
        if not password_hash:
            return False
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except ValueError as e:
            logfire.warn("Stored password hash is malformed", error=str(e))
            return False


class MockPasswordHasher(PasswordHasher):
    """Reversible stand-in for bcrypt, for development and testing."""

    PREFIX = "mock$"

    def hash(self, password: str) -> str:
        return f"{self.PREFIX}{password}"

    def verify(self, password: str, password_hash: str) -> bool:
        return password_hash == f"{self.PREFIX}{password}"
