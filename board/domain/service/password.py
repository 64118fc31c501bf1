"""Password hashing port."""


class PasswordHasher:
    """Interface for hashing and checking comment and post passwords."""

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password

        Returns:
            Hash suitable for storage
        """
        raise NotImplementedError

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored hash.

        Args:
            password: Plaintext password
            password_hash: Stored hash

        Returns:
            True if the password matches
        """
        raise NotImplementedError
