"""bcrypt password hashing adapter."""

from .hasher import BcryptPasswordHasher, MockPasswordHasher

__all__ = ["BcryptPasswordHasher", "MockPasswordHasher"]
