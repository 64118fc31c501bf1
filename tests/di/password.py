"""Mock password hashing provider for testing."""

from dishka import Scope, provide

from board.adapter.bcrypt import MockPasswordHasher
from board.domain.service import PasswordHasher
from board.util.di.infrastructure.password import PasswordProvider


class MockPasswordProvider(PasswordProvider):
    """Mock password provider skipping bcrypt's deliberate slowness."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        """Provide mock password hasher."""
        return MockPasswordHasher()
