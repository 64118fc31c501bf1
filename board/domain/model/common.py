"""Base model for persisted board entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for posts and comments.

    Entities are frozen; changes go through ``model_copy(update=...)`` and
    are written back through a repository.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )
