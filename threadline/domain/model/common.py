"""Base model for comment payloads."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for domain payload models.

    Payloads written to storage are immutable once built; a new write is a
    new model instance.
    """

    model_config = ConfigDict(frozen=True)
