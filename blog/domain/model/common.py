"""Common domain model base classes."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for domain entities."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
