"""User domain model."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.value import Email, UserId

from .common import DomainModel


class User(DomainModel):
    """User entity.

    Only the public profile is modelled here; registration and credentials
    live with the account service.
    """

    id: UserId
    email: Email
    name: str = Field(min_length=1, max_length=100)
    photo: Optional[bytes] = None
    about: Optional[str] = Field(default=None, max_length=1000)
    linkedin: Optional[str] = None
    github: Optional[str] = None
    twitter: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
