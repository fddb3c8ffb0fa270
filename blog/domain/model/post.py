"""Post domain model."""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from blog.domain.value import Email, PostId

from .comment import Comment
from .common import DomainModel


class Post(DomainModel):
    """Post entity.

    A blog entry owning its whole comment tree. The post is the unit of
    persistence: every comment change saves the full post.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1)
    author_email: Email
    code_language: Optional[str] = Field(default=None, max_length=50)
    code_snippet: Optional[str] = None
    image: Optional[bytes] = None
    comments: list[Comment] = Field(default_factory=list)
    # Bumped on every successful save; used to reject stale writes
    version: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_code(self) -> "Post":
        """A code language only makes sense together with a snippet."""
        if self.code_language and not self.code_snippet:
            raise ValueError("code_language requires code_snippet")
        return self
