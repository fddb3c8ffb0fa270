"""Domain identifiers."""

from typing import NewType
from uuid import UUID

# Entity identifiers
UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)

# Opaque author/caller identity. Never shown to readers, only resolved to a display name.
Email = NewType("Email", str)
