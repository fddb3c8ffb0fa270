"""Unit tests for DeleteCommentUseCase and DeleteReplyUseCase."""

import pytest

from blog.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
)
from blog.domain.error import NotAuthenticatedError, NotAuthorizedError, NotFoundError
from blog.domain.repository import PostRepository
from blog.domain.service.comment_tree import count_comments
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def save_post(unit_env, comments):
    post_repo = await unit_env.get(PostRepository)
    return await post_repo.save(make_post(comments=comments))


async def stored_count(unit_env, post) -> int:
    post_repo = await unit_env.get(PostRepository)
    stored = await post_repo.find_by_id(post.id)
    return count_comments(stored.comments)


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_comment_with_replies(self, unit_env):
        """The author removes their comment and everything under it."""
        # Arrange
        c1 = make_comment("a@x.com", replies=[make_comment("b@x.com", replies=[make_comment()])])
        keep = make_comment("b@x.com", "keep")
        post = await save_post(unit_env, [c1, keep])
        use_case = await unit_env.get(DeleteCommentUseCase)

        # Act
        view = await use_case.execute(
            DeleteCommentRequest(
                post_id=str(post.id),
                comment_id=str(c1.id),
                caller_email="a@x.com",
                author_email="a@x.com",
            )
        )

        # Assert
        assert view.comment_count == 1
        assert [c.content for c in view.comments] == ["keep"]
        assert await stored_count(unit_env, post) == 1

    @pytest.mark.asyncio
    async def test_without_caller_is_unauthenticated(self, unit_env):
        c1 = make_comment("a@x.com")
        post = await save_post(unit_env, [c1])
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotAuthenticatedError):
            await use_case.execute(
                DeleteCommentRequest(
                    post_id=str(post.id),
                    comment_id=str(c1.id),
                    caller_email=None,
                    author_email="a@x.com",
                )
            )

        assert await stored_count(unit_env, post) == 1

    @pytest.mark.asyncio
    async def test_caller_acting_as_someone_else_is_forbidden(self, unit_env):
        """A caller cannot claim another identity to delete."""
        c1 = make_comment("a@x.com")
        post = await save_post(unit_env, [c1])
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteCommentRequest(
                    post_id=str(post.id),
                    comment_id=str(c1.id),
                    caller_email="b@x.com",
                    author_email="a@x.com",
                )
            )

        assert await stored_count(unit_env, post) == 1

    @pytest.mark.asyncio
    async def test_deleting_someone_elses_comment_is_forbidden(self, unit_env):
        """Acting as yourself is not enough: the comment must be yours."""
        # Arrange
        c1 = make_comment("a@x.com", replies=[make_comment("b@x.com")])
        post = await save_post(unit_env, [c1])
        use_case = await unit_env.get(DeleteCommentUseCase)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteCommentRequest(
                    post_id=str(post.id),
                    comment_id=str(c1.id),
                    caller_email="b@x.com",
                    author_email="b@x.com",
                )
            )

        assert await stored_count(unit_env, post) == 2


class TestDeleteReplyUseCase:
    """Tests for DeleteReplyUseCase."""

    @pytest.mark.asyncio
    async def test_delete_own_reply(self, unit_env):
        # Arrange
        reply = make_comment("b@x.com", "oops")
        c1 = make_comment("a@x.com", replies=[reply])
        post = await save_post(unit_env, [c1])
        use_case = await unit_env.get(DeleteReplyUseCase)

        # Act
        view = await use_case.execute(
            DeleteReplyRequest(
                post_id=str(post.id),
                comment_id=str(c1.id),
                reply_id=str(reply.id),
                caller_email="b@x.com",
                author_email="b@x.com",
            )
        )

        # Assert
        assert view.comment_count == 1
        assert [c.depth for c in view.comments] == [0]

    @pytest.mark.asyncio
    async def test_comment_author_cannot_delete_reply(self, unit_env):
        """Owning the parent comment does not grant deleting replies."""
        reply = make_comment("b@x.com")
        c1 = make_comment("a@x.com", replies=[reply])
        post = await save_post(unit_env, [c1])
        use_case = await unit_env.get(DeleteReplyUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteReplyRequest(
                    post_id=str(post.id),
                    comment_id=str(c1.id),
                    reply_id=str(reply.id),
                    caller_email="a@x.com",
                    author_email="a@x.com",
                )
            )

        assert await stored_count(unit_env, post) == 2

    @pytest.mark.asyncio
    async def test_reply_id_that_is_the_comment_itself_is_not_found(self, unit_env):
        """A comment is not one of its own replies."""
        c1 = make_comment("a@x.com")
        post = await save_post(unit_env, [c1])
        use_case = await unit_env.get(DeleteReplyUseCase)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                DeleteReplyRequest(
                    post_id=str(post.id),
                    comment_id=str(c1.id),
                    reply_id=str(c1.id),
                    caller_email="a@x.com",
                    author_email="a@x.com",
                )
            )

        assert exc_info.value.resource == "Reply"
