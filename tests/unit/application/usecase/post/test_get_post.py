"""Unit tests for GetPostUseCase and ListPostsUseCase."""

from uuid import uuid4

import pytest

from blog.application.usecase.post import (
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from blog.domain.error import NotFoundError
from blog.domain.repository import PostRepository, UserRepository
from blog.domain.service import UNKNOWN_AUTHOR
from tests.conftest import days_ago, make_chain, make_comment, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestGetPostUseCase:
    """Tests for GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_renders_author_and_comment_names(self, unit_env):
        """Post and comment authors are shown by name with the author's profile."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(
            make_user("owner@x.com", "Olive", about="Writes about trees", github="olive")
        )
        await user_repo.save(make_user("a@x.com", "Ada"))

        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(
            make_post(
                comments=[
                    make_comment("a@x.com", replies=[make_comment("ghost@x.com")]),
                    make_comment("owner@x.com", "Thanks"),
                ]
            )
        )
        use_case = await unit_env.get(GetPostUseCase)

        # Act
        view = await use_case.execute(GetPostRequest(post_id=str(post.id)))

        # Assert
        assert view.author.name == "Olive"
        assert view.author.about == "Writes about trees"
        assert view.author.github == "olive"
        assert view.comment_count == 3
        assert [c.author_name for c in view.comments] == ["Ada", UNKNOWN_AUTHOR, "Olive"]
        assert [c.depth for c in view.comments] == [0, 1, 0]
        assert view.version == post.version

    @pytest.mark.asyncio
    async def test_one_name_batch_per_read(self, unit_env):
        """Every author of a read is resolved with a single repository query."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        for i in range(5):
            await user_repo.save(make_user(f"u{i}@x.com", f"User {i}"))

        comments = [make_comment(f"u{i}@x.com") for i in range(5)]
        comments[0].replies.append(make_comment("u4@x.com"))
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(comments=comments))

        use_case = await unit_env.get(GetPostUseCase)
        user_repo.batch_lookups = 0

        # Act
        view = await use_case.execute(GetPostRequest(post_id=str(post.id)))

        # Assert
        assert user_repo.batch_lookups == 1
        top_level = [c.author_name for c in view.comments if c.depth == 0]
        assert top_level == [f"User {i}" for i in range(5)]
        assert view.comments[1].author_name == "User 4"

    @pytest.mark.asyncio
    async def test_author_without_profile(self, unit_env):
        """A post whose author has no user record still renders."""
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post("nobody@x.com"))
        use_case = await unit_env.get(GetPostUseCase)

        view = await use_case.execute(GetPostRequest(post_id=str(post.id)))

        assert view.author.name == UNKNOWN_AUTHOR
        assert view.author.about is None
        assert view.comments == []

    @pytest.mark.asyncio
    async def test_deep_thread(self, unit_env):
        """A 10,000-comment chain is stored, loaded and rendered."""
        # Arrange
        depth = 10_000
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(comments=make_chain(depth)))
        use_case = await unit_env.get(GetPostUseCase)

        # Act
        view = await use_case.execute(GetPostRequest(post_id=str(post.id)))

        # Assert
        assert view.comment_count == depth
        assert len(view.comments) == depth
        assert view.comments[-1].depth == depth - 1
        assert view.comments[-1].parent_id == view.comments[-2].comment_id
        assert view.model_dump_json()

    @pytest.mark.asyncio
    async def test_unknown_post_raises_not_found(self, unit_env):
        use_case = await unit_env.get(GetPostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetPostRequest(post_id=str(uuid4())))


class TestListPostsUseCase:
    """Tests for ListPostsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_summaries_with_names(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("owner@x.com", "Olive"))

        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(
            make_post(title="Older", created_at=days_ago(2), comments=[make_comment()])
        )
        await post_repo.save(make_post("stranger@x.com", title="Newer", created_at=days_ago(1)))
        use_case = await unit_env.get(ListPostsUseCase)
        user_repo.batch_lookups = 0

        # Act
        response = await use_case.execute(ListPostsRequest())

        # Assert
        assert [p.title for p in response.posts] == ["Newer", "Older"]
        assert [p.author_name for p in response.posts] == [UNKNOWN_AUTHOR, "Olive"]
        assert [p.comment_count for p in response.posts] == [0, 1]
        assert user_repo.batch_lookups == 1

    @pytest.mark.asyncio
    async def test_filters_by_author(self, unit_env):
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post("a@x.com", title="Mine"))
        await post_repo.save(make_post("b@x.com", title="Theirs"))
        use_case = await unit_env.get(ListPostsUseCase)

        response = await use_case.execute(ListPostsRequest(author_email="a@x.com"))

        assert [p.title for p in response.posts] == ["Mine"]
