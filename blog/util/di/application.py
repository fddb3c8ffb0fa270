"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.comment import (
    AddCommentUseCase,
    AddReplyUseCase,
    DeleteCommentUseCase,
    DeleteReplyUseCase,
)
from blog.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from blog.domain.service import CommentService, PostService, UserService
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_add_reply_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> AddReplyUseCase:
        """Provide add reply use case."""
        return AddReplyUseCase(comment_service=comment_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_reply_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> DeleteReplyUseCase:
        """Provide delete reply use case."""
        return DeleteReplyUseCase(
            comment_service=comment_service, user_service=user_service
        )
