"""Base service class for domain services."""

import logfire

from asklet.domain.error import NotAuthorizedError
from asklet.domain.model import User
from asklet.domain.value import UserId, UserRole


class Service:
    """Base class for all domain services.

    Domain services hold business rules that span entities, such as
    reputation changes caused by votes on someone else's content.
    """

    @staticmethod
    def require_author_or_admin(
        author_id: UserId, user: User, resource: str, resource_id: str, action: str
    ) -> None:
        """Allow content changes by the content's author or an admin.

        Raises:
            NotAuthorizedError: If the user is neither
        """
        if user.id == author_id or user.role == UserRole.ADMIN:
            return
        logfire.warn(
            f"{resource} {action} attempted by non-author",
            resource_id=resource_id,
            user_id=str(user.id),
        )
        raise NotAuthorizedError(resource, resource_id, str(user.id), action)
