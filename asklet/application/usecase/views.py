"""Response views shared by several use cases."""

from datetime import datetime
from typing import Optional

from asklet.application.usecase.base import CamelModel
from asklet.domain.model import Answer, Notification, Question, User
from asklet.domain.value import NotificationType, UserId, UserRole, VoteDirection


class AuthorView(CamelModel):
    """Public identity of a content author."""

    id: str
    username: str
    reputation: int
    avatar_url: Optional[str] = None

    @classmethod
    def from_domain(cls, user: User) -> "AuthorView":
        return cls(
            id=str(user.id),
            username=user.username.root,
            reputation=user.reputation,
            avatar_url=user.avatar_url,
        )


class UserView(CamelModel):
    """The signed-in user's own account."""

    id: str
    username: str
    email: str
    role: UserRole
    reputation: int
    avatar_url: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserView":
        return cls(
            id=str(user.id),
            username=user.username.root,
            email=user.email,
            role=user.role,
            reputation=user.reputation,
            avatar_url=user.avatar_url,
            created_at=user.created_at,
        )


class QuestionView(CamelModel):
    """Question as returned by the API."""

    id: str
    title: str
    description: str
    tags: list[str]
    author: Optional[AuthorView]
    vote_score: int
    upvotes: int
    downvotes: int
    user_vote: Optional[VoteDirection] = None
    views: int
    accepted_answer_id: Optional[str]
    answer_count: int = 0
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(
        cls,
        question: Question,
        author: Optional[User],
        answer_count: int = 0,
        viewer_id: Optional[UserId] = None,
    ) -> "QuestionView":
        return cls(
            id=str(question.id),
            title=question.title,
            description=question.description,
            tags=[tag.root for tag in question.tags],
            author=AuthorView.from_domain(author) if author else None,
            vote_score=question.votes.score,
            upvotes=len(question.votes.upvotes),
            downvotes=len(question.votes.downvotes),
            user_vote=question.votes.vote_of(viewer_id) if viewer_id else None,
            views=question.views,
            accepted_answer_id=(
                str(question.accepted_answer_id) if question.accepted_answer_id else None
            ),
            answer_count=answer_count,
            created_at=question.created_at,
            updated_at=question.updated_at,
        )


class AnswerView(CamelModel):
    """Answer as returned by the API."""

    id: str
    question_id: str
    content: str
    author: Optional[AuthorView]
    vote_score: int
    upvotes: int
    downvotes: int
    user_vote: Optional[VoteDirection] = None
    is_accepted: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(
        cls,
        answer: Answer,
        author: Optional[User],
        viewer_id: Optional[UserId] = None,
    ) -> "AnswerView":
        return cls(
            id=str(answer.id),
            question_id=str(answer.question_id),
            content=answer.content,
            author=AuthorView.from_domain(author) if author else None,
            vote_score=answer.votes.score,
            upvotes=len(answer.votes.upvotes),
            downvotes=len(answer.votes.downvotes),
            user_vote=answer.votes.vote_of(viewer_id) if viewer_id else None,
            is_accepted=answer.is_accepted,
            created_at=answer.created_at,
            updated_at=answer.updated_at,
        )


class NotificationView(CamelModel):
    """Notification as returned by the API and pushed over live channels."""

    id: str
    recipient_id: str
    sender_id: str
    type: NotificationType
    message: str
    related_question_id: Optional[str] = None
    related_answer_id: Optional[str] = None
    is_read: bool
    created_at: datetime

    @classmethod
    def from_domain(cls, notification: Notification) -> "NotificationView":
        return cls(
            id=str(notification.id),
            recipient_id=str(notification.recipient_id),
            sender_id=str(notification.sender_id),
            type=notification.type,
            message=notification.message,
            related_question_id=(
                str(notification.related_question_id)
                if notification.related_question_id
                else None
            ),
            related_answer_id=(
                str(notification.related_answer_id)
                if notification.related_answer_id
                else None
            ),
            is_read=notification.is_read,
            created_at=notification.created_at,
        )


class Pagination(CamelModel):
    """Page position within a listing."""

    current: int
    pages: int
    total: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        pages = (total + limit - 1) // limit if limit else 0
        return cls(
            current=page,
            pages=pages,
            total=total,
            has_next=page < pages,
            has_prev=page > 1,
        )
