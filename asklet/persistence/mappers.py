"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from asklet.domain.model import Answer, Notification, Question, Tag, User, Votes
from asklet.domain.value import (
    AnswerId,
    NotificationId,
    NotificationType,
    QuestionId,
    TagId,
    TagName,
    UserId,
    UserRole,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _voters(values: Iterable[Any] | None) -> frozenset[UserId]:
    return frozenset(UserId(_uuid(v)) for v in values or ())


def row_to_votes(row: Dict[str, Any]) -> Votes:
    """Build vote sets from the upvotes/downvotes array columns."""
    return Votes(upvotes=_voters(row["upvotes"]), downvotes=_voters(row["downvotes"]))


def votes_to_dict(votes: Votes) -> Dict[str, Any]:
    """Convert vote sets to array column values (sorted for stable storage)."""
    return {
        "upvotes": sorted(votes.upvotes, key=str),
        "downvotes": sorted(votes.downvotes, key=str),
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row["email"],
        password_hash=row["password_hash"],
        role=UserRole(row["role"]),
        avatar_url=row.get("avatar_url"),
        reputation=row["reputation"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Reputation is left out; it only changes through atomic adjustments.
    """
    return {
        "id": user.id,
        "username": user.username.root,
        "email": user.email,
        "password_hash": user.password_hash,
        "role": user.role.value,
        "avatar_url": user.avatar_url,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model."""
    accepted = row.get("accepted_answer_id")
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        tags=[TagName(t) for t in row.get("tags") or []],
        author_id=UserId(_uuid(row["author_id"])),
        votes=row_to_votes(row),
        accepted_answer_id=AnswerId(_uuid(accepted)) if accepted else None,
        views=row["views"],
        version=row["version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    Vote arrays, view count and version are excluded; they have their own
    atomic or conditional updates.
    """
    return {
        "id": question.id,
        "title": question.title,
        "description": question.description,
        "tags": [t.root for t in question.tags],
        "author_id": question.author_id,
        "accepted_answer_id": question.accepted_answer_id,
        "created_at": question.created_at,
        "updated_at": question.updated_at,
    }


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        votes=row_to_votes(row),
        is_accepted=row["is_accepted"],
        version=row["version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict (without votes/version)."""
    return {
        "id": answer.id,
        "question_id": answer.question_id,
        "author_id": answer.author_id,
        "content": answer.content,
        "is_accepted": answer.is_accepted,
        "created_at": answer.created_at,
        "updated_at": answer.updated_at,
    }


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    question_id = row.get("related_question_id")
    answer_id = row.get("related_answer_id")
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        sender_id=UserId(_uuid(row["sender_id"])),
        type=NotificationType(row["type"]),
        message=row["message"],
        related_question_id=QuestionId(_uuid(question_id)) if question_id else None,
        related_answer_id=AnswerId(_uuid(answer_id)) if answer_id else None,
        is_read=row["is_read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    return {
        "id": notification.id,
        "recipient_id": notification.recipient_id,
        "sender_id": notification.sender_id,
        "type": notification.type.value,
        "message": notification.message,
        "related_question_id": notification.related_question_id,
        "related_answer_id": notification.related_answer_id,
        "is_read": notification.is_read,
        "created_at": notification.created_at,
    }


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        description=row.get("description") or "",
        question_count=row["question_count"],
        created_at=row["created_at"],
    )
