"""Test configuration and shared builders."""

from datetime import datetime, timedelta
from uuid import uuid4

from asklet.domain.model import Answer, Question, User, Votes
from asklet.domain.value import AnswerId, QuestionId, TagName, UserId, Username


def make_user(username: str = "alice", reputation: int = 0) -> User:
    """Build a user with a unique ID and a placeholder password hash."""
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=f"{username}@example.com",
        password_hash="not-a-real-hash",
        reputation=reputation,
    )


def make_question(
    author_id: UserId,
    title: str = "How do I await a coroutine?",
    tags: list[str] | None = None,
    votes: Votes | None = None,
    created_at: datetime | None = None,
) -> Question:
    """Build a question by the given author."""
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        description="I keep getting a coroutine object back.",
        tags=[TagName(t) for t in (tags or ["python"])],
        author_id=author_id,
        votes=votes or Votes(),
        created_at=created_at or datetime.now(),
    )


def make_answer(
    question_id: QuestionId,
    author_id: UserId,
    content: str = "Use the await keyword.",
    is_accepted: bool = False,
    age: timedelta = timedelta(0),
) -> Answer:
    """Build an answer; ``age`` backdates creation for ordering tests."""
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question_id,
        author_id=author_id,
        content=content,
        is_accepted=is_accepted,
        created_at=datetime.now() - age,
    )
