"""Unit tests for row/domain mappers."""

from datetime import datetime
from uuid import uuid4

from asklet.domain.model import Votes
from asklet.domain.value import NotificationType, UserId
from asklet.persistence.mappers import (
    question_to_dict,
    row_to_notification,
    row_to_question,
    row_to_votes,
    votes_to_dict,
)
from tests.conftest import make_question, make_user


def test_vote_arrays_accept_strings_and_uuids():
    voter = uuid4()
    votes = row_to_votes({"upvotes": [str(voter)], "downvotes": None})

    assert votes.upvotes == frozenset({UserId(voter)})
    assert votes.downvotes == frozenset()


def test_votes_stored_sorted():
    voters = [UserId(uuid4()) for _ in range(3)]
    stored = votes_to_dict(Votes(upvotes=frozenset(voters)))

    assert stored["upvotes"] == sorted(voters, key=str)
    assert stored["downvotes"] == []


def test_question_dict_leaves_out_counters():
    """Votes, views and version have their own conditional updates."""
    question = make_question(make_user().id, tags=["Python", "asyncio"])

    stored = question_to_dict(question)

    assert stored["tags"] == ["python", "asyncio"]
    assert "upvotes" not in stored
    assert "views" not in stored
    assert "version" not in stored


def test_question_row_round_trips_accepted_answer():
    now = datetime.now()
    accepted = uuid4()
    row = {
        "id": uuid4(),
        "title": "t",
        "description": "d",
        "tags": ["python"],
        "author_id": uuid4(),
        "upvotes": [],
        "downvotes": [uuid4()],
        "accepted_answer_id": accepted,
        "views": 4,
        "version": 7,
        "created_at": now,
        "updated_at": now,
    }

    question = row_to_question(row)

    assert question.accepted_answer_id == accepted
    assert question.votes.score == -1
    assert question.version == 7


def test_notification_row_without_related_items():
    now = datetime.now()
    row = {
        "id": uuid4(),
        "recipient_id": uuid4(),
        "sender_id": uuid4(),
        "type": "accept",
        "message": "m",
        "related_question_id": None,
        "related_answer_id": None,
        "is_read": False,
        "created_at": now,
    }

    notification = row_to_notification(row)

    assert notification.type == NotificationType.ACCEPT
    assert notification.related_question_id is None
    assert notification.related_answer_id is None
