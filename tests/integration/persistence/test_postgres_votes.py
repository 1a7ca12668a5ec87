"""Integration tests for conditional vote writes against PostgreSQL.

Requires DATABASE__URL pointing at a database with migrations applied.
"""

import os
from uuid import uuid4

import pytest

from asklet.domain.model import Votes
from asklet.domain.repository import QuestionRepository, UserRepository
from asklet.domain.value import UserId
from tests.conftest import make_question, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"), reason="DATABASE__URL not set"
)

integration_env = create_env_fixture(unmock={"persistence"})


def _unique_user(**kwargs):
    return make_user(f"user{uuid4().hex[:10]}", **kwargs)


class TestQuestionVotes:
    """Version-guarded vote writes."""

    @pytest.mark.asyncio
    async def test_stale_version_loses(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        question_repo = await integration_env.get(QuestionRepository)
        author = await user_repo.save(_unique_user())
        question = await question_repo.save(make_question(author.id))
        voter = UserId(uuid4())

        # Act
        first = await question_repo.update_votes(
            question.id, Votes(upvotes=frozenset({voter})), expected_version=0
        )
        stale = await question_repo.update_votes(
            question.id, Votes(downvotes=frozenset({voter})), expected_version=0
        )

        # Assert
        assert first is True
        assert stale is False
        stored = await question_repo.find_by_id(question.id)
        assert stored.version == 1
        assert stored.votes.upvotes == frozenset({voter})

    @pytest.mark.asyncio
    async def test_reputation_adjustments_accumulate(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        user = await user_repo.save(_unique_user(reputation=3))

        await user_repo.adjust_reputation(user.id, 10)
        await user_repo.adjust_reputation(user.id, -15)

        assert (await user_repo.find_by_id(user.id)).reputation == -2

    @pytest.mark.asyncio
    async def test_save_keeps_reputation(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        user = await user_repo.save(_unique_user())
        await user_repo.adjust_reputation(user.id, 5)

        await user_repo.save(user.model_copy(update={"avatar_url": "https://a/b.png"}))

        stored = await user_repo.find_by_id(user.id)
        assert stored.reputation == 5
        assert stored.avatar_url == "https://a/b.png"
