"""Unit tests for CastVoteUseCase."""

from uuid import uuid4

import pytest

from asklet.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from asklet.domain.error import NotFoundError, SelfVoteForbiddenError, ValidationError
from asklet.domain.repository import QuestionRepository, UserRepository
from asklet.domain.value import VoteDirection
from tests.conftest import make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed_question(unit_env):
    user_repo = await unit_env.get(UserRepository)
    question_repo = await unit_env.get(QuestionRepository)
    asker = await user_repo.save(make_user("asker"))
    voter = await user_repo.save(make_user("voter"))
    question = await question_repo.save(make_question(asker.id))
    return asker, voter, question


class TestCastVote:
    """Tests for the cast vote use case."""

    @pytest.mark.asyncio
    async def test_upvote_returns_tallies(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        _, voter, question = await _seed_question(unit_env)

        # Act
        response = await use_case.execute(
            CastVoteRequest(
                item_id=str(question.id),
                item_type="question",
                vote_type="up",
                user_id=str(voter.id),
            )
        )

        # Assert
        assert response.vote_score == 1
        assert response.upvotes == 1
        assert response.downvotes == 0
        assert response.user_vote == VoteDirection.UP
        assert response.message.startswith("Successfully")

    @pytest.mark.asyncio
    async def test_response_serializes_camel_case(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        _, voter, question = await _seed_question(unit_env)

        response = await use_case.execute(
            CastVoteRequest(
                item_id=str(question.id),
                item_type="question",
                vote_type="down",
                user_id=str(voter.id),
            )
        )

        body = response.model_dump(by_alias=True, mode="json")
        assert body["voteScore"] == -1
        assert body["userVote"] == "down"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("item_id", "item_type", "vote_type"),
        [(None, "question", "up"), ("x", None, "up"), ("x", "question", None)],
    )
    async def test_missing_fields_rejected(self, unit_env, item_id, item_type, vote_type):
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(ValidationError, match="itemId, itemType"):
            await use_case.execute(
                CastVoteRequest(
                    item_id=item_id,
                    item_type=item_type,
                    vote_type=vote_type,
                    user_id=str(uuid4()),
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_item_type_rejected(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(ValidationError, match="itemType must be question or answer"):
            await use_case.execute(
                CastVoteRequest(
                    item_id=str(uuid4()),
                    item_type="comment",
                    vote_type="up",
                    user_id=str(uuid4()),
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_direction_rejected(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(ValidationError, match="voteType must be up or down"):
            await use_case.execute(
                CastVoteRequest(
                    item_id=str(uuid4()),
                    item_type="answer",
                    vote_type="sideways",
                    user_id=str(uuid4()),
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_item_id_rejected(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(ValidationError, match="Invalid itemId"):
            await use_case.execute(
                CastVoteRequest(
                    item_id="not-a-uuid",
                    item_type="question",
                    vote_type="up",
                    user_id=str(uuid4()),
                )
            )

    @pytest.mark.asyncio
    async def test_missing_item_not_found(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        user_repo = await unit_env.get(UserRepository)
        voter = await user_repo.save(make_user("voter"))

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CastVoteRequest(
                    item_id=str(uuid4()),
                    item_type="answer",
                    vote_type="up",
                    user_id=str(voter.id),
                )
            )

    @pytest.mark.asyncio
    async def test_self_vote_rejected(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        asker, _, question = await _seed_question(unit_env)

        with pytest.raises(SelfVoteForbiddenError):
            await use_case.execute(
                CastVoteRequest(
                    item_id=str(question.id),
                    item_type="question",
                    vote_type="up",
                    user_id=str(asker.id),
                )
            )
