"""Unit tests for GetUserProfileUseCase."""

import pytest

from asklet.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
)
from asklet.domain.error import NotFoundError
from asklet.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetUserProfile:
    """Tests for user profiles."""

    @pytest.mark.asyncio
    async def test_profile_stats(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetUserProfileUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker = await user_repo.save(make_user("asker"))
        helper = await user_repo.save(make_user("helper", reputation=25))
        question = await question_repo.save(make_question(asker.id))
        await answer_repo.save(make_answer(question.id, helper.id, is_accepted=True))
        await answer_repo.save(make_answer(question.id, helper.id))

        # Act
        profile = await use_case.execute(GetUserProfileRequest(username="helper"))

        # Assert
        assert profile.user.username == "helper"
        assert profile.stats.answer_count == 2
        assert profile.stats.accepted_answers == 1
        assert profile.stats.question_count == 0
        assert profile.stats.reputation == 25
        assert len(profile.recent_answers) == 2
        assert profile.recent_questions == []

    @pytest.mark.asyncio
    async def test_unknown_username_not_found(self, unit_env):
        use_case = await unit_env.get(GetUserProfileUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetUserProfileRequest(username="nobody"))

    @pytest.mark.asyncio
    async def test_invalid_username_not_found(self, unit_env):
        use_case = await unit_env.get(GetUserProfileUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetUserProfileRequest(username="x"))
