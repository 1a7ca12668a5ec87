"""Unit tests for editing and deleting questions through the use cases."""

from uuid import uuid4

import pytest

from asklet.application.usecase.answer import AcceptAnswerRequest, AcceptAnswerUseCase
from asklet.application.usecase.question import (
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from asklet.domain.error import NotAuthorizedError, NotFoundError
from asklet.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from asklet.domain.value import UserRole
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed(unit_env):
    user_repo = await unit_env.get(UserRepository)
    question_repo = await unit_env.get(QuestionRepository)
    answer_repo = await unit_env.get(AnswerRepository)
    asker = await user_repo.save(make_user("asker"))
    helper = await user_repo.save(make_user("helper"))
    question = await question_repo.save(make_question(asker.id))
    answers = [
        await answer_repo.save(make_answer(question.id, helper.id)) for _ in range(2)
    ]
    return asker, helper, question, answers


class TestDeleteQuestion:
    """Tests for the delete question use case."""

    @pytest.mark.asyncio
    async def test_delete_removes_answers_and_takes_back_acceptance(self, unit_env):
        """Deleting a question drops its answers and the accepted answer's bonus."""
        # Arrange
        accept = await unit_env.get(AcceptAnswerUseCase)
        delete = await unit_env.get(DeleteQuestionUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker, helper, question, answers = await _seed(unit_env)
        await accept.execute(
            AcceptAnswerRequest(answer_id=str(answers[0].id), user_id=str(asker.id))
        )
        assert (await user_repo.find_by_id(helper.id)).reputation == 15

        # Act
        result = await delete.execute(
            DeleteQuestionRequest(question_id=str(question.id), user_id=str(asker.id))
        )

        # Assert
        assert result.message == "Question deleted successfully"
        assert await question_repo.find_by_id(question.id) is None
        assert await answer_repo.find_by_question(question.id) == []
        assert (await user_repo.find_by_id(helper.id)).reputation == 0

    @pytest.mark.asyncio
    async def test_admin_may_delete(self, unit_env):
        delete = await unit_env.get(DeleteQuestionUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        _, _, question, _ = await _seed(unit_env)
        admin = await user_repo.save(
            make_user("moderator").model_copy(update={"role": UserRole.ADMIN})
        )

        await delete.execute(
            DeleteQuestionRequest(question_id=str(question.id), user_id=str(admin.id))
        )

        assert await question_repo.find_by_id(question.id) is None

    @pytest.mark.asyncio
    async def test_forbidden_delete_changes_nothing(self, unit_env):
        """A refused delete must not touch answers or acceptance."""
        # Arrange
        accept = await unit_env.get(AcceptAnswerUseCase)
        delete = await unit_env.get(DeleteQuestionUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker, helper, question, answers = await _seed(unit_env)
        await accept.execute(
            AcceptAnswerRequest(answer_id=str(answers[0].id), user_id=str(asker.id))
        )

        # Act
        with pytest.raises(NotAuthorizedError):
            await delete.execute(
                DeleteQuestionRequest(
                    question_id=str(question.id), user_id=str(helper.id)
                )
            )

        # Assert
        stored = await question_repo.find_by_id(question.id)
        assert stored.accepted_answer_id == answers[0].id
        assert len(await answer_repo.find_by_question(question.id)) == 2
        assert (await user_repo.find_by_id(helper.id)).reputation == 15

    @pytest.mark.asyncio
    @pytest.mark.parametrize("question_id", ["not-a-uuid", None])
    async def test_unknown_question_not_found(self, unit_env, question_id):
        delete = await unit_env.get(DeleteQuestionUseCase)
        asker, _, _, _ = await _seed(unit_env)

        with pytest.raises(NotFoundError, match="Question not found"):
            await delete.execute(
                DeleteQuestionRequest(
                    question_id=question_id or str(uuid4()), user_id=str(asker.id)
                )
            )


class TestUpdateQuestion:
    """Tests for the update question use case."""

    @pytest.mark.asyncio
    async def test_partial_update_returns_view(self, unit_env):
        update = await unit_env.get(UpdateQuestionUseCase)
        asker, _, question, _ = await _seed(unit_env)

        view = await update.execute(
            UpdateQuestionRequest(
                question_id=str(question.id),
                user_id=str(asker.id),
                tags=["Rust", "rust"],
            )
        )

        assert view.title == question.title
        assert view.tags == ["rust"]
        assert view.answer_count == 2
        assert view.author.username == "asker"

    @pytest.mark.asyncio
    async def test_admin_edit_keeps_original_author(self, unit_env):
        update = await unit_env.get(UpdateQuestionUseCase)
        user_repo = await unit_env.get(UserRepository)
        _, _, question, _ = await _seed(unit_env)
        admin = await user_repo.save(
            make_user("moderator").model_copy(update={"role": UserRole.ADMIN})
        )

        view = await update.execute(
            UpdateQuestionRequest(
                question_id=str(question.id), user_id=str(admin.id), title="Retitled"
            )
        )

        assert view.title == "Retitled"
        assert view.author.username == "asker"
