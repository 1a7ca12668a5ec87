"""Unit tests for AcceptanceService."""

from uuid import uuid4

import pytest

from asklet.domain.error import NotAuthorizedError, NotFoundError
from asklet.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
)
from asklet.domain.service import AcceptanceService
from asklet.domain.value import NotificationType, QuestionId, UserId
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _setup(unit_env, answerers: int = 1):
    user_repo = await unit_env.get(UserRepository)
    question_repo = await unit_env.get(QuestionRepository)
    answer_repo = await unit_env.get(AnswerRepository)

    asker = await user_repo.save(make_user("asker"))
    question = await question_repo.save(make_question(asker.id))
    authors, answers = [], []
    for i in range(answerers):
        author = await user_repo.save(make_user(f"answerer{i}"))
        authors.append(author)
        answers.append(await answer_repo.save(make_answer(question.id, author.id)))
    return asker, question, authors, answers


class TestToggleAccept:
    """Tests for toggle_accept."""

    @pytest.mark.asyncio
    async def test_accept_marks_answer_and_question(self, unit_env):
        """Accepting should flag the answer, point the question at it and pay 15."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker, question, (author,), (answer,) = await _setup(unit_env)

        # Act
        result = await service.toggle_accept(question, answer, asker.id)

        # Assert
        assert result.is_accepted is True
        assert (await answer_repo.find_by_id(answer.id)).is_accepted is True
        stored_question = await question_repo.find_by_id(question.id)
        assert stored_question.accepted_answer_id == answer.id
        assert (await user_repo.find_by_id(author.id)).reputation == 15

    @pytest.mark.asyncio
    async def test_accept_then_unaccept_restores_state(self, unit_env):
        """Toggling twice should leave nothing accepted and reputation unchanged."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker, question, (author,), (answer,) = await _setup(unit_env)

        # Act
        accepted = await service.toggle_accept(question, answer, asker.id)
        result = await service.toggle_accept(
            accepted.question, accepted.answer, asker.id
        )

        # Assert
        assert result.is_accepted is False
        assert (await answer_repo.find_by_id(answer.id)).is_accepted is False
        assert (await question_repo.find_by_id(question.id)).accepted_answer_id is None
        assert (await user_repo.find_by_id(author.id)).reputation == 0

    @pytest.mark.asyncio
    async def test_accepting_another_answer_moves_acceptance(self, unit_env):
        """Accepting B after A should unaccept A and move its 15 points to B."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker, question, (author_a, author_b), (answer_a, answer_b) = await _setup(
            unit_env, answerers=2
        )

        # Act
        first = await service.toggle_accept(question, answer_a, asker.id)
        await service.toggle_accept(first.question, answer_b, asker.id)

        # Assert - exactly one accepted answer
        accepted = await answer_repo.find_accepted_by_question(question.id)
        assert [a.id for a in accepted] == [answer_b.id]
        assert (await question_repo.find_by_id(question.id)).accepted_answer_id == answer_b.id
        assert (await user_repo.find_by_id(author_a.id)).reputation == 0
        assert (await user_repo.find_by_id(author_b.id)).reputation == 15

    @pytest.mark.asyncio
    async def test_non_author_cannot_accept(self, unit_env):
        """Only the question author may accept."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        answer_repo = await unit_env.get(AnswerRepository)
        _, question, (author,), (answer,) = await _setup(unit_env)

        # Act & Assert - not even the answer's author
        with pytest.raises(NotAuthorizedError):
            await service.toggle_accept(question, answer, author.id)
        with pytest.raises(NotAuthorizedError):
            await service.toggle_accept(question, answer, UserId(uuid4()))

        assert (await answer_repo.find_by_id(answer.id)).is_accepted is False

    @pytest.mark.asyncio
    async def test_answer_from_other_question_not_found(self, unit_env):
        """An answer that belongs elsewhere is treated as missing."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        asker, question, (author,), _ = await _setup(unit_env)
        stray = make_answer(QuestionId(uuid4()), author.id)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.toggle_accept(question, stray, asker.id)

    @pytest.mark.asyncio
    async def test_accept_notifies_answer_author(self, unit_env):
        """The answer author should receive an accept notification."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        notification_repo = await unit_env.get(NotificationRepository)
        asker, question, (author,), (answer,) = await _setup(unit_env)

        # Act
        await service.toggle_accept(question, answer, asker.id)

        # Assert
        notifications = await notification_repo.find_by_recipient(author.id)
        assert len(notifications) == 1
        assert notifications[0].type == NotificationType.ACCEPT
        assert notifications[0].sender_id == asker.id
        assert notifications[0].related_answer_id == answer.id
        assert question.title in notifications[0].message

    @pytest.mark.asyncio
    async def test_accepting_own_answer_sends_no_notification(self, unit_env):
        """Self-accepts still pay reputation but notify nobody."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        user_repo = await unit_env.get(UserRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        asker, question, _, _ = await _setup(unit_env, answerers=0)
        own = await answer_repo.save(make_answer(question.id, asker.id))

        # Act
        result = await service.toggle_accept(question, own, asker.id)

        # Assert
        assert result.is_accepted is True
        assert await notification_repo.count_by_recipient(asker.id) == 0
        assert (await user_repo.find_by_id(asker.id)).reputation == 15

    @pytest.mark.asyncio
    async def test_accept_repairs_several_accepted_answers(self, unit_env):
        """Accepting clears every stale accepted flag, not just the pointer's."""
        # Arrange - two answers flagged accepted, pointer on the first
        service = await unit_env.get(AcceptanceService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker, question, authors, answers = await _setup(unit_env, answerers=3)
        for answer in answers[:2]:
            await answer_repo.save(answer.model_copy(update={"is_accepted": True}))
        for author in authors[:2]:
            await user_repo.adjust_reputation(author.id, 15)
        question = await question_repo.save(
            question.model_copy(update={"accepted_answer_id": answers[0].id})
        )

        # Act
        result = await service.toggle_accept(question, answers[2], asker.id)

        # Assert
        assert result.is_accepted is True
        accepted = await answer_repo.find_accepted_by_question(question.id)
        assert [a.id for a in accepted] == [answers[2].id]
        stored_question = await question_repo.find_by_id(question.id)
        assert stored_question.accepted_answer_id == answers[2].id
        reputations = [
            (await user_repo.find_by_id(author.id)).reputation for author in authors
        ]
        assert reputations == [0, 0, 15]

    @pytest.mark.asyncio
    async def test_stale_answer_copy_does_not_pay_twice(self, unit_env):
        """The toggle direction follows stored state, not the caller's copy."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        user_repo = await unit_env.get(UserRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker, question, (author,), (answer,) = await _setup(unit_env)
        await service.toggle_accept(question, answer, asker.id)

        # Act - the original, unaccepted copy is passed again
        result = await service.toggle_accept(question, answer, asker.id)

        # Assert - treated as an unaccept
        assert result.is_accepted is False
        assert (await answer_repo.find_by_id(answer.id)).is_accepted is False
        assert (await user_repo.find_by_id(author.id)).reputation == 0


class TestWithdraw:
    """Tests for withdrawing acceptance ahead of deletions."""

    @pytest.mark.asyncio
    async def test_withdraw_accepted_answer(self, unit_env):
        """The pointer is cleared and the bonus taken back, with no notification."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        asker, question, (author,), (answer,) = await _setup(unit_env)
        accepted = await service.toggle_accept(question, answer, asker.id)

        # Act
        result = await service.withdraw(accepted.question, answer)

        # Assert
        assert result.accepted_answer_id is None
        assert (await question_repo.find_by_id(question.id)).accepted_answer_id is None
        assert (await user_repo.find_by_id(author.id)).reputation == 0
        assert await notification_repo.count_by_recipient(author.id) == 1

    @pytest.mark.asyncio
    async def test_withdraw_other_answer_keeps_acceptance(self, unit_env):
        # Arrange
        service = await unit_env.get(AcceptanceService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        asker, question, (author_a, _), (answer_a, answer_b) = await _setup(
            unit_env, answerers=2
        )
        await service.toggle_accept(question, answer_a, asker.id)

        # Act
        await service.withdraw(question, answer_b)

        # Assert
        assert (await question_repo.find_by_id(question.id)).accepted_answer_id == answer_a.id
        assert (await user_repo.find_by_id(author_a.id)).reputation == 15

    @pytest.mark.asyncio
    async def test_withdraw_whole_question(self, unit_env):
        # Arrange
        service = await unit_env.get(AcceptanceService)
        user_repo = await unit_env.get(UserRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker, question, (author,), (answer,) = await _setup(unit_env)
        await service.toggle_accept(question, answer, asker.id)

        # Act
        result = await service.withdraw(question)

        # Assert
        assert result.accepted_answer_id is None
        assert await answer_repo.find_accepted_by_question(question.id) == []
        assert (await user_repo.find_by_id(author.id)).reputation == 0
