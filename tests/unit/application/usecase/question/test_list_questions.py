"""Unit tests for the question listing and viewing use cases."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from asklet.application.usecase.question import (
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsUseCase,
)
from asklet.domain.error import NotFoundError, ValidationError
from asklet.domain.model import Votes
from asklet.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    QuestionSortOrder,
    UserRepository,
)
from asklet.domain.value import UserId, VoteDirection
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListQuestions:
    """Tests for the list questions use case."""

    @pytest.mark.asyncio
    async def test_newest_first_with_pagination(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListQuestionsUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        asker = await user_repo.save(make_user("asker"))
        now = datetime.now()
        for i in range(3):
            await question_repo.save(
                make_question(
                    asker.id, title=f"Question {i}", created_at=now - timedelta(hours=i)
                )
            )

        # Act
        response = await use_case.execute(ListQuestionsRequest(page=1, limit=2))

        # Assert
        assert [q.title for q in response.questions] == ["Question 0", "Question 1"]
        assert response.pagination.total == 3
        assert response.pagination.pages == 2
        assert response.pagination.has_next is True
        assert response.pagination.has_prev is False
        assert response.questions[0].author.username == "asker"

    @pytest.mark.asyncio
    async def test_sort_by_votes_uses_score(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        asker = await user_repo.save(make_user("asker"))
        fans = frozenset(UserId(uuid4()) for _ in range(2))
        await question_repo.save(make_question(asker.id, title="Quiet"))
        await question_repo.save(
            make_question(asker.id, title="Popular", votes=Votes(upvotes=fans))
        )
        await question_repo.save(
            make_question(asker.id, title="Disliked", votes=Votes(downvotes=fans))
        )

        response = await use_case.execute(
            ListQuestionsRequest(sort=QuestionSortOrder.VOTES)
        )

        assert [q.title for q in response.questions] == ["Popular", "Quiet", "Disliked"]
        assert response.questions[0].vote_score == 2

    @pytest.mark.asyncio
    async def test_filters_by_tag_and_search(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        asker = await user_repo.save(make_user("asker"))
        await question_repo.save(
            make_question(asker.id, title="Event loops in asyncio", tags=["python"])
        )
        await question_repo.save(
            make_question(asker.id, title="Borrow checker woes", tags=["rust"])
        )

        by_tag = await use_case.execute(ListQuestionsRequest(tag="Rust"))
        by_search = await use_case.execute(ListQuestionsRequest(search="  EVENT "))

        assert [q.title for q in by_tag.questions] == ["Borrow checker woes"]
        assert [q.title for q in by_search.questions] == ["Event loops in asyncio"]

    @pytest.mark.asyncio
    async def test_filters_by_author(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        alice = await user_repo.save(make_user("alice"))
        bob = await user_repo.save(make_user("bob"))
        await question_repo.save(make_question(alice.id, title="From alice"))
        await question_repo.save(make_question(bob.id, title="From bob"))

        response = await use_case.execute(ListQuestionsRequest(author="bob"))

        assert [q.title for q in response.questions] == ["From bob"]

    @pytest.mark.asyncio
    async def test_unknown_author_gives_empty_page(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        asker = await user_repo.save(make_user("asker"))
        await question_repo.save(make_question(asker.id))

        response = await use_case.execute(ListQuestionsRequest(author="ghost"))

        assert response.questions == []
        assert response.pagination.total == 0
        assert response.pagination.has_next is False

    @pytest.mark.asyncio
    async def test_counts_answers(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker = await user_repo.save(make_user("asker"))
        helper = await user_repo.save(make_user("helper"))
        question = await question_repo.save(make_question(asker.id))
        await answer_repo.save(make_answer(question.id, helper.id))
        await answer_repo.save(make_answer(question.id, helper.id))

        response = await use_case.execute(ListQuestionsRequest())

        assert response.questions[0].answer_count == 2

    @pytest.mark.asyncio
    async def test_malformed_tag_rejected(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(ListQuestionsRequest(tag="two words"))


class TestGetQuestion:
    """Tests for the get question use case."""

    @pytest.mark.asyncio
    async def test_counts_a_view_and_orders_answers(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetQuestionUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker = await user_repo.save(make_user("asker"))
        helper = await user_repo.save(make_user("helper"))
        question = await question_repo.save(make_question(asker.id))
        await answer_repo.save(
            make_answer(question.id, helper.id, "First", age=timedelta(hours=2))
        )
        await answer_repo.save(
            make_answer(question.id, helper.id, "Accepted", is_accepted=True)
        )
        await answer_repo.save(
            make_answer(question.id, helper.id, "Second", age=timedelta(hours=1))
        )

        # Act
        response = await use_case.execute(
            GetQuestionRequest(question_id=str(question.id))
        )

        # Assert
        assert response.question.views == 1
        assert (await question_repo.find_by_id(question.id)).views == 1
        assert [a.content for a in response.answers] == ["Accepted", "First", "Second"]
        assert response.question.answer_count == 3

    @pytest.mark.asyncio
    async def test_reports_viewer_vote(self, unit_env):
        use_case = await unit_env.get(GetQuestionUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        asker = await user_repo.save(make_user("asker"))
        viewer = await user_repo.save(make_user("viewer"))
        question = await question_repo.save(
            make_question(asker.id, votes=Votes(downvotes=frozenset({viewer.id})))
        )

        response = await use_case.execute(
            GetQuestionRequest(question_id=str(question.id), viewer_id=str(viewer.id))
        )

        assert response.question.user_vote == VoteDirection.DOWN

    @pytest.mark.asyncio
    async def test_missing_question_not_found(self, unit_env):
        use_case = await unit_env.get(GetQuestionUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetQuestionRequest(question_id=str(uuid4())))
