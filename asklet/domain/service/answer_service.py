"""Answer domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from asklet.domain.error import NotFoundError, ValidationError
from asklet.domain.model import Answer, Question, User
from asklet.domain.repository import AnswerRepository
from asklet.domain.value import AnswerId, NotificationType, QuestionId, UserId

from .base import Service
from .notification_service import NotificationService


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            notification_service: Notification domain service
        """
        self.answer_repository = answer_repository
        self.notification_service = notification_service

    async def create_answer(self, question: Question, author: User, content: str) -> Answer:
        """Post an answer and notify the question's author.

        No notification is sent when users answer their own question.

        Args:
            question: Question being answered
            author: Answering user
            content: Answer body

        Returns:
            The stored answer

        Raises:
            ValidationError: If content is empty
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question.id),
            author_id=str(author.id),
        ):
            if not content or not content.strip():
                raise ValidationError("Content is required")

            now = datetime.now()
            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question.id,
                author_id=author.id,
                content=content,
                created_at=now,
                updated_at=now,
            )
            saved = await self.answer_repository.save(answer)
            logfire.info("Answer created", answer_id=str(saved.id))

            if question.author_id != author.id:
                await self.notification_service.create_notification(
                    recipient_id=question.author_id,
                    sender_id=author.id,
                    type=NotificationType.ANSWER,
                    message=f'{author.username} answered your question: "{question.title}"',
                    related_question_id=question.id,
                    related_answer_id=saved.id,
                )
            return saved

    async def get_answer(self, answer_id: AnswerId) -> Answer:
        """Get an answer by ID.

        Raises:
            NotFoundError: If the answer does not exist
        """
        with logfire.span("answer_service.get_answer", answer_id=str(answer_id)):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                logfire.warn("Answer not found", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))
            return answer

    async def list_for_question(self, question_id: QuestionId) -> list[Answer]:
        """Answers to a question, accepted first and then oldest first."""
        return await self.answer_repository.find_by_question(question_id)

    async def list_by_author(self, author_id: UserId, limit: int = 5) -> list[Answer]:
        """Most recent answers by an author."""
        return await self.answer_repository.find_by_author(author_id, limit=limit)

    async def count_for_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        """Answer counts keyed by question ID."""
        if not question_ids:
            return {}
        return await self.answer_repository.count_by_questions(question_ids)

    async def update_answer(self, answer: Answer, editor: User, content: str) -> Answer:
        """Replace an answer's content.

        Raises:
            NotAuthorizedError: If the editor is neither the author nor an admin
            ValidationError: If content is empty
        """
        with logfire.span(
            "answer_service.update_answer",
            answer_id=str(answer.id),
            editor_id=str(editor.id),
        ):
            self.require_author_or_admin(
                answer.author_id, editor, "Answer", str(answer.id), "edit"
            )
            if not content or not content.strip():
                raise ValidationError("Content is required")
            saved = await self.answer_repository.save(
                answer.model_copy(
                    update={"content": content, "updated_at": datetime.now()}
                )
            )
            logfire.info("Answer updated", answer_id=str(saved.id))
            return saved

    def authorize_delete(self, answer: Answer, requester: User) -> None:
        """Check delete rights before acceptance is withdrawn.

        Raises:
            NotAuthorizedError: If the requester is neither the author nor an admin
        """
        self.require_author_or_admin(
            answer.author_id, requester, "Answer", str(answer.id), "delete"
        )

    async def delete_answer(self, answer: Answer, requester: User) -> None:
        """Delete an answer.

        Raises:
            NotAuthorizedError: If the requester is neither the author nor an admin
        """
        with logfire.span(
            "answer_service.delete_answer",
            answer_id=str(answer.id),
            requester_id=str(requester.id),
        ):
            self.authorize_delete(answer, requester)
            await self.answer_repository.delete(answer.id)
            logfire.info("Answer deleted", answer_id=str(answer.id))

    async def delete_for_question(self, question_id: QuestionId) -> int:
        """Delete every answer to a question, returning how many went."""
        with logfire.span(
            "answer_service.delete_for_question", question_id=str(question_id)
        ):
            deleted = await self.answer_repository.delete_by_question(question_id)
            logfire.info("Answers deleted", question_id=str(question_id), count=deleted)
            return deleted
