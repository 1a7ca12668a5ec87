"""Answer acceptance domain service."""

from dataclasses import dataclass
from datetime import datetime

import logfire

from asklet.domain.error import NotAuthorizedError, NotFoundError
from asklet.domain.model import Answer, Question
from asklet.domain.repository import AnswerRepository, QuestionRepository
from asklet.domain.value import NotificationType, UserId

from .base import Service
from .notification_service import NotificationService
from .user_service import UserService
from .vote_engine import ACCEPT_REPUTATION


@dataclass
class AcceptanceResult:
    """State of a question and answer after an accept toggle."""

    question: Question
    answer: Answer
    is_accepted: bool


class AcceptanceService(Service):
    """Domain service deciding which answer, if any, a question has accepted.

    A question is either without an accepted answer or points at exactly
    one. Only the question's author moves it between those states. The
    answer author gains 15 reputation on acceptance and loses it again on
    unacceptance, including when acceptance moves to another answer or the
    accepted answer is deleted.
    """

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        user_service: UserService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize acceptance service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            user_service: User domain service
            notification_service: Notification domain service
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.user_service = user_service
        self.notification_service = notification_service

    async def _unaccept(self, answer: Answer, now: datetime) -> Answer:
        """Clear an answer's accepted flag and take back its bonus."""
        answer = await self.answer_repository.save(
            answer.model_copy(update={"is_accepted": False, "updated_at": now})
        )
        await self.user_service.adjust_reputation(answer.author_id, -ACCEPT_REPUTATION)
        return answer

    async def toggle_accept(
        self, question: Question, answer: Answer, requester_id: UserId
    ) -> AcceptanceResult:
        """Accept an answer, or unaccept it if it is already accepted.

        The stored question and answer are re-read, so the toggle direction
        never depends on a stale copy held by the caller.

        Args:
            question: Question the answer belongs to
            answer: Answer to toggle
            requester_id: User asking for the change

        Returns:
            Updated question and answer

        Raises:
            NotAuthorizedError: If the requester did not ask the question
            NotFoundError: If the answer is not an answer to the question
        """
        with logfire.span(
            "acceptance_service.toggle_accept",
            question_id=str(question.id),
            answer_id=str(answer.id),
            requester_id=str(requester_id),
        ):
            question = await self.question_repository.find_by_id(question.id) or question
            if question.author_id != requester_id:
                logfire.warn(
                    "Accept attempted by non-author",
                    question_id=str(question.id),
                    requester_id=str(requester_id),
                )
                raise NotAuthorizedError(
                    "Question", str(question.id), str(requester_id), "accept answers on"
                )

            stored = await self.answer_repository.find_by_id(answer.id)
            if stored is None or stored.question_id != question.id:
                logfire.warn(
                    "Answer does not belong to question",
                    question_id=str(question.id),
                    answer_id=str(answer.id),
                )
                raise NotFoundError("Answer", str(answer.id))
            answer = stored

            now = datetime.now()

            if answer.is_accepted:
                answer = await self._unaccept(answer, now)
                question = await self.question_repository.save(
                    question.model_copy(
                        update={"accepted_answer_id": None, "updated_at": now}
                    )
                )
                logfire.info("Answer unaccepted", answer_id=str(answer.id))
                return AcceptanceResult(question=question, answer=answer, is_accepted=False)

            # Clear any other accepted answer, even if the question pointer
            # disagrees with the answer flags.
            for other in await self.answer_repository.find_accepted_by_question(
                question.id
            ):
                if other.id == answer.id:
                    continue
                await self._unaccept(other, now)
                logfire.info(
                    "Previously accepted answer unaccepted", answer_id=str(other.id)
                )

            answer = answer.model_copy(update={"is_accepted": True, "updated_at": now})
            question = question.model_copy(
                update={"accepted_answer_id": answer.id, "updated_at": now}
            )
            answer = await self.answer_repository.save(answer)
            question = await self.question_repository.save(question)
            await self.user_service.adjust_reputation(answer.author_id, ACCEPT_REPUTATION)
            logfire.info("Answer accepted", answer_id=str(answer.id))

            if answer.author_id != question.author_id:
                await self.notification_service.create_notification(
                    recipient_id=answer.author_id,
                    sender_id=requester_id,
                    type=NotificationType.ACCEPT,
                    message=f'Your answer was accepted for: "{question.title}"',
                    related_question_id=question.id,
                    related_answer_id=answer.id,
                )

            return AcceptanceResult(question=question, answer=answer, is_accepted=True)

    async def withdraw(self, question: Question, answer: Answer | None = None) -> Question:
        """Withdraw acceptance ahead of deleting content.

        With an answer, only that answer loses acceptance; without one,
        every accepted answer of the question does. Each affected author
        loses the acceptance bonus and the question pointer is cleared when
        it named a withdrawn answer. No notification is sent.

        Returns:
            The question as stored afterwards
        """
        with logfire.span(
            "acceptance_service.withdraw",
            question_id=str(question.id),
            answer_id=str(answer.id) if answer else None,
        ):
            now = datetime.now()
            accepted = await self.answer_repository.find_accepted_by_question(question.id)
            withdrawn = [a for a in accepted if answer is None or a.id == answer.id]
            for item in withdrawn:
                await self._unaccept(item, now)
                logfire.info("Acceptance withdrawn", answer_id=str(item.id))

            question = await self.question_repository.find_by_id(question.id) or question
            pointer = question.accepted_answer_id
            if pointer is not None and (answer is None or pointer == answer.id):
                question = await self.question_repository.save(
                    question.model_copy(
                        update={"accepted_answer_id": None, "updated_at": now}
                    )
                )
            return question
