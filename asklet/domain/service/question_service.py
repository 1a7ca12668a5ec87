"""Question domain service."""

from datetime import datetime
from typing import Optional, Sequence
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from asklet.domain.error import NotFoundError, ValidationError
from asklet.domain.model import Question, User
from asklet.domain.repository import QuestionRepository, QuestionSortOrder
from asklet.domain.value import QuestionId, TagName, UserId

from .base import Service
from .tag_service import TagService

MAX_TAGS = 5
MAX_TITLE_LENGTH = 400


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self, question_repository: QuestionRepository, tag_service: TagService
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            tag_service: Tag domain service
        """
        self.question_repository = question_repository
        self.tag_service = tag_service

    @staticmethod
    def normalize_tags(raw_tags: Sequence[str]) -> list[TagName]:
        """Parse, lowercase and de-duplicate tag names, keeping first-seen order.

        Raises:
            ValidationError: If a tag is malformed or there are too many
        """
        tags: list[TagName] = []
        for raw in raw_tags:
            if not raw or not raw.strip():
                continue
            try:
                tag = TagName(raw)
            except PydanticValidationError:
                raise ValidationError(f"Invalid tag: {raw!r}")
            if tag not in tags:
                tags.append(tag)
        if len(tags) > MAX_TAGS:
            raise ValidationError(f"A question can have at most {MAX_TAGS} tags")
        return tags

    async def create_question(
        self,
        author_id: UserId,
        title: str,
        description: str,
        tags: Sequence[str],
    ) -> Question:
        """Create a question and record usage of its tags.

        Raises:
            ValidationError: If title, description or tags are invalid
        """
        with logfire.span("question_service.create_question", author_id=str(author_id)):
            if not title or not title.strip() or not description or not description.strip():
                raise ValidationError("Title and description are required")
            tag_names = self.normalize_tags(tags)

            now = datetime.now()
            try:
                question = Question(
                    id=QuestionId(uuid4()),
                    title=title,
                    description=description,
                    tags=tag_names,
                    author_id=author_id,
                    created_at=now,
                    updated_at=now,
                )
            except PydanticValidationError:
                raise ValidationError(
                    f"Title must be at most {MAX_TITLE_LENGTH} characters"
                )
            saved = await self.question_repository.save(question)
            await self.tag_service.record_usage(tag_names)
            logfire.info("Question created", question_id=str(saved.id))
            return saved

    async def update_question(
        self,
        question: Question,
        editor: User,
        title: Optional[str] = None,
        description: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
    ) -> Question:
        """Edit a question's text or tags.

        Fields left as None keep their current value. Tags, when given,
        replace the current list; newly added tags are counted.

        Raises:
            NotAuthorizedError: If the editor is neither the author nor an admin
            ValidationError: If a given field is blank or invalid
        """
        with logfire.span(
            "question_service.update_question",
            question_id=str(question.id),
            editor_id=str(editor.id),
        ):
            self.require_author_or_admin(
                question.author_id, editor, "Question", str(question.id), "edit"
            )
            update: dict = {"updated_at": datetime.now()}
            if title is not None:
                title = title.strip()
                if not title:
                    raise ValidationError("Title cannot be empty")
                if len(title) > MAX_TITLE_LENGTH:
                    raise ValidationError(
                        f"Title must be at most {MAX_TITLE_LENGTH} characters"
                    )
                update["title"] = title
            if description is not None:
                if not description.strip():
                    raise ValidationError("Description cannot be empty")
                update["description"] = description
            added: list[TagName] = []
            if tags is not None:
                tag_names = self.normalize_tags(tags)
                added = [t for t in tag_names if t not in question.tags]
                update["tags"] = tag_names

            saved = await self.question_repository.save(
                question.model_copy(update=update)
            )
            await self.tag_service.record_usage(added)
            logfire.info("Question updated", question_id=str(saved.id))
            return saved

    async def delete_question(self, question: Question, requester: User) -> None:
        """Delete a question record.

        Answers and acceptance are cleared by the caller beforehand; see
        ``authorize_delete``.

        Raises:
            NotAuthorizedError: If the requester is neither the author nor an admin
        """
        with logfire.span(
            "question_service.delete_question",
            question_id=str(question.id),
            requester_id=str(requester.id),
        ):
            self.authorize_delete(question, requester)
            await self.question_repository.delete(question.id)
            logfire.info("Question deleted", question_id=str(question.id))

    def authorize_delete(self, question: Question, requester: User) -> None:
        """Check delete rights before any dependent records are touched.

        Raises:
            NotAuthorizedError: If the requester is neither the author nor an admin
        """
        self.require_author_or_admin(
            question.author_id, requester, "Question", str(question.id), "delete"
        )

    async def get_question(self, question_id: QuestionId) -> Question:
        """Get a question by ID.

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span("question_service.get_question", question_id=str(question_id)):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def record_view(self, question_id: QuestionId) -> None:
        """Count one view of a question."""
        await self.question_repository.increment_views(question_id)

    async def save_question(self, question: Question) -> Question:
        """Save question changes other than votes."""
        with logfire.span("question_service.save_question", question_id=str(question.id)):
            return await self.question_repository.save(question)

    async def list_questions(
        self,
        page: int = 1,
        limit: int = 10,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        search: Optional[str] = None,
        tag: Optional[TagName] = None,
        author_id: Optional[UserId] = None,
    ) -> tuple[list[Question], int]:
        """List questions matching the filters.

        Returns:
            The requested page and the total number of matching questions
        """
        with logfire.span(
            "question_service.list_questions",
            page=page,
            limit=limit,
            sort=sort.value,
            search=search,
            tag=tag.root if tag else None,
        ):
            questions = await self.question_repository.find_all(
                sort=sort,
                search=search,
                tag=tag,
                author_id=author_id,
                limit=limit,
                offset=(page - 1) * limit,
            )
            total = await self.question_repository.count(
                search=search, tag=tag, author_id=author_id
            )
            logfire.info("Questions listed", count=len(questions), total=total)
            return questions, total
