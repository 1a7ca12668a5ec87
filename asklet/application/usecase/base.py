"""Base use case and shared request/response model base."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from asklet.domain.error import NotFoundError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class CamelModel(BaseModel):
    """Model serialized with camelCase keys on the wire.

    Fields are declared in snake_case and accepted under either name.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(CamelModel):
    """Plain confirmation message."""

    message: str


def parse_resource_id(raw: str, resource: str) -> UUID:
    """Parse an ID taken from a URL path.

    A malformed ID cannot name any stored resource.

    Raises:
        NotFoundError: If ``raw`` is not a UUID
    """
    try:
        return UUID(raw)
    except ValueError:
        raise NotFoundError(resource, raw)
