"""User aggregate root.

Users register with a username and email and accumulate reputation through
votes on their content and accepted answers.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from asklet.domain.model.common import DomainModel
from asklet.domain.value import UserId, UserRole, Username


class User(DomainModel):
    """User aggregate root.

    Reputation is a signed counter with no floor. It changes only through
    atomic adjustments from voting and answer acceptance.
    """

    id: UserId
    username: Username
    email: str
    password_hash: str = Field(repr=False)
    role: UserRole = UserRole.USER
    avatar_url: Optional[str] = None
    reputation: int = 0
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
