"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class SelfVoteForbiddenError(ValidationError):
    """Raised when a user votes on content they authored."""

    def __init__(self, item_type: str):
        self.item_type = item_type
        super().__init__(f"Cannot vote on your own {item_type}")


class InvalidVoteDirectionError(ValidationError):
    """Raised when a vote direction is neither up nor down."""

    def __init__(self, direction: object):
        self.direction = direction
        super().__init__("voteType must be up or down")


class InvalidVotableTypeError(ValidationError):
    """Raised when a vote targets something other than a question or answer."""

    def __init__(self, item_type: object):
        self.item_type = item_type
        super().__init__("itemType must be question or answer")


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class AuthenticationError(DomainError):
    """Raised when credentials do not match a user."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user acts on a resource they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str, action: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConcurrentUpdateError(DomainError):
    """Raised when a conditional write keeps losing to concurrent writers."""

    def __init__(self, resource: str, resource_id: str, attempts: int):
        self.resource = resource
        self.resource_id = resource_id
        self.attempts = attempts
        super().__init__(
            f"{resource} {resource_id} was modified concurrently "
            f"({attempts} attempts)"
        )
