"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed or missing input.

    `details` maps offending field names to messages.
    """

    def __init__(self, message: str, details: dict[str, str] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(ValidationError):
    """A required deployment setting is missing or blank."""

    def __init__(self, setting: str):
        self.setting = setting
        super().__init__(f"{setting} must be configured")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a uniqueness constraint is violated."""

    def __init__(self, resource: str, field: str):
        self.resource = resource
        self.field = field
        super().__init__(f"{resource} with this {field} already exists")


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class InviteNotValidError(BusinessRuleViolationError):
    """Raised when an invite is used, revoked or expired."""

    def __init__(self, invite_id: str, reason: str):
        self.invite_id = invite_id
        self.reason = reason
        super().__init__(f"Invite {invite_id} is not valid: {reason}")


class InviteStateError(BusinessRuleViolationError):
    """Raised when a terminal invite marker would be set twice."""

    pass


class InternalError(DomainError):
    """Unexpected failure in the runtime environment. Not retryable."""

    pass
