"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any, TypeVar

from pydantic import ValidationError as PydanticValidationError

from echofinder.domain.error import ValidationError
from echofinder.domain.value.common import RootValueObject

V = TypeVar("V", bound=RootValueObject)


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_value(value_type: type[V], value: Any, field: str) -> V:
    """Build a value object from raw request input.

    Raises:
        ValidationError: With `field` in details if the value is rejected
    """
    try:
        return value_type(value)
    except PydanticValidationError as e:
        message = e.errors()[0]["msg"] if e.errors() else str(e)
        raise ValidationError(f"Invalid {field}", details={field: message}) from e
