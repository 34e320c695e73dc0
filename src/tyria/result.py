"""
Tagged outcome of an endpoint call.

Every endpoint method returns ``Ok(value)`` or ``Err(error)``:

    ```python
    result = await client.achievements.get(42)
    if result.is_ok():
        print(result.value.name)
    else:
        print(result.error.message)
    ```

``unwrap()`` returns the value or raises the carried error, for callers that
prefer exceptions.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from tyria.exceptions import ApiError, UnknownStatusError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful call carrying the deserialized body."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed call carrying a documented API error or an undeclared status."""

    error: Union[ApiError, UnknownStatusError]

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default


Result = Union[Ok[T], Err]
