"""
Operation Results

Service operations return one of a small closed set of variants instead of
raising domain exceptions:
- Ok: the operation succeeded and carries its value
- NotFound: a referenced room or booking does not exist
- InvalidRequest: the caller must correct the input
- TransientFailure: the store gave up (lock timeout, deadlock); safe to retry

Usage:
    result = service.create_booking(room_id, request)
    if isinstance(result, Ok):
        code = result.value
    elif result.retryable:
        ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar('T')


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome"""
    value: T

    ok = True
    retryable = False


@dataclass(frozen=True)
class NotFound:
    """Referenced room or booking is missing"""
    message: str

    ok = False
    retryable = False


@dataclass(frozen=True)
class InvalidRequest:
    """Bad date order or requested dates already taken"""
    message: str

    ok = False
    retryable = False


@dataclass(frozen=True)
class TransientFailure:
    """Store-level lock timeout, deadlock or write conflict"""
    message: str

    ok = False
    retryable = True


Failure = Union[NotFound, InvalidRequest, TransientFailure]
