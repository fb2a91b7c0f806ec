"""
Discriminated outcome of a core operation.

    result = await use_case.create_order(...)
    match result:
        case Success(value=order): ...
        case Failure(error=CapacityError() as err): ...

Expected business failures travel as `Failure`; only programming errors escape
as exceptions.
"""

from functools import wraps
from typing import Any, Awaitable, Callable, Generic, ParamSpec, TypeVar, Union

import attrs

from src.platform.exception.exceptions import CustomBaseError


_T = TypeVar('_T')
_P = ParamSpec('_P')


@attrs.frozen
class Success(Generic[_T]):
    value: _T

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> _T:
        return self.value


@attrs.frozen
class Failure:
    error: CustomBaseError

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise self.error


Result = Union[Success[_T], Failure]


def as_result(
    func: Callable[_P, Awaitable[_T]],
) -> Callable[_P, Awaitable[Union[Success[_T], Failure]]]:
    """Wrap an async use-case method so CustomBaseError becomes Failure."""

    @wraps(func)
    async def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> Union[Success[_T], Failure]:
        try:
            return Success(await func(*args, **kwargs))
        except CustomBaseError as e:
            return Failure(e)

    return wrapper
