"""Small functional helpers shared by the date arithmetic modules."""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Mapping, Sequence, TypeVar

T = TypeVar("T")

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _required(signature: inspect.Signature) -> tuple[str, ...]:
    """Return the names of the required positional parameters, in order."""

    return tuple(
        param.name
        for param in signature.parameters.values()
        if param.kind in _POSITIONAL and param.default is inspect.Parameter.empty
    )


def curry(func: Callable[..., T]) -> Callable[..., Any]:
    """Allow ``func`` to be called with fewer arguments than it needs.

    Supplying every required argument calls ``func`` straight away. Supplying
    fewer returns a callable bound to the arguments seen so far, so
    ``shift_date(1)(day)`` and ``shift_date(days=1)(day)`` are the same as
    ``shift_date(1, day)``. Later positional arguments fill whichever required
    parameters are still missing, in declaration order.
    """

    signature = inspect.signature(func)
    required = _required(signature)
    if not required:
        return func
    return _bind(func, signature, required, {})


def _bind(
    func: Callable[..., T],
    signature: inspect.Signature,
    required: tuple[str, ...],
    collected: Mapping[str, Any],
) -> Callable[..., Any]:
    accepts_any = any(
        param.kind is inspect.Parameter.VAR_KEYWORD for param in signature.parameters.values()
    )

    @functools.wraps(func)
    def curried(*args: Any, **kwargs: Any) -> Any:
        values = dict(collected)
        pending = [name for name in required if name not in values]
        values.update(zip(pending, args))
        extra = args[len(pending):]
        for name, value in kwargs.items():
            if name not in signature.parameters and not accepts_any:
                raise TypeError(f"{func.__name__}() got an unexpected keyword argument {name!r}")
            if name in values:
                raise TypeError(f"{func.__name__}() got multiple values for argument {name!r}")
            values[name] = value
        if any(name not in values for name in required):
            return _bind(func, signature, required, values)
        positional = [values.pop(name) for name in required]
        return func(*positional, *extra, **values)

    return curried


def last(items: Sequence[T]) -> T | None:
    """Return the final element of ``items`` or ``None`` when it is empty."""

    return items[-1] if items else None


__all__ = ["curry", "last"]
