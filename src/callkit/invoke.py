from typing import Any, Callable, Mapping, Optional, Tuple

from .functions import noop
from .guard import Kind, either
from .immutable import Immutable
from .protocols import ArrayLike
from .sequence import slice


def call(f: Any, *args: Any, **kwargs: Any) -> Any:
    """
    Call `f` with `args` and `kwargs`. If `f` is not callable,
    nothing happens and `None` is returned

    Example:
        >>> call(lambda a, b: a + b, 1, 5)
        6
        >>> call(None, 1, 5) is None
        True

    Args:
        f: the function to call
        args: positional arguments to call `f` with
        kwargs: keyword arguments to call `f` with

    Return:
        result of calling `f`
    """
    callable_f = either(noop, f, Kind.CALLABLE)
    return callable_f(*args, **kwargs)


def apply(f: Any,
          args: ArrayLike = (),
          kwargs: Optional[Mapping[str, Any]] = None) -> Any:
    """
    Call `f` with the elements of `args` as positional arguments.
    If `f` is not callable, nothing happens and `None` is returned.
    `args` that is not list-like is treated as no arguments, as is
    `kwargs` that is not a mapping.

    Example:
        >>> apply(lambda a, b: a + b, [1, 5])
        6
        >>> apply(lambda a, b=0: a + b, (1,), {'b': 5})
        6

    Args:
        f: the function to call
        args: list-like of positional arguments
        kwargs: mapping of keyword arguments

    Return:
        result of calling `f`
    """
    callable_f = either(noop, f, Kind.CALLABLE)
    arglist = slice(0, either((), args, Kind.LIST_LIKE))
    keywords = either({}, kwargs, Kind.MAPPING)
    return callable_f(*arglist, **keywords)


class Bound(Immutable):
    """
    A callable that calls `f` with `args` in front of the
    arguments it is called with
    """
    f: Callable
    args: Tuple[Any, ...]
    kwargs: Tuple[Tuple[str, Any], ...]

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return apply(
            self.f, self.args + args, {**dict(self.kwargs), **kwargs}
        )


def bind(f: Any, *args: Any, **kwargs: Any) -> Bound:
    """
    Get a function that calls `f` with `args` followed by the arguments
    it is called with. If `f` is not callable, the returned function does
    nothing.

    Example:
        >>> add_1 = bind(lambda a, b: a + b, 1)
        >>> add_1(5)
        6
        >>> add_1(6)
        7

    Args:
        f: the function to bind arguments to
        args: leading positional arguments
        kwargs: keyword arguments, overridden by keywords given at call time

    Return:
        `f` with `args` bound
    """
    callable_f = either(noop, f, Kind.CALLABLE)
    return Bound(callable_f, args, tuple(kwargs.items()))


__all__ = ['call', 'apply', 'bind', 'Bound']
