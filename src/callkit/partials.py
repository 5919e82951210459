from typing import Any, Callable, Tuple

from .functions import identity
from .guard import Kind, either
from .immutable import Immutable
from .invoke import apply


class Partial(Immutable):
    """
    A callable with captured arguments. When `captured_first` is set the
    captured arguments go in front of the call-time arguments, otherwise
    they are appended after them.
    """
    f: Callable
    args: Tuple[Any, ...]
    kwargs: Tuple[Tuple[str, Any], ...]
    captured_first: bool

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if self.captured_first:
            arglist = self.args + args
            keywords = {**dict(self.kwargs), **kwargs}
        else:
            arglist = args + self.args
            keywords = {**kwargs, **dict(self.kwargs)}
        return apply(self.f, arglist, keywords)


def partial(f: Any, *args: Any, **kwargs: Any) -> Partial:
    """
    Capture trailing arguments of `f`. The returned function calls `f`
    with the arguments it is given followed by `args`. If `f` is not
    callable, the returned function gives back its first argument.

    Example:
        >>> divide = lambda a, b: a / b
        >>> divide_by_5 = partial(divide, 5)
        >>> divide_by_5(35)
        7.0

    Args:
        f: the function to capture arguments for
        args: trailing positional arguments
        kwargs: keyword arguments, these take precedence over \
            keywords given at call time

    Return:
        `f` with `args` captured
    """
    callable_f = either(identity, f, Kind.CALLABLE)
    return Partial(
        callable_f, args, tuple(kwargs.items()), captured_first=False
    )


def rpartial(f: Any, *args: Any, **kwargs: Any) -> Partial:
    """
    Capture leading arguments of `f`. The returned function calls `f`
    with `args` followed by the arguments it is given. If `f` is not
    callable, the returned function gives back its first argument.

    Example:
        >>> divide = lambda a, b: a / b
        >>> divide_5_by = rpartial(divide, 5)
        >>> divide_5_by(2)
        2.5

    Args:
        f: the function to capture arguments for
        args: leading positional arguments
        kwargs: keyword arguments, overridden by keywords given at call time

    Return:
        `f` with `args` captured
    """
    callable_f = either(identity, f, Kind.CALLABLE)
    return Partial(
        callable_f, args, tuple(kwargs.items()), captured_first=True
    )


__all__ = ['partial', 'rpartial', 'Partial']
