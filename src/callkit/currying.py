import inspect
import logging
from typing import Any, Callable, Optional, Tuple

from .functions import identity
from .guard import Kind, either
from .immutable import Immutable
from .invoke import apply

logger = logging.getLogger(__name__)

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD
)


class UnknownArityError(ValueError):
    pass


def declared_arity(f: Callable) -> int:
    """
    Get the number of positional parameters without a default value
    that `f` declares. Variadic, keyword-only and defaulted parameters
    are not counted.

    Example:
        >>> declared_arity(lambda a, b, c=0, *args: None)
        2

    Args:
        f: the function to inspect

    Return:
        declared arity of `f`
    """
    try:
        signature = inspect.signature(f)
    except (TypeError, ValueError) as e:
        raise UnknownArityError(
            f'could not determine the arity of {f!r}, '
            'pass it explicitly with curry(f, arity=...)'
        ) from e
    return sum(
        1 for p in signature.parameters.values()
        if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty
    )


class Curried(Immutable):
    """
    A step in a curry chain: `f` with the arguments collected so far.
    Calling it either calls `f`, once `arity` positional arguments
    have been collected, or gives a new `Curried` with the extra arguments
    """
    f: Callable
    arity: int
    args: Tuple[Any, ...] = ()
    kwargs: Tuple[Tuple[str, Any], ...] = ()

    def __repr__(self):
        return f'curry({self.f!r})' + ''.join(f'({a!r})' for a in self.args)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return currier(self, *args, **kwargs)


def currier(curried: Curried, *args: Any, **kwargs: Any) -> Any:
    """
    Advance `curried` with `args` and `kwargs`. Keyword arguments are
    collected and passed on but don't count towards the arity.

    Example:
        >>> chain = curry(lambda a, b: a + b)
        >>> currier(chain, 1)
        curry(<function <lambda> at 0x10f3a1e18>)(1)
        >>> currier(chain, 1, 2)
        3

    Args:
        curried: the chain to advance
        args: positional arguments to add to the chain
        kwargs: keyword arguments to add to the chain

    Return:
        result of calling the curried function if enough arguments \
        have been collected, a new `Curried` otherwise
    """
    arglist = curried.args + args
    keywords = {**dict(curried.kwargs), **kwargs}
    if len(arglist) >= curried.arity:
        return apply(curried.f, arglist, keywords)
    return curried.clone(args=arglist, kwargs=tuple(keywords.items()))


def curry(f: Any, arity: Optional[int] = None) -> Curried:
    """
    Get a version of `f` that collects positional arguments over any number
    of calls, and calls `f` as soon as its arity is reached. If `f` is not
    callable, `identity` is curried instead.

    Example:
        >>> @curry
        ... def add_three(a, b, c):
        ...     return a + b + c
        >>> add_three(1)(2)(3)
        6
        >>> add_three(1, 2)(3)
        6
        >>> curry(max, arity=2)(1)(2)
        2

    Args:
        f: The function to curry
        arity: number of positional arguments to collect before calling \
            `f`. Determined from the signature of `f` if not given.

    Return:
        Curried version of `f`
    """
    callable_f = either(identity, f, Kind.CALLABLE)
    if callable_f is not f:
        arity = 1
    elif arity is None:
        arity = declared_arity(f)
    elif arity < 0:
        raise ValueError(f'arity must be non-negative, got {arity}')
    logger.debug('currying %r with arity %d', callable_f, arity)
    return Curried(callable_f, arity)


__all__ = [
    'curry', 'currier', 'declared_arity', 'Curried', 'UnknownArityError'
]
