import inspect
from typing import Any, Callable, List, Tuple, TypeVar, Union

try:
    from hypothesis.strategies import (
        SearchStrategy,
        booleans,
        builds,
        composite,
        floats,
        integers,
        lists,
        one_of,
        text
    )
except ImportError:
    raise ImportError(
        'Could not import hypothesis. To use callkit.hypothesis_strategies, '
        'install callkit with \n\n\tpip install callkit[test]'
    )

from .functions import Unary

A = TypeVar('A')


def _everything(allow_nan: bool = False) -> Tuple[SearchStrategy[int],
                                                  SearchStrategy[bool],
                                                  SearchStrategy[str],
                                                  SearchStrategy[float]]:
    return integers(), booleans(), text(), floats(allow_nan=allow_nan)


def anything(allow_nan: bool = False
             ) -> SearchStrategy[Union[int, bool, str, float]]:
    """
    Create a search strategy that produces one of int, bool, str or floats.

    Args:
        allow_nan: whether to allow nan values
    Return:
        Search strategy that produces ints, bools, str or floats
    """
    return one_of(*_everything(allow_nan))


def unaries(return_strategy: SearchStrategy[A]
            ) -> SearchStrategy[Unary[object, A]]:
    """
    Create a search strategy that produces functions of 1 argument

    Example:
        >>> f = unaries(integers()).example()
        >>> f(None)
        2
    Args:
        return_strategy: strategy used to draw return values
    Return:
        Search strategy that produces callables of 1 argument
    """
    @composite
    def _(draw):
        a: A = draw(return_strategy)
        return lambda _: a

    return _()


def _recorder(n: int) -> Callable[..., Tuple[Any, ...]]:
    def record(*args: Any) -> Tuple[Any, ...]:
        return args

    parameters = [
        inspect.Parameter(f'a{i}', inspect.Parameter.POSITIONAL_OR_KEYWORD)
        for i in range(n)
    ]
    parameters.append(
        inspect.Parameter('rest', inspect.Parameter.VAR_POSITIONAL)
    )
    record.__signature__ = inspect.Signature(parameters)  # type: ignore
    return record


def naries(min_arity: int = 0, max_arity: int = 5
           ) -> SearchStrategy[Callable[..., Tuple[Any, ...]]]:
    """
    Create a search strategy that produces functions with a declared
    arity between `min_arity` and `max_arity`. Each function returns
    a tuple of all positional arguments it was called with, so the
    arguments a function received can be compared directly.

    Example:
        >>> f = naries(2, 2).example()
        >>> f(1, 2)
        (1, 2)
        >>> f(1, 2, 3)
        (1, 2, 3)
    Args:
        min_arity: smallest arity to produce
        max_arity: largest arity to produce
    Return:
        Search strategy that produces functions of fixed declared arity
    """
    return builds(_recorder, integers(min_arity, max_arity))


def array_likes(value_strategy: SearchStrategy[A] = anything(),
                max_size: int = 10
                ) -> SearchStrategy[Union[List[A], Tuple[A, ...]]]:
    """
    Create a search strategy that produces lists, tuples and
    user defined sequences that only implement `__len__` and `__getitem__`

    Args:
        value_strategy: search strategy to draw elements from
        max_size: largest number of elements to draw
    Return:
        search strategy that produces array-like values
    """
    elements = lists(value_strategy, max_size=max_size)
    return one_of(
        elements,
        elements.map(tuple),
        elements.map(ArgumentsLike)
    )


class ArgumentsLike:
    """
    Minimal array-like that is not a `list` or `tuple`, and only
    supports `len` and integer indexing
    """
    def __init__(self, values):
        self._values = list(values)

    def __len__(self):
        return len(self._values)

    def __getitem__(self, index):
        if not isinstance(index, int):
            raise TypeError('ArgumentsLike only supports integer indices')
        return self._values[index]

    def __repr__(self):
        return f'ArgumentsLike({self._values!r})'
