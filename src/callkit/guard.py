import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, Tuple, Type, TypeVar, Union

A = TypeVar('A')
B = TypeVar('B')

logger = logging.getLogger(__name__)


class Kind(Enum):
    """
    Tags for the kinds of value `either` knows how to check
    """
    CALLABLE = 'callable'
    """
    Anything `callable` reports as invocable
    """
    LIST_LIKE = 'list-like'
    """
    Integer indexed values with a length, excluding strings, bytes and
    mappings
    """
    MAPPING = 'mapping'
    """
    Instances of `collections.abc.Mapping`
    """


KindLike = Union[Kind, Type[Any], Tuple[Type[Any], ...]]

_NOT_LIST_LIKE = (str, bytes, bytearray, Mapping)


def _is_list_like(value: object) -> bool:
    if isinstance(value, _NOT_LIST_LIKE):
        return False
    t = type(value)
    return hasattr(t, '__len__') and hasattr(t, '__getitem__')


def _satisfies(candidate: object, kind: KindLike) -> bool:
    if kind is Kind.CALLABLE:
        return callable(candidate)
    if kind is Kind.LIST_LIKE:
        return _is_list_like(candidate)
    if kind is Kind.MAPPING:
        return isinstance(candidate, Mapping)
    if isinstance(kind, type):
        return isinstance(candidate, kind)
    if isinstance(kind, tuple) and all(isinstance(k, type) for k in kind):
        return isinstance(candidate, kind)
    return False


def either(fallback: A, candidate: B, kind: KindLike) -> Union[A, B]:
    """
    Get `candidate` if it is of kind `kind`, `fallback` otherwise.
    Never raises: a `kind` that can't be checked is never satisfied.

    Example:
        >>> either(noop, print, Kind.CALLABLE)
        <built-in function print>
        >>> either(noop, None, Kind.CALLABLE)
        <function noop at 0x10f3a1e18>
        >>> either((), 'abc', Kind.LIST_LIKE)
        ()
        >>> either(0, 1.5, int)
        0

    Args:
        fallback: value to use when `candidate` is rejected
        candidate: value to check
        kind: a `Kind`, a class or a tuple of classes

    Return:
        `candidate` if it satisfies `kind`, `fallback` otherwise
    """
    if _satisfies(candidate, kind):
        return candidate
    logger.debug(
        '%r does not satisfy %r, substituting %r', candidate, kind, fallback
    )
    return fallback


__all__ = ['Kind', 'either']
