from typing import Optional, Tuple, TypeVar

from .protocols import ArrayLike

A = TypeVar('A')


def slice(start: int,
          source: ArrayLike[A],
          end: Optional[int] = None) -> Tuple[A, ...]:
    """
    Copy the elements from `start` up to, but not including, `end` of any
    array-like `source` into a new tuple. Indices are clamped to the
    bounds of `source` and negative indices count from the end, like
    regular slicing.

    Example:
        >>> slice(2, [1, 2, 3, 4])
        (3, 4)
        >>> slice(1, [1, 2, 3, 4], 3)
        (2, 3)
        >>> slice(10, [1, 2, 3])
        ()

    Args:
        start: index of the first element to copy
        source: value with a length and integer indexed elements
        end: index after the last element to copy, \
            or `None` to copy to the end of `source`

    Return:
        tuple of the copied elements
    """
    indices = range(len(source))[start:end]
    return tuple(source[i] for i in indices)


__all__ = ['slice']
