from typing import Any, Callable, TypeVar

A = TypeVar('A')
B = TypeVar('B')


def identity(v: A = None, *_: Any, **__: Any) -> A:  # type: ignore
    """
    The identity function. Just gives back its first argument, any
    further arguments are ignored. Called without arguments it gives `None`

    Example:
        >>> identity('value')
        'value'
        >>> identity('value', 'ignored')
        'value'
        >>> identity() is None
        True

    Args:
        v: The value to get back

    Return:
        `v`
    """
    return v


def noop(*args: Any, **kwargs: Any) -> None:
    """
    Accept any arguments and do nothing

    Example:
        >>> noop(1, 2, key='value') is None
        True

    Return:
        `None`
    """
    return None


Unary = Callable[[A], B]


__all__ = ['identity', 'noop', 'Unary']
