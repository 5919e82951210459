from typing import TypeVar

from typing_extensions import Protocol

A = TypeVar('A', covariant=True)


class ArrayLike(Protocol[A]):
    """
    Anything with a length and integer indexed elements: lists, tuples,
    the ``*args`` of a function, ``range`` objects and user defined
    sequences
    """
    def __len__(self) -> int:
        pass

    def __getitem__(self, index: int) -> A:
        pass
