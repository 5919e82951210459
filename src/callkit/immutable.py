from dataclasses import dataclass
from typing import TypeVar

T = TypeVar('T')


class Immutable:
    """
    Base class for the callable values of callkit. Subclasses become
    frozen dataclasses, so their captured arguments are fixed once
    constructed and new steps are made with `clone`

    Example:
        >>> class Captured(Immutable):
        ...     args: tuple
        >>> c = Captured((1, 2))
        >>> c.args = (3,)
        FrozenInstanceError: cannot assign to field 'args'

    """

    def __init_subclass__(cls,
                          init: bool = True,
                          repr: bool = True,
                          eq: bool = True,
                          order: bool = False,
                          unsafe_hash: bool = False) -> None:
        super().__init_subclass__()
        if not hasattr(cls, '__annotations__'):
            cls.__annotations__ = {}
        dataclass(
            frozen=True,
            init=init,
            repr=repr,
            eq=eq,
            order=order,
            unsafe_hash=unsafe_hash
        )(cls)

    def clone(self: T, **changes) -> T:
        """
        Copy this value with the fields in `changes` replaced

        Example:
            >>> class Captured(Immutable):
            ...     args: tuple
            >>> Captured((1,)).clone(args=(1, 2))
            Captured(args=(1, 2))

        Args:
            changes: fields to replace
        Return:
            New instance of the same type
        """
        fields = {**self.__dict__, **changes}
        return type(self)(**fields)  # type: ignore


__all__ = ['Immutable']
