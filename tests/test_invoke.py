from dataclasses import FrozenInstanceError

import pytest
from hypothesis import given
from hypothesis.strategies import lists

from callkit import apply, bind, call
from callkit.hypothesis_strategies import (ArgumentsLike, anything,
                                           array_likes, naries)

from .payloads import add, add_three_numbers


def test_call():
    assert call(add, 1, 5) == 6


def test_call_with_keywords():
    assert call(add, 1, b=5) == 6


def test_call_non_callable_is_noop():
    assert call(None, 1, 2) is None
    assert call('add', 1, 2) is None


@given(naries(), lists(anything(), max_size=8))
def test_call_passes_arguments_in_order(f, args):
    assert call(f, *args) == tuple(args)


def test_apply():
    assert apply(add, [1, 5]) == 6
    assert apply(add, (1, 5)) == 6
    assert apply(add, ArgumentsLike([1, 5])) == 6


@given(naries(), array_likes())
def test_apply_spreads_array_likes(f, args):
    assert apply(f, args) == tuple(args[i] for i in range(len(args)))


def test_apply_with_keywords():
    assert apply(add, [1], {'b': 5}) == 6


def test_apply_non_list_like_is_no_arguments():
    def record(*args, **kwargs):
        return args, kwargs

    assert apply(record, 'ab') == ((), {})
    assert apply(record, None) == ((), {})
    assert apply(record, 1) == ((), {})
    assert apply(record, tuple) == ((), {})
    assert apply(record, list) == ((), {})
    assert apply(record, [1], ['not', 'a', 'mapping']) == ((1, ), {})


def test_apply_non_callable_is_noop():
    assert apply(None, [1, 2]) is None


def test_bind():
    add_1 = bind(add, 1)
    assert add_1(5) == 6
    assert add_1(6) == 7


def test_bind_several_arguments():
    assert bind(add_three_numbers, 1, 2)(3) == 6
    assert bind(add_three_numbers)(1, 2, 3) == 6


def test_bind_keywords_are_overridden_at_call_time():
    def record(*args, **kwargs):
        return args, kwargs

    bound = bind(record, 1, key='bound', other='bound')
    assert bound(2, key='call') == ((1, 2), {'key': 'call', 'other': 'bound'})


def test_bind_non_callable_is_noop():
    assert bind(None, 1)(2) is None


def test_bound_is_immutable():
    bound = bind(add, 1)
    with pytest.raises(FrozenInstanceError):
        bound.args = (2, )


def test_bound_is_hashable():
    assert hash(bind(add, 1, b=2)) == hash(bind(add, 1, b=2))
    assert len({bind(add, 1), bind(add, 1), bind(add, 2)}) == 2


def test_bound_does_not_alias_call_arguments():
    args = [1, 2]
    bound = bind(add_three_numbers, *args)
    args.append(100)
    assert bound(3) == 6
