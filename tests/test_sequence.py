from hypothesis import given
from hypothesis.strategies import integers, none, one_of

from callkit import sequence
from callkit.hypothesis_strategies import ArgumentsLike, array_likes


def test_from_start():
    assert sequence.slice(0, [1, 2, 3, 4]) == (1, 2, 3, 4)


def test_from_offset():
    assert sequence.slice(2, [1, 2, 3, 4]) == (3, 4)


def test_with_end():
    assert sequence.slice(1, [1, 2, 3, 4], 3) == (2, 3)


def test_start_out_of_range():
    assert sequence.slice(10, [1, 2, 3]) == ()
    assert sequence.slice(3, [1, 2, 3]) == ()


def test_end_out_of_range():
    assert sequence.slice(1, [1, 2, 3], 10) == (2, 3)


def test_negative_indices_count_from_end():
    assert sequence.slice(-2, [1, 2, 3, 4]) == (3, 4)
    assert sequence.slice(0, [1, 2, 3, 4], -1) == (1, 2, 3)
    assert sequence.slice(-10, [1, 2, 3]) == (1, 2, 3)


def test_empty_source():
    assert sequence.slice(0, []) == ()


def test_invocation_arguments():
    def rest(*args):
        return sequence.slice(1, args)

    assert rest('first', 'second', 'third') == ('second', 'third')
    assert rest() == ()


def test_custom_array_like():
    assert sequence.slice(1, ArgumentsLike('abc')) == ('b', 'c')


def test_result_is_a_copy():
    source = [1, 2, 3]
    result = sequence.slice(0, source)
    source.append(4)
    assert result == (1, 2, 3)


@given(array_likes(), integers(-15, 15), one_of(none(), integers(-15, 15)))
def test_matches_builtin_slicing(source, start, end):
    as_list = [source[i] for i in range(len(source))]
    assert sequence.slice(start, source, end) == tuple(as_list[start:end])
