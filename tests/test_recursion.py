import pytest

from algodrills.recursion import (
    Move,
    ascending,
    delete_middle,
    descending,
    expand_runs,
    fibonacci,
    hanoi_call_count,
    hanoi_moves,
    is_palindrome_number,
    kth_symbol,
    sort_stack,
    strings_of_length,
)


def test_strings_of_length_example():
    assert list(strings_of_length("ab", 3)) == [
        "aaa", "aab", "aba", "abb", "baa", "bab", "bba", "bbb",
    ]


def test_strings_of_length_zero():
    assert list(strings_of_length("xyz", 0)) == [""]


def test_strings_of_length_count():
    result = list(strings_of_length("abc", 4))
    assert len(result) == len(set(result)) == 3 ** 4
    assert all(len(s) == 4 for s in result)


def test_strings_of_length_negative():
    with pytest.raises(ValueError):
        strings_of_length("ab", -1)


def test_delete_middle_odd():
    assert delete_middle([1, 2, 3, 4, 5]) == [1, 2, 4, 5]


def test_delete_middle_properties():
    stack = [7, 3, 9, 1]
    result = delete_middle(stack)
    assert len(result) == len(stack) - 1
    assert stack == [7, 3, 9, 1]
    assert delete_middle([]) == []
    assert delete_middle([4]) == []


def test_fibonacci_base_and_recurrence():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1
    for n in range(2, 30):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_negative():
    with pytest.raises(ValueError):
        fibonacci(-3)


def test_kth_symbol_start():
    assert kth_symbol(1, 1) == 0
    assert kth_symbol(2, 2) == 1


@pytest.mark.parametrize("n", range(1, 8))
def test_kth_symbol_grammar(n):
    for k in range(1, (1 << (n - 1)) + 1):
        parent = kth_symbol(n, k)
        assert kth_symbol(n + 1, 2 * k - 1) == parent
        assert kth_symbol(n + 1, 2 * k) == 1 - parent
        assert kth_symbol(n + 1, k) == parent


def test_kth_symbol_out_of_range():
    with pytest.raises(ValueError):
        kth_symbol(3, 5)
    with pytest.raises(ValueError):
        kth_symbol(0, 1)


def test_is_palindrome_number():
    assert is_palindrome_number(12321) is True
    assert is_palindrome_number(7) is True
    assert is_palindrome_number(1231) is False
    assert is_palindrome_number(-121) is False


def test_ascending_and_descending():
    n = 6
    up = list(ascending(n))
    assert up == sorted(up)
    assert list(descending(n)) == up[::-1]
    assert up[0] == 1 and up[-1] == n
    assert list(ascending(0)) == []


def test_ascending_negative():
    with pytest.raises(ValueError):
        ascending(-1)


def test_sort_stack():
    stack = [3, 1, 4, 1, 5, 9, 2, 6]
    result = sort_stack(stack)
    assert result == sorted(stack)
    assert result[-1] == max(stack)


def test_expand_runs_examples():
    assert expand_runs("1A2B") == "ABB"
    assert expand_runs("3AB4C5T") == "ABABABCCCCTTTTT"


def test_expand_runs_stops_at_non_digit():
    assert expand_runs("2Ax3B") == "AA"
    assert expand_runs("") == ""


def test_hanoi_single_disk():
    assert list(hanoi_moves(1, 1, 3, 2)) == [Move(1, 1, 3)]


@pytest.mark.parametrize("n", [1, 2, 3, 5])
def test_hanoi_moves_are_legal(n):
    pegs = {1: list(range(n, 0, -1)), 2: [], 3: []}
    moves = list(hanoi_moves(n, 1, 3, 2))
    for move in moves:
        disk = pegs[move.source].pop()
        assert disk == move.disk
        assert not pegs[move.target] or pegs[move.target][-1] > disk
        pegs[move.target].append(disk)
    assert pegs[3] == list(range(n, 0, -1))
    assert hanoi_call_count(n) == len(moves)


def test_hanoi_invalid():
    with pytest.raises(ValueError):
        hanoi_moves(0)
    with pytest.raises(ValueError):
        hanoi_call_count(0)