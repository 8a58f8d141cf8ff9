"""
Сквозной сценарий: аддитивная алгебра целых чисел (fold_fun = +, единица 0)

Проверяет каноничные строки вывода на каждом шаге и отказ split для
некоммутативной конкатенации строк.
"""

import pytest

from src.core.algebra import (
    NonCommutativeSplit,
    check_fold,
    combine,
    construct,
    decompose,
    singleton,
    split,
    to_partition,
)


def add(a: int, b: int) -> int:
    return a + b


def concat(a: str, b: str) -> str:
    return a + b


class TestAdditiveScenario:
    """Шаги 1-5: singleton → combine → split → decompose → partition"""

    @pytest.fixture
    def x_121(self):
        x_1 = singleton(1, 0, add, True)
        x_1_copy = singleton(1, 0, add, True)
        x_2 = singleton(2, 0, add, True)
        for x in (x_1, x_1_copy, x_2):
            assert check_fold(x)

        x_12 = combine(x_1, x_2, True)
        assert check_fold(x_12)

        x_121 = combine(x_12, x_1_copy, True)
        assert check_fold(x_121)
        return x_121

    def test_combined(self, x_121) -> None:
        assert str(x_121) == "[1, 2, 1] of 4 with 3 parts"

    def test_split_ones(self, x_121) -> None:
        x_1s, x_2s = split(x_121, lambda z: z == 1)
        assert str(x_121) == "[1, 2, 1] of 4 with 3 parts"
        assert str(x_1s) == "[1, 1] of 2 with 2 parts"
        assert str(x_2s) == "[2] of 2 with 1 parts"

    def test_decompose_two(self, x_121) -> None:
        x_11 = construct([1, 1], 0, add, True)
        assert check_fold(x_11)

        decompose(x_121, x_11, 1, True)

        assert check_fold(x_121)
        assert str(x_121) == "[1, 1, 1, 1] of 4 with 4 parts"

    def test_partition(self, x_121) -> None:
        x_211 = to_partition(x_121)
        assert str(x_211) == "[2, 1, 1] of 4 with 3 parts"


class TestStringConcatenation:
    """Шаг 6: конкатенация некоммутативна — split запрещён"""

    def test_split_rejected(self) -> None:
        greeting = singleton("Hello", "", concat, False)
        banter = singleton("Banter", "", concat, False)
        goodbye = singleton("Bye", "", concat, False)
        conversation = combine(combine(greeting, banter), goodbye)

        assert conversation.net == "HelloBanterBye"
        assert check_fold(conversation)
        assert str(conversation) == "['Hello', 'Banter', 'Bye'] of HelloBanterBye with 3 parts"

        with pytest.raises(NonCommutativeSplit):
            split(conversation, lambda z: z == "Hello")


class TestRenderingNonInteger:
    """Отображение не-целых частей следует правилам Python"""

    def test_float_parts(self) -> None:
        x = construct([1.0, 1.0], 0.0, lambda a, b: a + b, True)
        assert str(x) == "[1.0, 1.0] of 2.0 with 2 parts"

    def test_string_parts_single_quoted(self) -> None:
        x = singleton("Hello", "", concat, False)
        assert str(x) == "['Hello'] of Hello with 1 parts"
