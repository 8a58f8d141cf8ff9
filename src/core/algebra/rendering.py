"""
Rendering — каноничный отладочный формат композиции

Формат фиксирован и используется для буквального сравнения вывода:

    "<parts> of <net> with <N> parts"

где <parts> — отображение списка частей (repr элементов), <net> — str(net),
<N> — количество частей (без согласования числа: "1 parts").

Буквальное совпадение с исходным форматом гарантируется только для целых
частей. Для других типов используется отображение Python: строки в
одинарных кавычках (['Hello', 'Bye']), float с дробной частью (2.0).
"""

from typing import Any


def format_parts(parts: Any) -> str:
    """
    Отображение частей в виде списка.

    Examples:
        >>> format_parts((1, 2, 1))
        '[1, 2, 1]'
        >>> format_parts(())
        '[]'
    """
    return repr(list(parts))


def render(x: Any) -> str:
    """
    Каноничная строка для Composition или Partition.

    Examples:
        >>> render(construct([1, 2, 1], 0, operator.add, True))
        '[1, 2, 1] of 4 with 3 parts'
    """
    return f"{format_parts(x.parts)} of {x.net} with {len(x.parts)} parts"
