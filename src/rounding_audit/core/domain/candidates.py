"""
Candidates — генератор граничных значений для аудита округления

Для глубины depth генерируются значения, десятичный литерал которых содержит
depth + 1 дробных цифр и оканчивается на 4 или 5:

    {integer_part}.{prefix}4   — чуть ниже середины между соседями
    {integer_part}.{prefix}5   — ровно на середине (в десятичной записи)

где prefix пробегает 0 .. 10**depth - 1 (с ведущими нулями, по возрастанию).
Двоичное значение такого литерала лежит рядом с границей округления на позиции
depth, где наивное и корректное округление расходятся чаще всего.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Последовательность конечна (2 * 10**depth) и детерминирована
2. Повторный iter() начинает последовательность заново
3. В режиме negate значение с индексом i равно -(позитивное значение с индексом i)
4. Все значения конечны и ограничены по модулю MAX_INTEGER_PART + 1
"""

from typing import Final, Iterator

# Максимальная глубина (число дробных цифр), для которой имеет смысл аудит
MAX_DEPTH_LIMIT: Final[int] = 15

# Максимальная целая часть генерируемых значений
MAX_INTEGER_PART: Final[int] = 10**6

# Последние цифры литерала: ниже середины и на середине
BOUNDARY_DIGITS: Final[tuple[str, str]] = ("4", "5")


def _validate(depth: int, integer_part: int) -> None:
    if not 0 <= depth <= MAX_DEPTH_LIMIT:
        raise ValueError(f"depth must be in [0, {MAX_DEPTH_LIMIT}], got {depth}")
    if not 0 <= integer_part <= MAX_INTEGER_PART:
        raise ValueError(
            f"integer_part must be in [0, {MAX_INTEGER_PART}], got {integer_part}"
        )


def candidate_literals(depth: int, integer_part: int = 0) -> Iterator[str]:
    """
    Десятичные литералы кандидатов для глубины depth (всегда положительные).

    Examples:
        >>> list(candidate_literals(0))
        ['0.4', '0.5']
        >>> list(candidate_literals(1))[:4]
        ['0.04', '0.05', '0.14', '0.15']
    """
    _validate(depth, integer_part)
    for prefix in range(10**depth):
        head = f"{integer_part}.{prefix:0{depth}d}" if depth else f"{integer_part}."
        for last in BOUNDARY_DIGITS:
            yield head + last


def iter_candidates(
    depth: int, negate: bool = False, integer_part: int = 0
) -> Iterator[float]:
    """
    Ленивая последовательность значений-кандидатов для глубины depth.

    Args:
        depth: Число дробных цифр, на котором проверяется округление
        negate: True → отрицательные значения (зеркало позитивных)
        integer_part: Целая часть значений (default: 0)

    Yields:
        float-значения в детерминированном порядке

    Raises:
        ValueError: Если depth или integer_part вне допустимого диапазона
    """
    for literal in candidate_literals(depth, integer_part):
        value = float(literal)
        yield -value if negate else value


class CandidateSequence:
    """
    Перезапускаемая конечная последовательность кандидатов.

    Каждый вызов iter() возвращает новый генератор с начала последовательности.
    """

    def __init__(self, depth: int, negate: bool = False, integer_part: int = 0):
        _validate(depth, integer_part)
        self.depth = depth
        self.negate = negate
        self.integer_part = integer_part

    def __iter__(self) -> Iterator[float]:
        return iter_candidates(self.depth, self.negate, self.integer_part)

    def __len__(self) -> int:
        return len(BOUNDARY_DIGITS) * 10**self.depth

    def __repr__(self) -> str:
        return (
            f"CandidateSequence(depth={self.depth}, negate={self.negate}, "
            f"integer_part={self.integer_part})"
        )
