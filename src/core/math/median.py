"""
Invoice amounts — валидация сумм и медиана истории счетов

Медиана по контракту реестра:
- пустая история → 0
- нечётное n → средний элемент отсортированной последовательности
- чётное n → БОЛЬШИЙ из двух средних (индекс n // 2), не среднее арифметическое

Это ровно statistics.median_high.
"""

import statistics
from bisect import insort
from typing import Final, Iterable, List


# =============================================================================
# КОНСТАНТЫ
# =============================================================================
# Ширина беззнаковой суммы счёта (unsigned 32-bit)
UINT32_MAX: Final[int] = 2**32 - 1

# Медиана пустой истории
EMPTY_MEDIAN: Final[int] = 0


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_amount(amount: int, name: str = "amount", max_value: int = UINT32_MAX) -> None:
    """
    Валидация суммы счёта.

    Args:
        amount: Проверяемая сумма
        name: Имя параметра (для сообщения об ошибке)
        max_value: Верхняя граница (включительно)

    Raises:
        ValueError: Если amount не int, отрицательный или больше max_value
    """
    # bool является подклассом int, но не суммой
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError(f"{name} must be an int, got {type(amount).__name__}")

    if amount < 0:
        raise ValueError(f"{name} must be non-negative, got {amount}")

    if amount > max_value:
        raise ValueError(f"{name} {amount} exceeds maximum {max_value}")


# =============================================================================
# МЕДИАНА
# =============================================================================


def upper_median(amounts: Iterable[int]) -> int:
    """
    Медиана с выбором верхнего среднего для чётного n.

    Пересчёт с нуля (O(n log n)), используется как эталон.

    Args:
        amounts: Мультимножество сумм (порядок не важен)

    Returns:
        Медиана, либо 0 для пустого входа
    """
    values = list(amounts)
    if not values:
        return EMPTY_MEDIAN
    return statistics.median_high(values)


class InvoiceHistory:
    """
    Append-only история сумм счетов.

    Хранит мультимножество сумм в отсортированном виде, порядок поступления
    для медианы не важен. Каждый append вставляет сумму на место (bisect.insort).
    Медиана читается из снапшота за O(1).

    Удаление записей не поддерживается: история включает счета
    уже удалённых компаний.
    """

    def __init__(self):
        self._sorted: List[int] = []

    def append(self, amount: int) -> None:
        insort(self._sorted, amount)

    def median(self) -> int:
        """Медиана (верхнее среднее), 0 для пустой истории."""
        if not self._sorted:
            return EMPTY_MEDIAN
        return self._sorted[len(self._sorted) // 2]

    def __len__(self) -> int:
        return len(self._sorted)
