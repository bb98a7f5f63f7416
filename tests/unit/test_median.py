"""
Тесты для валидации сумм и медианы истории счетов

Проверяет:
1. validate_amount (тип, знак, верхняя граница)
2. upper_median: правило чётности (верхнее среднее)
3. InvoiceHistory: append-only, совпадение с эталоном
"""

import pytest

from src.core.math import (
    EMPTY_MEDIAN,
    UINT32_MAX,
    InvoiceHistory,
    upper_median,
    validate_amount,
)


class TestValidateAmount:
    """Тесты для validate_amount"""

    @pytest.mark.parametrize("amount", [0, 1, 4000, UINT32_MAX])
    def test_valid(self, amount: int) -> None:
        validate_amount(amount)

    def test_negative(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            validate_amount(-1)

    def test_above_max(self) -> None:
        with pytest.raises(ValueError, match="exceeds maximum"):
            validate_amount(UINT32_MAX + 1)

    def test_custom_max(self) -> None:
        validate_amount(10, max_value=10)
        with pytest.raises(ValueError):
            validate_amount(11, max_value=10)

    @pytest.mark.parametrize("amount", [1.0, "5", None, True, False])
    def test_not_int(self, amount) -> None:
        with pytest.raises(ValueError, match="must be an int"):
            validate_amount(amount)


class TestUpperMedian:
    """Тесты для upper_median"""

    def test_empty(self) -> None:
        assert upper_median([]) == EMPTY_MEDIAN == 0

    def test_odd_count_middle(self) -> None:
        """{100,300,200,230,830} → 230"""
        assert upper_median([100, 300, 200, 230, 830]) == 230

    def test_even_count_upper_middle(self) -> None:
        """{100,200,230,300} → 230 (не 215)"""
        assert upper_median([100, 200, 230, 300]) == 230

    def test_duplicates(self) -> None:
        assert upper_median([5, 5, 1, 1]) == 5
        assert upper_median([7]) == 7


class TestInvoiceHistory:
    """Тесты для InvoiceHistory"""

    def test_empty(self) -> None:
        history = InvoiceHistory()
        assert len(history) == 0
        assert history.median() == 0

    def test_worked_example(self) -> None:
        history = InvoiceHistory()
        medians = []
        for amount in (2000, 3000, 4000, 5000):
            history.append(amount)
            medians.append(history.median())
        assert medians == [2000, 3000, 3000, 4000]

    def test_matches_recomputed_median(self) -> None:
        """Инкрементальная медиана = пересчёт с нуля на каждом шаге"""
        history = InvoiceHistory()
        amounts = [830, 100, 1830, 2830, 2830, 300, 0, 200, 230, 3200, 100]
        for i, amount in enumerate(amounts, start=1):
            history.append(amount)
            assert history.median() == upper_median(amounts[:i])

    def test_length_counts_duplicates(self) -> None:
        """Длина истории = число счетов, включая повторяющиеся суммы"""
        history = InvoiceHistory()
        for amount in (3, 1, 3, 3):
            history.append(amount)
        assert len(history) == 4
        assert history.median() == 3
