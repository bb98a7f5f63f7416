"""SortedIndex — отсортированный индекс ключ → handle компании.

Два параллельных списка (keys, handles), поиск через bisect.
Ключи уникальны: вставка существующего ключа считается ошибкой вызывающего кода,
реестр проверяет уникальность до мутации.
"""

from bisect import bisect_left, bisect_right
from typing import Generic, Hashable, List, Optional, Tuple, TypeVar

K = TypeVar("K", bound=Hashable)


class SortedIndex(Generic[K]):
    """Отсортированный по возрастанию индекс уникальных ключей.

    Поддерживает:
    - точный поиск (lower bound + сравнение)
    - первый элемент
    - строгий upper bound (первый ключ > запроса) для курсорного обхода
    """

    def __init__(self):
        self._keys: List[K] = []
        self._handles: List[int] = []

    def find(self, key: K) -> Optional[int]:
        """Handle по точному ключу, либо None."""
        pos = bisect_left(self._keys, key)
        if pos < len(self._keys) and self._keys[pos] == key:
            return self._handles[pos]
        return None

    def __contains__(self, key: K) -> bool:
        return self.find(key) is not None

    def insert(self, key: K, handle: int) -> None:
        """Вставка на отсортированную позицию.

        Raises:
            KeyError: Если ключ уже присутствует
        """
        pos = bisect_left(self._keys, key)
        if pos < len(self._keys) and self._keys[pos] == key:
            raise KeyError(f"duplicate index key: {key!r}")
        self._keys.insert(pos, key)
        self._handles.insert(pos, handle)

    def remove(self, key: K) -> int:
        """Удаление по точному ключу.

        Returns:
            Handle удалённой записи

        Raises:
            KeyError: Если ключ отсутствует
        """
        pos = bisect_left(self._keys, key)
        if pos == len(self._keys) or self._keys[pos] != key:
            raise KeyError(f"missing index key: {key!r}")
        del self._keys[pos]
        return self._handles.pop(pos)

    def first(self) -> Optional[Tuple[K, int]]:
        if not self._keys:
            return None
        return self._keys[0], self._handles[0]

    def next_after(self, key: K) -> Optional[Tuple[K, int]]:
        """Первая запись со строго большим ключом (upper bound).

        Ключ запроса не обязан присутствовать в индексе.
        """
        pos = bisect_right(self._keys, key)
        if pos == len(self._keys):
            return None
        return self._keys[pos], self._handles[pos]

    def handles(self) -> List[int]:
        """Handles в порядке ключей."""
        return list(self._handles)

    def __len__(self) -> int:
        return len(self._keys)
