"""VAT Register — реестр плательщиков НДС в памяти.

Хранение:
- arena: handle → Company (единственный экземпляр компании)
- индекс по tax_id (точное сравнение)
- индекс по (name, address) без учёта регистра

Оба индекса ссылаются на одни и те же handles, поэтому начисление дохода
видно одинаково при поиске по любому ключу.

История счетов append-only и переживает удаление компаний: медиана
считается по всем когда-либо выставленным счетам.

Ошибки «не найдено» и «дубликат» считаются нормальным исходом (False / found=False),
исключения только для некорректных аргументов (ValueError, ValidationError).
"""

import threading
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from src.core.domain.company import Company, NameKey, name_key, tax_id_key
from src.core.logging import get_logger
from src.core.math.median import UINT32_MAX, InvoiceHistory, validate_amount
from src.core.settings import Settings
from src.register.sorted_index import SortedIndex

logger = get_logger(__name__)


# =============================================================================
# CONFIG / RESULTS
# =============================================================================


@dataclass(frozen=True)
class RegisterConfig:
    """Конфигурация реестра.

    max_invoice_amount: верхняя граница суммы одного счёта
    (по умолчанию ширина unsigned 32-bit).
    """
    max_invoice_amount: int = UINT32_MAX

    @classmethod
    def from_settings(cls, settings: Settings) -> "RegisterConfig":
        return cls(max_invoice_amount=settings.max_invoice_amount)


@dataclass(frozen=True)
class AuditResult:
    """Результат аудита: накопленный доход компании."""

    found: bool
    income: int = 0


@dataclass(frozen=True)
class CompanyCursor:
    """Позиция курсора обхода по (name, address).

    name/address в исходном регистре, как при регистрации.
    """

    found: bool
    name: Optional[str] = None
    address: Optional[str] = None


_NOT_FOUND_CURSOR = CompanyCursor(found=False)


# =============================================================================
# REGISTER
# =============================================================================


class VATRegister:
    """Реестр компаний с двумя независимыми упорядочиваниями.

    Каждая публичная операция выполняется под одним RLock: insert/cancel
    меняют оба индекса, и читатели не должны видеть их рассогласованными.
    """

    def __init__(self, config: Optional[RegisterConfig] = None):
        self.config = config or RegisterConfig()

        self._companies: Dict[int, Company] = {}
        self._by_id: SortedIndex[str] = SortedIndex()
        self._by_name: SortedIndex[NameKey] = SortedIndex()
        self._history = InvoiceHistory()

        self._next_handle = 0
        self._lock = threading.RLock()

    # -------------------------------------------------------------------------
    # Регистрация / удаление
    # -------------------------------------------------------------------------

    def new_company(self, name: str, addr: str, tax_id: str) -> bool:
        """Регистрация новой компании.

        Args:
            name: Название
            addr: Адрес
            tax_id: Налоговый идентификатор

        Returns:
            True при успехе, False если tax_id или (name, addr) уже заняты
        """
        # ValidationError для не-строк до любой мутации
        company = Company(name=name, address=addr, tax_id=tax_id)
        key = company.name_key

        with self._lock:
            if company.tax_id in self._by_id:
                logger.info("company_rejected", reason="duplicate_tax_id", tax_id=tax_id)
                return False
            if key in self._by_name:
                logger.info(
                    "company_rejected",
                    reason="duplicate_name_address",
                    name=name,
                    address=addr,
                )
                return False

            handle = self._next_handle
            self._next_handle += 1

            self._companies[handle] = company
            self._by_id.insert(company.tax_id, handle)
            self._by_name.insert(key, handle)

        logger.debug("company_registered", tax_id=tax_id, name=name, address=addr)
        return True

    def cancel_company(self, name: str, addr: str) -> bool:
        """Удаление компании по (name, addr) без учёта регистра."""
        with self._lock:
            handle = self._by_name.find(name_key(name, addr))
            if handle is None:
                return False
            company = self._drop(handle)

        logger.debug("company_cancelled", tax_id=company.tax_id, by="name_address")
        return True

    def cancel_company_by_id(self, tax_id: str) -> bool:
        """Удаление компании по tax_id."""
        with self._lock:
            handle = self._by_id.find(tax_id_key(tax_id))
            if handle is None:
                return False
            company = self._drop(handle)

        logger.debug("company_cancelled", tax_id=company.tax_id, by="tax_id")
        return True

    def _drop(self, handle: int) -> Company:
        # Найденная компания даёт ключи для обоих индексов
        company = self._companies.pop(handle)
        self._by_id.remove(company.tax_id)
        self._by_name.remove(company.name_key)
        return company

    # -------------------------------------------------------------------------
    # Счета
    # -------------------------------------------------------------------------

    def invoice(self, name: str, addr: str, amount: int) -> bool:
        """Счёт компании, найденной по (name, addr).

        Raises:
            ValueError: Если amount не беззнаковое целое в пределах конфигурации
        """
        validate_amount(amount, max_value=self.config.max_invoice_amount)
        with self._lock:
            return self._record(self._by_name.find(name_key(name, addr)), amount)

    def invoice_by_id(self, tax_id: str, amount: int) -> bool:
        """Счёт компании, найденной по tax_id.

        Raises:
            ValueError: Если amount не беззнаковое целое в пределах конфигурации
        """
        validate_amount(amount, max_value=self.config.max_invoice_amount)
        with self._lock:
            return self._record(self._by_id.find(tax_id_key(tax_id)), amount)

    def _record(self, handle: Optional[int], amount: int) -> bool:
        if handle is None:
            return False

        company = self._companies[handle]
        income = company.add_income(amount)
        self._history.append(amount)

        logger.debug(
            "invoice_recorded",
            tax_id=company.tax_id,
            amount=amount,
            income=income,
        )
        return True

    # -------------------------------------------------------------------------
    # Аудит
    # -------------------------------------------------------------------------

    def audit(self, name: str, addr: str) -> AuditResult:
        """Накопленный доход компании по (name, addr)."""
        with self._lock:
            return self._audit(self._by_name.find(name_key(name, addr)))

    def audit_by_id(self, tax_id: str) -> AuditResult:
        """Накопленный доход компании по tax_id."""
        with self._lock:
            return self._audit(self._by_id.find(tax_id_key(tax_id)))

    def _audit(self, handle: Optional[int]) -> AuditResult:
        if handle is None:
            return AuditResult(found=False)
        return AuditResult(found=True, income=self._companies[handle].income)

    # -------------------------------------------------------------------------
    # Обход
    # -------------------------------------------------------------------------

    def first_company(self) -> CompanyCursor:
        """Первая компания по (name, address), либо found=False для пустого реестра."""
        with self._lock:
            return self._cursor(self._by_name.first())

    def next_company(self, name: str, addr: str) -> CompanyCursor:
        """Следующая компания строго после (name, addr).

        Пара (name, addr) не обязана быть зарегистрирована: используется
        strict upper bound, поэтому повторный вызов с текущей позицией
        продвигает курсор, а не стоит на месте.
        """
        with self._lock:
            return self._cursor(self._by_name.next_after(name_key(name, addr)))

    def _cursor(self, entry: Optional[Tuple[NameKey, int]]) -> CompanyCursor:
        if entry is None:
            return _NOT_FOUND_CURSOR
        company = self._companies[entry[1]]
        return CompanyCursor(found=True, name=company.name, address=company.address)

    def iter_companies(self) -> Iterator[Tuple[str, str]]:
        """Обход всех компаний через first_company / next_company.

        Между шагами lock не удерживается; изменения реестра во время обхода
        учитываются со следующего шага.
        """
        cursor = self.first_company()
        while cursor.found:
            yield cursor.name, cursor.address
            cursor = self.next_company(cursor.name, cursor.address)

    def companies(self) -> List[Company]:
        """Снапшот живых компаний в порядке (name, address).

        Копии моделей, снятые под lock: изменения реестра после вызова
        на снапшот не влияют.
        """
        with self._lock:
            return [
                self._companies[handle].model_copy()
                for handle in self._by_name.handles()
            ]

    # -------------------------------------------------------------------------
    # Медиана
    # -------------------------------------------------------------------------

    def median_invoice(self) -> int:
        """Медиана всех счетов за всю историю (включая удалённые компании).

        Для чётного количества берётся большее из двух средних значений, 0 если
        счетов ещё не было.
        """
        with self._lock:
            return self._history.median()

    @property
    def invoice_count(self) -> int:
        with self._lock:
            return len(self._history)

    def __len__(self) -> int:
        with self._lock:
            return len(self._companies)
