"""
Company — Модель зарегистрированной компании

Pydantic модель плательщика НДС в реестре.
Идентификационные поля (tax_id, name, address) неизменяемы после создания,
мутирует только накопленный доход (income) через выставление счетов.

Порядок по имени + адресу регистронезависимый (ASCII lowering),
порядок по tax_id использует точное сравнение.
"""

from typing import Final, Tuple

from pydantic import BaseModel, Field, validate_call


# =============================================================================
# CASE FOLDING
# =============================================================================
# Только ASCII A-Z → a-z, остальные символы сравниваются как есть
_ASCII_LOWER: Final[dict] = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

NameKey = Tuple[str, str]


def ascii_lower(text: str) -> str:
    """
    Перевод строки в нижний регистр по ASCII-семантике.

    В отличие от str.lower() не трогает не-ASCII символы
    ('Ž' остаётся 'Ž'), поэтому порядок детерминирован и не зависит от Unicode
    case mapping.

    Args:
        text: Исходная строка

    Returns:
        Строка с A-Z, заменёнными на a-z
    """
    return text.translate(_ASCII_LOWER)


@validate_call
def name_key(name: str, address: str) -> NameKey:
    """
    Ключ сортировки (name, address) без учёта регистра.

    Сначала сравнивается имя, при равенстве адрес.
    Аргументы проверяются так же, как поля Company (ValidationError для не-строк).
    """
    return ascii_lower(name), ascii_lower(address)


@validate_call
def tax_id_key(tax_id: str) -> str:
    """Ключ индекса по tax_id: точное значение, без свёртки регистра."""
    return tax_id


# =============================================================================
# COMPANY MODEL
# =============================================================================


class Company(BaseModel):
    """
    Компания в реестре.

    Идентификация задаётся двумя независимыми ключами:
    - tax_id (точное сравнение)
    - (name, address) (регистронезависимое сравнение)

    Оба ключа frozen: «переименование» возможно только через
    cancel + повторную регистрацию.
    """

    # Идентификация
    name: str = Field(..., frozen=True, description="Название компании")
    address: str = Field(..., frozen=True, description="Адрес компании")
    tax_id: str = Field(..., frozen=True, description="Налоговый идентификатор (DIČ)")

    # Накопленный доход (сумма всех счетов)
    income: int = Field(default=0, ge=0, description="Сумма всех выставленных счетов")

    model_config = {"validate_assignment": True}

    @property
    def name_key(self) -> NameKey:
        """Регистронезависимый ключ (name, address)."""
        return name_key(self.name, self.address)

    def add_income(self, amount: int) -> int:
        """
        Начисление дохода по счёту.

        Args:
            amount: Сумма счёта (уже провалидирована вызывающим кодом)

        Returns:
            Новый накопленный доход
        """
        self.income = self.income + amount
        return self.income
