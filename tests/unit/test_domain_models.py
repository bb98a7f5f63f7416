"""
Тесты для доменной модели Company и регистронезависимых ключей

Проверяет:
1. ASCII case folding (только A-Z)
2. Ключ сортировки (name, address)
3. Immutability идентификационных полей
4. Валидацию дохода (ge=0)
5. Сериализацию
"""

import pytest
from pydantic import ValidationError

from src.core.domain import Company, ascii_lower, name_key


# =============================================================================
# CASE FOLDING
# =============================================================================


class TestAsciiLower:
    """Тесты для ascii_lower"""

    def test_ascii_letters_lowered(self) -> None:
        assert ascii_lower("ACME Kolejni") == "acme kolejni"
        assert ascii_lower("aCmE") == "acme"

    def test_non_ascii_unchanged(self) -> None:
        """Не-ASCII символы не сворачиваются (в отличие от str.lower)"""
        assert ascii_lower("ŠKODA") == "Škoda"
        assert ascii_lower("ÄÖÜ") == "ÄÖÜ"

    def test_digits_and_punctuation_unchanged(self) -> None:
        assert ascii_lower("666/666-X") == "666/666-x"


class TestNameKey:
    """Тесты ключа (name, address)"""

    def test_case_variants_equal(self) -> None:
        assert name_key("ACME", "Kolejni") == name_key("aCmE", "KoLeJnI")

    def test_name_compared_before_address(self) -> None:
        assert name_key("ACME", "Zlin") < name_key("beta", "Ameria")
        assert name_key("acme", "Kolejni") < name_key("ACME", "Thakurova")


# =============================================================================
# COMPANY MODEL
# =============================================================================


@pytest.fixture
def company() -> Company:
    return Company(name="ACME", address="Kolejni", tax_id="666/666")


class TestCompany:
    """Тесты модели Company"""

    def test_defaults(self, company: Company) -> None:
        assert company.income == 0
        assert company.name_key == ("acme", "kolejni")

    def test_stored_strings_not_modified(self, company: Company) -> None:
        """Исходный регистр сохраняется"""
        assert company.name == "ACME"
        assert company.address == "Kolejni"

    @pytest.mark.parametrize("field", ["name", "address", "tax_id"])
    def test_identity_fields_frozen(self, company: Company, field: str) -> None:
        with pytest.raises(ValidationError):
            setattr(company, field, "changed")

    def test_add_income_accumulates(self, company: Company) -> None:
        assert company.add_income(2000) == 2000
        assert company.add_income(3000) == 5000
        assert company.income == 5000

    def test_negative_income_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Company(name="ACME", address="Kolejni", tax_id="1", income=-1)

    def test_non_string_tax_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Company(name="ACME", address="Kolejni", tax_id=666)

    def test_empty_strings_allowed(self) -> None:
        """Пустые строки допустимы как ключи"""
        c = Company(name="", address="", tax_id="")
        assert c.name_key == ("", "")

    def test_serialization(self, company: Company) -> None:
        company.add_income(100)
        data = company.model_dump()
        assert data == {
            "name": "ACME",
            "address": "Kolejni",
            "tax_id": "666/666",
            "income": 100,
        }
        assert Company.model_validate_json(company.model_dump_json()) == company
