"""VAT Register — реестр плательщиков НДС.

- Регистрация / удаление компаний по tax_id или (name, address)
- Накопление дохода по счетам, аудит
- Курсорный обход по (name, address) без учёта регистра
- Медиана всех счетов за историю реестра
"""

from .vat_register import (
    AuditResult,
    CompanyCursor,
    RegisterConfig,
    VATRegister,
)

__all__ = [
    "VATRegister",
    "RegisterConfig",
    "AuditResult",
    "CompanyCursor",
]
