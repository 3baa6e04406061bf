# tokensafety/core/severity.py
from __future__ import annotations
from typing import Optional

from tokensafety.core.protection import get_token_protection_warning
from tokensafety.core.types import CurrencyInfo, TokenProtectionWarning, WarningSeverity

_SEVERITY_BY_WARNING = {
    TokenProtectionWarning.NONE: WarningSeverity.NONE,
    TokenProtectionWarning.NON_DEFAULT: WarningSeverity.LOW,
    TokenProtectionWarning.FOT_LOW: WarningSeverity.MEDIUM,
    TokenProtectionWarning.SPAM_AIRDROP: WarningSeverity.MEDIUM,
    TokenProtectionWarning.FOT_HIGH: WarningSeverity.HIGH,
    TokenProtectionWarning.FOT_VERY_HIGH: WarningSeverity.HIGH,
    TokenProtectionWarning.MALICIOUS_HONEYPOT: WarningSeverity.HIGH,
    TokenProtectionWarning.MALICIOUS_IMPERSONATOR: WarningSeverity.HIGH,
    TokenProtectionWarning.MALICIOUS_GENERAL: WarningSeverity.HIGH,
    TokenProtectionWarning.BLOCKED: WarningSeverity.BLOCKED,
}


def get_severity_from_token_protection_warning(warning: TokenProtectionWarning) -> WarningSeverity:
    return _SEVERITY_BY_WARNING[warning]


def get_token_warning_severity(currency_info: Optional[CurrencyInfo]) -> WarningSeverity:
    # No currency at all is the least severe tier, unlike the classifier
    # which reports NON_DEFAULT for it. Missing safety info still lands on LOW.
    if currency_info is None:
        return WarningSeverity.NONE
    return get_severity_from_token_protection_warning(get_token_protection_warning(currency_info))


def get_should_have_combined_plural_treatment(
    currency_info0: Optional[CurrencyInfo],
    currency_info1: Optional[CurrencyInfo] = None,
) -> bool:
    """Two LOW tokens (e.g. both sides of a swap) can share one plural warning."""
    if currency_info0 is None or currency_info1 is None:
        return False
    return (
        get_token_warning_severity(currency_info0) == WarningSeverity.LOW
        and get_token_warning_severity(currency_info1) == WarningSeverity.LOW
    )


__all__ = [
    "get_severity_from_token_protection_warning",
    "get_token_warning_severity",
    "get_should_have_combined_plural_treatment",
]
