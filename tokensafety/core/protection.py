# tokensafety/core/protection.py
from __future__ import annotations
from typing import Optional

from tokensafety.core.types import (
    AttackType,
    Currency,
    CurrencyInfo,
    FeeOnTransfer,
    ProtectionResult,
    TokenList,
    TokenProtectionWarning,
)
from tokensafety.utils.fee_check import bps_to_percent, max_fee_percent

FEE_LOW_MIN = 0.0
FEE_HIGH_MIN = 5.0
FEE_VERY_HIGH_MIN = 80.0
FEE_HONEYPOT = 100.0

FEE_RELATED_WARNINGS = frozenset({
    TokenProtectionWarning.FOT_LOW,
    TokenProtectionWarning.FOT_HIGH,
    TokenProtectionWarning.FOT_VERY_HIGH,
    TokenProtectionWarning.MALICIOUS_HONEYPOT,
})


def get_fee_warning(fee_percent: float) -> TokenProtectionWarning:
    """Tier for the higher of buy/sell fee, given in percent (0..100)."""
    if fee_percent <= FEE_LOW_MIN:
        return TokenProtectionWarning.NONE
    if fee_percent < FEE_HIGH_MIN:
        return TokenProtectionWarning.FOT_LOW
    if fee_percent < FEE_VERY_HIGH_MIN:
        return TokenProtectionWarning.FOT_HIGH
    if fee_percent < FEE_HONEYPOT:
        return TokenProtectionWarning.FOT_VERY_HIGH
    return TokenProtectionWarning.MALICIOUS_HONEYPOT


def get_is_fee_related_warning(warning: Optional[TokenProtectionWarning]) -> bool:
    return warning in FEE_RELATED_WARNINGS


def get_fee_on_transfer(currency: Optional[Currency]) -> FeeOnTransfer:
    if currency is None or not currency.is_token:
        return FeeOnTransfer()
    return FeeOnTransfer(
        buy_fee_percent=bps_to_percent(currency.buy_fee_bps or 0),
        sell_fee_percent=bps_to_percent(currency.sell_fee_bps or 0),
    )


def get_token_fee_percent(currency: Optional[Currency]) -> Optional[float]:
    """max(sell, buy) fee in percent, or None for natives and tokens without fee data."""
    if currency is None or not currency.is_token:
        return None
    return max_fee_percent(currency.sell_fee_bps, currency.buy_fee_bps)


def get_token_protection_warning(currency_info: Optional[CurrencyInfo]) -> TokenProtectionWarning:
    """
    Resolve token + safety metadata into a single warning.

    Rules are checked in priority order and the first match wins:
      missing data -> NON_DEFAULT, native -> NONE, list status,
      attack verdicts, unknown verdict -> NONE, then fee tiers.
    """
    if currency_info is None or currency_info.currency is None or currency_info.safety_info is None:
        return TokenProtectionWarning.NON_DEFAULT

    currency = currency_info.currency
    safety = currency_info.safety_info

    if currency.is_native:
        return TokenProtectionWarning.NONE

    if safety.token_list == TokenList.BLOCKED:
        return TokenProtectionWarning.BLOCKED
    if safety.token_list == TokenList.NON_DEFAULT:
        return TokenProtectionWarning.NON_DEFAULT

    result = safety.protection_result
    attack = safety.attack_type

    if result == ProtectionResult.MALICIOUS and attack == AttackType.IMPERSONATOR:
        return TokenProtectionWarning.MALICIOUS_IMPERSONATOR
    if result == ProtectionResult.SPAM and attack == AttackType.AIRDROP:
        return TokenProtectionWarning.SPAM_AIRDROP
    if result == ProtectionResult.MALICIOUS and (attack is None or attack == AttackType.OTHER):
        return TokenProtectionWarning.MALICIOUS_GENERAL
    # upstream HIGH_FEES verdict wins over the token's own fee fields
    if attack == AttackType.HIGH_FEES and result in (ProtectionResult.SPAM, ProtectionResult.MALICIOUS):
        return TokenProtectionWarning.FOT_VERY_HIGH

    if result == ProtectionResult.UNKNOWN:
        return TokenProtectionWarning.NONE

    fee_percent = get_token_fee_percent(currency)
    if fee_percent is not None:
        return get_fee_warning(fee_percent)

    return TokenProtectionWarning.NONE


__all__ = [
    "get_fee_warning",
    "get_is_fee_related_warning",
    "get_fee_on_transfer",
    "get_token_fee_percent",
    "get_token_protection_warning",
]
