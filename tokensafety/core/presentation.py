# tokensafety/core/presentation.py
from __future__ import annotations
from typing import Callable, Dict, Optional

from tokensafety.core.protection import (
    FEE_HIGH_MIN,
    get_fee_on_transfer,
    get_token_protection_warning,
)
from tokensafety.core.types import CurrencyInfo, FeeColor, TokenProtectionWarning
from tokensafety.utils.fee_check import format_fee_percent

# key -> display string; the localization layer supplies the real one
Translator = Callable[..., str]

HEADER_TOKEN_NOT_AVAILABLE = "token.safety.blocked.title.tokenNotAvailable"

# One key per variant. NON_DEFAULT points at the "medium" heading even
# though its severity is LOW; keep it that way.
SUBTITLE_KEYS: Dict[TokenProtectionWarning, str] = {
    TokenProtectionWarning.NON_DEFAULT: "token.safety.warning.medium.heading.named",
    TokenProtectionWarning.BLOCKED: "token.safety.warning.blocked.description.named",
    TokenProtectionWarning.FOT_LOW: "token.safety.warning.fotLow.message",
    TokenProtectionWarning.FOT_HIGH: "token.safety.warning.fotHigh.message",
    TokenProtectionWarning.FOT_VERY_HIGH: "token.safety.warning.fotVeryHigh.message",
    TokenProtectionWarning.MALICIOUS_HONEYPOT: "token.safety.warning.honeypot.message",
    TokenProtectionWarning.MALICIOUS_IMPERSONATOR: "token.safety.warning.impersonator.message",
    TokenProtectionWarning.MALICIOUS_GENERAL: "token.safety.warning.malicious.general.message",
    TokenProtectionWarning.SPAM_AIRDROP: "token.safety.warning.spam.message",
}


def identity_translator(key: str, **_params) -> str:
    return key


def get_modal_header_text(currency_info: Optional[CurrencyInfo]) -> Optional[str]:
    if get_token_protection_warning(currency_info) == TokenProtectionWarning.BLOCKED:
        return HEADER_TOKEN_NOT_AVAILABLE
    return None


def get_modal_subtitle_text(currency_info: Optional[CurrencyInfo]) -> Optional[str]:
    warning = get_token_protection_warning(currency_info)
    if warning == TokenProtectionWarning.NONE:
        return None
    return SUBTITLE_KEYS[warning]


def get_fee_color(fee_percent: float) -> FeeColor:
    """Two breakpoints only (0 and 5), coarser than the fee tiers."""
    if fee_percent <= 0:
        return FeeColor.NEUTRAL
    if fee_percent < FEE_HIGH_MIN:
        return FeeColor.WARNING
    return FeeColor.CRITICAL


def get_modal_text_params(currency_info: Optional[CurrencyInfo]) -> Dict[str, str]:
    """Interpolation values for the subtitle keys."""
    currency = currency_info.currency if currency_info is not None else None
    fot = get_fee_on_transfer(currency)
    symbol = (currency.symbol if currency is not None else None) or ""
    return {
        "tokenSymbol": symbol,
        "buyFeePercent": format_fee_percent(fot.buy_fee_percent),
        "sellFeePercent": format_fee_percent(fot.sell_fee_percent),
        "feePercent": format_fee_percent(max(fot.buy_fee_percent, fot.sell_fee_percent)),
    }


def render_modal_text(
    currency_info: Optional[CurrencyInfo],
    t: Optional[Translator] = None,
) -> Dict[str, Optional[str]]:
    t = t or identity_translator
    header_key = get_modal_header_text(currency_info)
    subtitle_key = get_modal_subtitle_text(currency_info)
    params = get_modal_text_params(currency_info)
    return {
        "header": t(header_key, **params) if header_key else None,
        "subtitle": t(subtitle_key, **params) if subtitle_key else None,
    }


__all__ = [
    "Translator",
    "HEADER_TOKEN_NOT_AVAILABLE",
    "SUBTITLE_KEYS",
    "identity_translator",
    "get_modal_header_text",
    "get_modal_subtitle_text",
    "get_fee_color",
    "get_modal_text_params",
    "render_modal_text",
]
