# tokensafety/core/analyze.py
from __future__ import annotations

from typing import Any, Dict, Optional

from tokensafety.core.presentation import (
    Translator,
    get_fee_color,
    get_modal_header_text,
    get_modal_subtitle_text,
    get_modal_text_params,
    render_modal_text,
)
from tokensafety.core.protection import (
    get_fee_on_transfer,
    get_is_fee_related_warning,
    get_token_fee_percent,
    get_token_protection_warning,
)
from tokensafety.core.severity import get_severity_from_token_protection_warning, get_token_warning_severity
from tokensafety.core.types import CurrencyInfo, WarningSeverity
from tokensafety.utils.payload import parse_currency_info


def analyze_currency_info(currency_info: Optional[CurrencyInfo], t: Optional[Translator] = None) -> Dict[str, Any]:
    """Run every classifier over one CurrencyInfo and flatten the result into a JSON-able dict."""
    currency = currency_info.currency if currency_info is not None else None

    warning = get_token_protection_warning(currency_info)
    severity = get_token_warning_severity(currency_info)
    fot = get_fee_on_transfer(currency)
    fee_percent = get_token_fee_percent(currency)

    return {
        "chain_id": getattr(currency, "chain_id", None),
        "address": getattr(currency, "address", None),
        "symbol": getattr(currency, "symbol", None),
        "is_native": bool(currency is not None and currency.is_native),
        "has_safety_info": bool(currency_info is not None and currency_info.safety_info is not None),
        "warning": warning.value,
        "warning_severity": get_severity_from_token_protection_warning(warning).value,
        "severity": severity.value,
        "blocked": severity == WarningSeverity.BLOCKED,
        "is_fee_related": get_is_fee_related_warning(warning),
        "fee_percent": fee_percent,
        "fees_percent": {"buy": fot.buy_fee_percent, "sell": fot.sell_fee_percent},
        "fee_color": get_fee_color(fee_percent or 0.0).value,
        "header_text": get_modal_header_text(currency_info),
        "subtitle_text": get_modal_subtitle_text(currency_info),
        "text_params": get_modal_text_params(currency_info),
        "rendered": render_modal_text(currency_info, t),
    }


def analyze_payload(payload: Any, t: Optional[Translator] = None) -> Dict[str, Any]:
    """Provider JSON in, report out. Raises ValueError on malformed payloads."""
    return analyze_currency_info(parse_currency_info(payload), t)


__all__ = ["analyze_currency_info", "analyze_payload"]
