# tokensafety/utils/payload.py
from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Any, Dict, Optional, Type, TypeVar

from tokensafety.chains import get_native_currency, resolve_chain_id
from tokensafety.config import checksum_addresses
from tokensafety.core.types import (
    AttackType,
    Currency,
    CurrencyInfo,
    ProtectionResult,
    SafetyInfo,
    Token,
    TokenList,
)
from tokensafety.utils.addr import normalize_evm_address
from tokensafety.utils.fee_check import coerce_fee_bps

logger = logging.getLogger("PAYLOAD")

E = TypeVar("E", bound=Enum)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _enum_name(raw: str) -> str:
    # "NonDefault" / "non-default" / "NON_DEFAULT" -> "NON_DEFAULT"
    s = _CAMEL_BOUNDARY.sub("_", raw.strip())
    return re.sub(r"[\s\-]+", "_", s).upper()


def parse_enum(enum_cls: Type[E], raw: Any, field: str) -> E:
    if isinstance(raw, enum_cls):
        return raw
    if not isinstance(raw, str) or not raw.strip():
        raise ValueError(f"{field}: expected one of {[m.name for m in enum_cls]}, got {raw!r}.")
    name = _enum_name(raw)
    try:
        return enum_cls[name]
    except KeyError:
        raise ValueError(f"{field}: unknown value '{raw}' (expected one of {[m.name for m in enum_cls]}).")


def _get(d: Dict[str, Any], camel: str, snake: str, default: Any = None) -> Any:
    if camel in d:
        return d[camel]
    return d.get(snake, default)


def parse_safety_info(raw: Any) -> Optional[SafetyInfo]:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError("safetyInfo must be an object.")

    token_list = _get(raw, "tokenList", "token_list")
    protection = _get(raw, "protectionResult", "protection_result")
    attack = _get(raw, "attackType", "attack_type")

    return SafetyInfo(
        token_list=parse_enum(TokenList, token_list, "tokenList") if token_list is not None else TokenList.DEFAULT,
        protection_result=(
            parse_enum(ProtectionResult, protection, "protectionResult")
            if protection is not None else ProtectionResult.UNKNOWN
        ),
        attack_type=parse_enum(AttackType, attack, "attackType") if attack is not None else None,
    )


def parse_currency(raw: Any) -> Optional[Currency]:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError("currency must be an object.")

    chain_id = resolve_chain_id(_get(raw, "chainId", "chain_id"))
    address = _get(raw, "address", "address")
    symbol = raw.get("symbol")
    name = raw.get("name")
    decimals = raw.get("decimals")

    is_native = _get(raw, "isNative", "is_native")
    if is_native is not None and not isinstance(is_native, bool):
        raise ValueError(f"isNative: expected true/false, got {is_native!r}.")
    # an explicit isNative=false never falls back to the native exemption
    if is_native or (is_native is None and not address):
        return get_native_currency(chain_id, symbol=symbol, name=name, decimals=decimals)
    if not address:
        raise ValueError("currency.address is required for tokens")

    return Token(
        chain_id=chain_id,
        address=normalize_evm_address(str(address), checksum=checksum_addresses()),
        symbol=symbol,
        name=name,
        decimals=int(decimals) if decimals is not None else 18,
        sell_fee_bps=coerce_fee_bps(_get(raw, "sellFeeBps", "sell_fee_bps"), "sellFeeBps"),
        buy_fee_bps=coerce_fee_bps(_get(raw, "buyFeeBps", "buy_fee_bps"), "buyFeeBps"),
    )


def parse_currency_info(payload: Any) -> Optional[CurrencyInfo]:
    """
    Provider JSON -> CurrencyInfo.

    None stays None (no data at all is a meaningful state for the
    severity mapper). Raises ValueError on malformed input.
    """
    if payload is None:
        return None
    if not isinstance(payload, dict):
        raise ValueError(f"Expected a JSON object, got {type(payload).__name__}.")

    currency = parse_currency(payload.get("currency"))
    safety = parse_safety_info(_get(payload, "safetyInfo", "safety_info"))
    logger.debug(
        "parsed currency=%s safety=%s",
        getattr(currency, "symbol", None),
        safety.token_list.name if safety else None,
    )
    return CurrencyInfo(currency=currency, safety_info=safety)


__all__ = ["parse_enum", "parse_safety_info", "parse_currency", "parse_currency_info"]
