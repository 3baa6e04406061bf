from __future__ import annotations

from dataclasses import replace

import pytest

from tokensafety.core.types import (
    AttackType,
    CurrencyInfo,
    NativeCurrency,
    ProtectionResult,
    SafetyInfo,
    Token,
    TokenList,
)

UNI_ADDRESS = "0x1f9840a85d5af5bf1d1762f925bdaddc4201f984"


@pytest.fixture
def token() -> Token:
    return Token(chain_id=1, address=UNI_ADDRESS, symbol="UNI", name="Uniswap", sell_fee_bps=0, buy_fee_bps=0)


@pytest.fixture
def safety_info() -> SafetyInfo:
    return SafetyInfo(
        token_list=TokenList.DEFAULT,
        protection_result=ProtectionResult.BENIGN,
        attack_type=AttackType.OTHER,
    )


@pytest.fixture
def currency_info(token, safety_info) -> CurrencyInfo:
    return CurrencyInfo(currency=token, safety_info=safety_info)


@pytest.fixture
def native_currency_info(safety_info) -> CurrencyInfo:
    return CurrencyInfo(currency=NativeCurrency(chain_id=1), safety_info=safety_info)


@pytest.fixture
def make_info(currency_info):
    """Copy of the default token info with safety/fee fields overridden."""
    def _make(sell=None, buy=None, fees=False, **safety_overrides) -> CurrencyInfo:
        currency = currency_info.currency
        if fees:
            currency = replace(currency, sell_fee_bps=sell, buy_fee_bps=buy)
        safety = replace(currency_info.safety_info, **safety_overrides)
        return CurrencyInfo(currency=currency, safety_info=safety)
    return _make


@pytest.fixture
def payload() -> dict:
    return {
        "currency": {
            "isNative": False,
            "chainId": 1,
            "address": UNI_ADDRESS,
            "symbol": "UNI",
            "name": "Uniswap",
            "decimals": 18,
            "sellFeeBps": 0,
            "buyFeeBps": 0,
        },
        "safetyInfo": {
            "tokenList": "DEFAULT",
            "protectionResult": "BENIGN",
            "attackType": "OTHER",
        },
    }
