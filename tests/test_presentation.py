from __future__ import annotations

from dataclasses import replace

import pytest

from tokensafety.core.presentation import (
    HEADER_TOKEN_NOT_AVAILABLE,
    SUBTITLE_KEYS,
    get_fee_color,
    get_modal_header_text,
    get_modal_subtitle_text,
    get_modal_text_params,
    render_modal_text,
)
from tokensafety.core.types import (
    AttackType,
    FeeColor,
    ProtectionResult,
    TokenList,
    TokenProtectionWarning as W,
)


@pytest.mark.parametrize(
    "fee, color",
    [
        (0, FeeColor.NEUTRAL),
        (0.03, FeeColor.WARNING),
        (4.99, FeeColor.WARNING),
        (5, FeeColor.CRITICAL),
        (10, FeeColor.CRITICAL),
        (85, FeeColor.CRITICAL),
        (100, FeeColor.CRITICAL),
    ],
)
def test_fee_color(fee, color) -> None:
    assert get_fee_color(fee) == color


def test_fee_color_tokens() -> None:
    assert get_fee_color(0).value == "$neutral1"
    assert get_fee_color(1).value == "$statusWarning"
    assert get_fee_color(50).value == "$statusCritical"


def test_header_only_for_blocked(currency_info, make_info) -> None:
    assert get_modal_header_text(currency_info) is None
    assert get_modal_header_text(make_info(token_list=TokenList.NON_DEFAULT)) is None
    assert get_modal_header_text(make_info(token_list=TokenList.BLOCKED)) == "token.safety.blocked.title.tokenNotAvailable"
    assert HEADER_TOKEN_NOT_AVAILABLE == "token.safety.blocked.title.tokenNotAvailable"


def test_subtitle_null_only_for_none(currency_info, native_currency_info) -> None:
    assert get_modal_subtitle_text(currency_info) is None
    assert get_modal_subtitle_text(native_currency_info) is None
    assert get_modal_subtitle_text(None) == "token.safety.warning.medium.heading.named"


def test_non_default_subtitle_keeps_medium_heading(make_info) -> None:
    info = make_info(token_list=TokenList.NON_DEFAULT)
    assert get_modal_subtitle_text(info) == "token.safety.warning.medium.heading.named"


def test_every_warning_but_none_has_its_own_subtitle() -> None:
    assert set(SUBTITLE_KEYS) == set(W) - {W.NONE}
    assert len(set(SUBTITLE_KEYS.values())) == len(SUBTITLE_KEYS)


@pytest.mark.parametrize(
    "overrides, key",
    [
        ({"token_list": TokenList.BLOCKED}, "token.safety.warning.blocked.description.named"),
        ({"protection_result": ProtectionResult.SPAM, "attack_type": AttackType.AIRDROP}, "token.safety.warning.spam.message"),
        ({"protection_result": ProtectionResult.MALICIOUS, "attack_type": AttackType.IMPERSONATOR}, "token.safety.warning.impersonator.message"),
        ({"protection_result": ProtectionResult.MALICIOUS, "attack_type": None}, "token.safety.warning.malicious.general.message"),
        ({"protection_result": ProtectionResult.SPAM, "attack_type": AttackType.HIGH_FEES}, "token.safety.warning.fotVeryHigh.message"),
    ],
)
def test_subtitle_keys_for_verdicts(make_info, overrides, key) -> None:
    assert get_modal_subtitle_text(make_info(**overrides)) == key


@pytest.mark.parametrize(
    "bps, key",
    [
        (300, "token.safety.warning.fotLow.message"),
        (2000, "token.safety.warning.fotHigh.message"),
        (10000, "token.safety.warning.honeypot.message"),
    ],
)
def test_subtitle_keys_for_fees(make_info, bps, key) -> None:
    assert get_modal_subtitle_text(make_info(fees=True, sell=bps, buy=bps)) == key


def test_text_params(currency_info) -> None:
    info = replace(currency_info, currency=replace(currency_info.currency, buy_fee_bps=30, sell_fee_bps=8550))
    assert get_modal_text_params(info) == {
        "tokenSymbol": "UNI",
        "buyFeePercent": "0.3%",
        "sellFeePercent": "85.5%",
        "feePercent": "85.5%",
    }


def test_text_params_without_data() -> None:
    params = get_modal_text_params(None)
    assert params["tokenSymbol"] == ""
    assert params["feePercent"] == "0%"


def test_render_defaults_to_keys(make_info) -> None:
    rendered = render_modal_text(make_info(token_list=TokenList.BLOCKED))
    assert rendered == {
        "header": "token.safety.blocked.title.tokenNotAvailable",
        "subtitle": "token.safety.warning.blocked.description.named",
    }


def test_render_through_translator(make_info) -> None:
    calls = []

    def t(key, **params):
        calls.append((key, params))
        return f"{params['tokenSymbol']} charges {params['feePercent']}"

    rendered = render_modal_text(make_info(fees=True, sell=2000, buy=500), t)
    assert rendered == {"header": None, "subtitle": "UNI charges 20%"}
    assert calls[0][0] == "token.safety.warning.fotHigh.message"


def test_render_clean_token(currency_info) -> None:
    assert render_modal_text(currency_info) == {"header": None, "subtitle": None}
