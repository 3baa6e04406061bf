from __future__ import annotations

from dataclasses import replace

import pytest

from tokensafety.core.protection import get_token_protection_warning
from tokensafety.core.severity import (
    get_severity_from_token_protection_warning,
    get_should_have_combined_plural_treatment,
    get_token_warning_severity,
)
from tokensafety.core.types import (
    AttackType,
    ProtectionResult,
    TokenList,
    TokenProtectionWarning as W,
    WarningSeverity as S,
)


def test_absent_currency_info_differs_between_classifier_and_severity() -> None:
    assert get_token_protection_warning(None) == W.NON_DEFAULT
    assert get_token_warning_severity(None) == S.NONE


def test_missing_safety_info_is_low(currency_info) -> None:
    assert get_token_warning_severity(replace(currency_info, safety_info=None)) == S.LOW


def test_default_and_native_are_none(currency_info, native_currency_info) -> None:
    assert get_token_warning_severity(currency_info) == S.NONE
    assert get_token_warning_severity(native_currency_info) == S.NONE


@pytest.mark.parametrize(
    "overrides, expected",
    [
        ({"token_list": TokenList.NON_DEFAULT}, S.LOW),
        ({"protection_result": ProtectionResult.SPAM, "attack_type": AttackType.AIRDROP}, S.MEDIUM),
        ({"protection_result": ProtectionResult.MALICIOUS, "attack_type": AttackType.IMPERSONATOR}, S.HIGH),
        ({"protection_result": ProtectionResult.MALICIOUS, "attack_type": AttackType.OTHER}, S.HIGH),
        ({"token_list": TokenList.BLOCKED}, S.BLOCKED),
    ],
)
def test_severity_from_safety_signals(make_info, overrides, expected) -> None:
    assert get_token_warning_severity(make_info(**overrides)) == expected


def test_severity_from_fees(make_info) -> None:
    assert get_token_warning_severity(make_info(fees=True, sell=100, buy=100)) == S.MEDIUM
    assert get_token_warning_severity(make_info(fees=True, sell=8100, buy=8100)) == S.HIGH


def test_severity_table_covers_every_warning() -> None:
    expected = {
        W.NONE: S.NONE,
        W.NON_DEFAULT: S.LOW,
        W.FOT_LOW: S.MEDIUM,
        W.SPAM_AIRDROP: S.MEDIUM,
        W.FOT_HIGH: S.HIGH,
        W.FOT_VERY_HIGH: S.HIGH,
        W.MALICIOUS_HONEYPOT: S.HIGH,
        W.MALICIOUS_IMPERSONATOR: S.HIGH,
        W.MALICIOUS_GENERAL: S.HIGH,
        W.BLOCKED: S.BLOCKED,
    }
    assert {w: get_severity_from_token_protection_warning(w) for w in W} == expected


class TestCombinedPluralTreatment:
    def test_single_token_is_never_combined(self, currency_info) -> None:
        assert get_should_have_combined_plural_treatment(currency_info) is False

    def test_two_low_tokens_are_combined(self, make_info) -> None:
        low = make_info(token_list=TokenList.NON_DEFAULT)
        assert get_should_have_combined_plural_treatment(low, low) is True

    def test_missing_safety_info_counts_as_low(self, currency_info, make_info) -> None:
        no_safety = replace(currency_info, safety_info=None)
        low = make_info(token_list=TokenList.NON_DEFAULT)
        assert get_should_have_combined_plural_treatment(no_safety, low) is True

    def test_absent_partner_is_not_combined(self, make_info) -> None:
        low = make_info(token_list=TokenList.NON_DEFAULT)
        assert get_should_have_combined_plural_treatment(low, None) is False
        assert get_should_have_combined_plural_treatment(None, low) is False

    def test_low_and_high_are_not_combined(self, make_info) -> None:
        low = make_info(token_list=TokenList.NON_DEFAULT)
        high = make_info(protection_result=ProtectionResult.MALICIOUS)
        assert get_should_have_combined_plural_treatment(low, high) is False

    def test_two_clean_tokens_are_not_combined(self, currency_info) -> None:
        assert get_should_have_combined_plural_treatment(currency_info, currency_info) is False
