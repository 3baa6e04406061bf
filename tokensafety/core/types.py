# tokensafety/core/types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class TokenList(str, Enum):
    DEFAULT = "DEFAULT"
    NON_DEFAULT = "NON_DEFAULT"
    BLOCKED = "BLOCKED"


class ProtectionResult(str, Enum):
    BENIGN = "BENIGN"
    SPAM = "SPAM"
    MALICIOUS = "MALICIOUS"
    UNKNOWN = "UNKNOWN"


class AttackType(str, Enum):
    AIRDROP = "AIRDROP"
    IMPERSONATOR = "IMPERSONATOR"
    HIGH_FEES = "HIGH_FEES"
    OTHER = "OTHER"


class TokenProtectionWarning(str, Enum):
    NONE = "NONE"
    NON_DEFAULT = "NON_DEFAULT"
    BLOCKED = "BLOCKED"
    FOT_LOW = "FOT_LOW"
    FOT_HIGH = "FOT_HIGH"
    FOT_VERY_HIGH = "FOT_VERY_HIGH"
    MALICIOUS_HONEYPOT = "MALICIOUS_HONEYPOT"
    MALICIOUS_IMPERSONATOR = "MALICIOUS_IMPERSONATOR"
    MALICIOUS_GENERAL = "MALICIOUS_GENERAL"
    SPAM_AIRDROP = "SPAM_AIRDROP"


class WarningSeverity(str, Enum):
    """Coarse UI tier. BLOCKED stops the action instead of warning about it."""
    NONE = "NONE"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    BLOCKED = "BLOCKED"


class FeeColor(str, Enum):
    # theme tokens, resolved by the presentation layer
    NEUTRAL = "$neutral1"
    WARNING = "$statusWarning"
    CRITICAL = "$statusCritical"


@dataclass(frozen=True)
class NativeCurrency:
    chain_id: int
    symbol: str = "ETH"
    name: str = "Ether"
    decimals: int = 18

    is_native = True
    is_token = False


@dataclass(frozen=True)
class Token:
    chain_id: int
    address: str
    symbol: Optional[str] = None
    name: Optional[str] = None
    decimals: int = 18
    sell_fee_bps: Optional[int] = None  # 0..10000
    buy_fee_bps: Optional[int] = None   # 0..10000

    is_native = False
    is_token = True


Currency = Union[NativeCurrency, Token]


@dataclass(frozen=True)
class SafetyInfo:
    token_list: TokenList = TokenList.DEFAULT
    protection_result: ProtectionResult = ProtectionResult.UNKNOWN
    attack_type: Optional[AttackType] = None


@dataclass(frozen=True)
class CurrencyInfo:
    currency: Optional[Currency]
    safety_info: Optional[SafetyInfo] = None


@dataclass(frozen=True)
class FeeOnTransfer:
    """Buy/sell transfer fees in percent (0..100); 0 when the token reports none."""
    buy_fee_percent: float = 0.0
    sell_fee_percent: float = 0.0


__all__ = [
    "TokenList",
    "ProtectionResult",
    "AttackType",
    "TokenProtectionWarning",
    "WarningSeverity",
    "FeeColor",
    "NativeCurrency",
    "Token",
    "Currency",
    "SafetyInfo",
    "CurrencyInfo",
    "FeeOnTransfer",
]
