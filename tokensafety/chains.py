# tokensafety/chains.py
# Purpose: known chains and their native currency, used to fill in natives
# that the data API sends without symbol/name/decimals.

from tokensafety.core.types import NativeCurrency

DEFAULT_CHAIN_ID = 1

CHAINS = {
    1: {"name": "eth", "native": {"symbol": "ETH", "name": "Ether", "decimals": 18}},
    10: {"name": "optimism", "native": {"symbol": "ETH", "name": "Ether", "decimals": 18}},
    56: {"name": "bsc", "native": {"symbol": "BNB", "name": "BNB", "decimals": 18}},
    137: {"name": "polygon", "native": {"symbol": "POL", "name": "Polygon Ecosystem Token", "decimals": 18}},
    8453: {"name": "base", "native": {"symbol": "ETH", "name": "Ether", "decimals": 18}},
    42161: {"name": "arbitrum", "native": {"symbol": "ETH", "name": "Ether", "decimals": 18}},
    43114: {"name": "avalanche", "native": {"symbol": "AVAX", "name": "Avalanche", "decimals": 18}},
}

# friendly names accepted wherever a chain id is expected
CHAIN_ALIASES = {cfg["name"]: cid for cid, cfg in CHAINS.items()}
CHAIN_ALIASES.update({"ethereum": 1, "mainnet": 1, "arbitrum-one": 42161})


def resolve_chain_id(raw) -> int:
    if raw is None or raw == "":
        return DEFAULT_CHAIN_ID
    if isinstance(raw, bool):
        raise ValueError(f"Invalid chainId: {raw!r}")
    if isinstance(raw, int):
        return raw
    s = str(raw).strip().lower()
    if s in CHAIN_ALIASES:
        return CHAIN_ALIASES[s]
    try:
        return int(s, 0)
    except ValueError:
        raise ValueError(f"Unknown chain: {raw}")


def get_native_currency(chain_id: int, symbol=None, name=None, decimals=None) -> NativeCurrency:
    """
    Native currency for a chain; explicit fields win over the registry defaults.
    Unknown chains need at least an explicit symbol.
    """
    if chain_id in CHAINS:
        native = CHAINS[chain_id]["native"]
    elif symbol:
        native = {"symbol": symbol, "name": name or symbol, "decimals": 18}
    else:
        raise ValueError(f"Unknown chain: {chain_id} (pass symbol for its native currency)")
    return NativeCurrency(
        chain_id=chain_id,
        symbol=symbol or native["symbol"],
        name=name or native["name"],
        decimals=int(decimals) if decimals is not None else native["decimals"],
    )

__all__ = ["DEFAULT_CHAIN_ID", "CHAINS", "CHAIN_ALIASES", "resolve_chain_id", "get_native_currency"]
