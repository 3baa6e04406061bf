# tokensafety/utils/addr.py
from web3 import Web3

ADDRESS_LENGTH = 42  # 0x + 40 hex


def normalize_evm_address(raw: str, checksum: bool = True) -> str:
    """
    Validate a token address from a provider payload.
    Returns the checksummed form, or the trimmed input when checksum=False.
    """
    s = (raw or "").strip()
    if "..." in s:
        raise ValueError("Ellipses ('...') are not allowed. Provide the full 42-char 0x address.")
    if not s.startswith("0x") or len(s) != ADDRESS_LENGTH:
        raise ValueError("Invalid address: must be 0x-prefixed and 42 characters long (0x + 40 hex).")
    # is_address also rejects mixed-case input with a bad checksum
    if not Web3.is_address(s):
        raise ValueError(f"Invalid address: {s} is not valid hex or fails its checksum.")
    if not checksum:
        return s
    try:
        return Web3.to_checksum_address(s)
    except ValueError as e:
        raise ValueError(f"Invalid address: {e}")
