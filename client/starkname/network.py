"""
Naming Contract Selection

Maps a Starknet network (by name or chain id) to the address of the naming
contract deployed there.
"""

from typing import Dict, Optional

from .errors import ResolutionNotSupported


def chain_id_from_name(name: str) -> int:
    """Chain ids are the short-string encoding of their ASCII name."""
    return int.from_bytes(name.encode('ascii'), 'big')


MAINNET = 'mainnet'
SEPOLIA = 'sepolia'

CHAIN_IDS: Dict[str, int] = {
    MAINNET: chain_id_from_name('SN_MAIN'),
    SEPOLIA: chain_id_from_name('SN_SEPOLIA'),
}

NAMING_CONTRACTS: Dict[str, int] = {
    MAINNET: 0x6ac597f8116f886fa1c97a23fa4e08299975ecaf6b598873ca6792b9bbfb678,
    SEPOLIA: 0x0154bc2e1af9260b9e66af0e9c46fc757ff893b3ff6a85718a810baf1474aebf,
}


def network_for_chain_id(chain_id: int) -> str:
    """
    Find the network name for a chain id.

    Raises:
        ResolutionNotSupported: If the chain id is not a known network
    """
    for network, known in CHAIN_IDS.items():
        if known == chain_id:
            return network
    raise ResolutionNotSupported(f"Unknown chain id: {hex(chain_id)}")


def naming_contract(network: Optional[str] = None, chain_id: Optional[int] = None) -> int:
    """
    Select the naming contract address for a network.

    Exactly one of network or chain_id must be given.

    Args:
        network: Network name ('mainnet' or 'sepolia', case-insensitive)
        chain_id: Numeric chain id, e.g. chain_id_from_name('SN_MAIN')

    Returns:
        The naming contract address

    Raises:
        ValueError: If both or neither selector is given
        ResolutionNotSupported: If the network has no naming contract
    """
    if (network is None) == (chain_id is None):
        raise ValueError("Pass exactly one of network or chain_id")

    if chain_id is not None:
        network = network_for_chain_id(chain_id)

    address = NAMING_CONTRACTS.get(network.lower())
    if address is None:
        raise ResolutionNotSupported(f"No naming contract for network '{network}'")
    return address
