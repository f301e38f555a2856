"""
Stark Name Codec Library

This library provides tools for:
- Encoding/decoding domain labels to and from single field elements
- Splitting and joining full '.stark' domains
- Selecting the naming contract for a Starknet network
- Resolving domains and addresses through an injected contract-call provider
"""

from .alphabet import Alphabet, Classified, DEFAULT_ALPHABET, BASIC, EXTENDED
from .encoder import encode, escape_tail, MAX_LABEL_LENGTH
from .decoder import decode, restore_tail, read_switch
from .domain import encode_domain, decode_domain, split_domain
from .errors import (
    UnknownCharacter,
    NamingError,
    ProviderError,
    InvalidContractResult,
    InvalidDomain,
    ResolutionNotSupported,
)
from .felt import FIELD_PRIME, fits_in_field, parse_felt
from .network import naming_contract, chain_id_from_name
from .resolver import ContractCallProvider, Resolver

__all__ = [
    # Alphabet
    'Alphabet',
    'Classified',
    'DEFAULT_ALPHABET',
    'BASIC',
    'EXTENDED',
    # Codec
    'encode',
    'escape_tail',
    'MAX_LABEL_LENGTH',
    'decode',
    'restore_tail',
    'read_switch',
    # Domains
    'encode_domain',
    'decode_domain',
    'split_domain',
    # Errors
    'UnknownCharacter',
    'NamingError',
    'ProviderError',
    'InvalidContractResult',
    'InvalidDomain',
    'ResolutionNotSupported',
    # Field elements
    'FIELD_PRIME',
    'fits_in_field',
    'parse_felt',
    # Resolving
    'naming_contract',
    'chain_id_from_name',
    'ContractCallProvider',
    'Resolver',
]

__version__ = '1.0.0'
