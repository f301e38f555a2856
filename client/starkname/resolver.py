"""
Stark Name Resolver

Looks up the address owning a '.stark' domain and the domain pointed to by
an address, through a read-only contract-call provider supplied by the
caller. The resolver itself performs no I/O; transport, retries and
cancellation are the provider's concern.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from .domain import decode_domain, encode_domain
from .errors import InvalidContractResult, InvalidDomain, NamingError, ProviderError
from .felt import fits_in_field
from .network import naming_contract


DOMAIN_TO_ADDRESS = 'domain_to_address'
ADDRESS_TO_DOMAIN = 'address_to_domain'


def _is_field_value(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and fits_in_field(value)


class ContractCallProvider(ABC):
    """Read-only access to contract view functions."""

    @abstractmethod
    def call(
        self,
        contract_address: int,
        entrypoint: str,
        calldata: Sequence[int]
    ) -> List[int]:
        """
        Call a view function and return its raw result.

        Args:
            contract_address: Address of the contract to call
            entrypoint: Function name, e.g. 'domain_to_address'
            calldata: Flattened integer arguments

        Returns:
            The flattened integer result
        """


class Resolver:
    """
    Domain <-> address lookups against a naming contract.

    Args:
        provider: The contract-call provider to issue calls through
        contract_address: Naming contract address; takes precedence
        network: Network name used to pick the contract when no address
            is given (default 'mainnet')
    """

    def __init__(
        self,
        provider: ContractCallProvider,
        contract_address: Optional[int] = None,
        network: Optional[str] = None
    ):
        if contract_address is None:
            contract_address = naming_contract(network=network or 'mainnet')
        self.provider = provider
        self.contract_address = contract_address

    def _call(self, entrypoint: str, calldata: List[int]) -> List[int]:
        try:
            result = self.provider.call(self.contract_address, entrypoint, calldata)
        except NamingError:
            raise
        except Exception as e:
            raise ProviderError(f"{entrypoint} call failed: {e}") from e

        if not isinstance(result, (list, tuple)):
            raise InvalidContractResult(
                f"{entrypoint} returned {type(result).__name__}, expected a list"
            )
        if not all(_is_field_value(v) for v in result):
            raise InvalidContractResult(f"{entrypoint} returned non-field values: {result!r}")
        return list(result)

    def domain_to_address(self, domain: str) -> int:
        """
        Resolve a domain to the address it points to.

        Args:
            domain: Domain such as 'fricoben.stark'

        Returns:
            The address

        Raises:
            InvalidDomain: If the domain cannot be encoded or is not registered
            InvalidContractResult: If the contract result is empty
            ProviderError: If the call itself fails
        """
        encoded = encode_domain(domain)
        for value in encoded:
            if not fits_in_field(value):
                raise InvalidDomain(f"Label too long for one field element in '{domain}'")

        result = self._call(DOMAIN_TO_ADDRESS, [len(encoded)] + encoded)
        if not result:
            raise InvalidContractResult(f"{DOMAIN_TO_ADDRESS} returned no value")

        address = result[0]
        if address == 0:
            raise InvalidDomain(f"Domain not registered: '{domain}'")
        return address

    def address_to_domain(self, address: int) -> str:
        """
        Resolve an address to its main domain.

        The contract answers with a length-prefixed list of encoded labels.

        Args:
            address: Account address

        Returns:
            The domain, or '' when the address has none

        Raises:
            InvalidContractResult: If the result is not length-prefixed or
                contains an empty label
            ProviderError: If the call itself fails
        """
        result = self._call(ADDRESS_TO_DOMAIN, [address])
        if not result or result[0] != len(result) - 1:
            raise InvalidContractResult(
                f"{ADDRESS_TO_DOMAIN} returned a malformed label list: {result!r}"
            )

        labels = result[1:]
        if 0 in labels:
            raise InvalidContractResult(
                f"{ADDRESS_TO_DOMAIN} returned an empty label: {result!r}"
            )
        return decode_domain(labels)
