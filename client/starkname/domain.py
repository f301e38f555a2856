"""
Domain Helpers for the Stark Name Codec

Turns full '.stark' domains into lists of encoded labels and back. Names are
parsed with dnspython so the usual DNS rules apply (no empty labels, labels
of at most 63 UTF-8 octets, case-insensitive suffix match, optional trailing
dot). Labels reach the codec exactly as written.
"""

from typing import Iterable, List

import dns.exception
import dns.name

from .decoder import decode
from .encoder import encode
from .errors import InvalidDomain, UnknownCharacter


STARK_SUFFIX = 'stark'
STARK_ORIGIN = dns.name.from_text(STARK_SUFFIX)


class VerbatimCodec(dns.name.IDNACodec):
    """
    Label codec that keeps the caller's text as written.

    Labels are stored as their UTF-8 octets: no nameprep, no case folding
    and no punycode in either direction, so the codec sees exactly the
    characters that were typed.
    """

    def encode(self, label: str) -> bytes:
        return label.encode('utf-8')

    def decode(self, label: bytes) -> str:
        return label.decode('utf-8')


VERBATIM = VerbatimCodec()


def split_domain(domain: str) -> List[str]:
    """
    Split a '.stark' domain into its labels, suffix removed.

    Labels are returned verbatim. dnspython handles escapes, the empty
    label check and the 63-octet (UTF-8) label limit.

    Args:
        domain: Domain such as 'sub.fricoben.stark' (trailing dot optional)

    Returns:
        Labels in written order, e.g. ['sub', 'fricoben']

    Raises:
        InvalidDomain: If the name is malformed or not under .stark

    Example:
        >>> split_domain('sub.fricoben.stark')
        ['sub', 'fricoben']
    """
    if not domain:
        raise InvalidDomain("Empty domain")

    try:
        name = dns.name.from_unicode(domain, idna_codec=VERBATIM)
    except (dns.exception.DNSException, UnicodeError) as e:
        raise InvalidDomain(f"Malformed domain '{domain}': {e}") from e

    if not name.is_subdomain(STARK_ORIGIN) or name == STARK_ORIGIN:
        raise InvalidDomain(f"Not a .stark domain: '{domain}'")

    relative = name.relativize(STARK_ORIGIN)
    return [VERBATIM.decode(label) for label in relative.labels]


def encode_domain(domain: str) -> List[int]:
    """
    Encode every label of a '.stark' domain.

    Args:
        domain: Domain such as 'fricoben.stark'

    Returns:
        Encoded labels in written order

    Raises:
        InvalidDomain: If the domain is malformed or a label contains a
            character outside the alphabet (the UnknownCharacter is chained)

    Example:
        >>> encode_domain('fricoben.stark')
        [1499554868251]
    """
    encoded = []
    for label in split_domain(domain):
        try:
            encoded.append(encode(label))
        except UnknownCharacter as e:
            raise InvalidDomain(f"Invalid label '{label}' in '{domain}': {e}") from e
    return encoded


def decode_domain(values: Iterable[int]) -> str:
    """
    Decode encoded labels and join them into a '.stark' domain.

    Args:
        values: Encoded labels in written order

    Returns:
        The domain, or '' when there are no labels or every label is empty.
        An empty label among non-empty ones is joined as-is; the resolver
        rejects such contract results before decoding.

    Example:
        >>> decode_domain([1499554868251])
        'fricoben.stark'
    """
    labels = [decode(value) for value in values]
    if not any(labels):
        return ''
    return '.'.join(labels + [STARK_SUFFIX])
