"""
Unit tests for the domain module.

Tests splitting of .stark domains and whole-domain encoding/decoding.
"""

import pytest
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from starkname.domain import split_domain, encode_domain, decode_domain
from starkname.encoder import encode
from starkname.errors import InvalidDomain, UnknownCharacter, NamingError


class TestSplitDomain:
    """Tests for split_domain function."""

    def test_single_label(self):
        assert split_domain('fricoben.stark') == ['fricoben']

    def test_subdomain_order(self):
        """Labels come back in written order."""
        assert split_domain('sub.fricoben.stark') == ['sub', 'fricoben']

    def test_trailing_dot(self):
        """An absolute name is the same domain."""
        assert split_domain('fricoben.stark.') == split_domain('fricoben.stark')

    def test_suffix_case_insensitive(self):
        """The suffix matches regardless of case."""
        assert split_domain('fricoben.STARK') == ['fricoben']

    def test_extended_label(self):
        """Non-ASCII labels survive the IDNA round trip."""
        assert split_domain('ben这来.stark') == ['ben这来']

    def test_wrong_suffix(self):
        with pytest.raises(InvalidDomain):
            split_domain('fricoben.eth')

    def test_bare_suffix(self):
        with pytest.raises(InvalidDomain):
            split_domain('stark')

    def test_empty_domain(self):
        with pytest.raises(InvalidDomain):
            split_domain('')

    def test_empty_label(self):
        with pytest.raises(InvalidDomain):
            split_domain('sub..stark')

    def test_label_too_long(self):
        """DNS label length limits apply."""
        with pytest.raises(InvalidDomain):
            split_domain('a' * 64 + '.stark')

    def test_labels_kept_verbatim(self):
        """No case folding or nameprep is applied to labels."""
        assert split_domain('Ab这.stark') == ['Ab这']

    def test_ace_label_not_converted(self):
        """An xn-- label stays as written."""
        assert split_domain('xn--abc-lp8a.stark') == ['xn--abc-lp8a']

    def test_escaped_dot_stays_in_label(self):
        """An escaped dot does not split the label."""
        assert split_domain('a\\.b.stark') == ['a.b']

    def test_extended_label_octet_limit(self):
        """The 63-octet limit counts UTF-8 octets."""
        assert split_domain('这' * 21 + '.stark') == ['这' * 21]
        with pytest.raises(InvalidDomain):
            split_domain('这' * 22 + '.stark')


class TestEncodeDomain:
    """Tests for encode_domain function."""

    def test_known_domain(self):
        assert encode_domain('fricoben.stark') == [1499554868251]

    def test_subdomain(self):
        assert encode_domain('sub.fricoben.stark') == [encode('sub'), 1499554868251]

    def test_invalid_label(self):
        """A bad character surfaces as InvalidDomain chained to UnknownCharacter."""
        with pytest.raises(InvalidDomain) as exc_info:
            encode_domain('fri_coben.stark')
        cause = exc_info.value.__cause__
        assert isinstance(cause, UnknownCharacter)
        assert cause.char == '_'

    def test_invalid_domain_is_not_unknown_character(self):
        """Resolving errors stay distinguishable from codec errors."""
        assert not issubclass(InvalidDomain, UnknownCharacter)
        assert issubclass(InvalidDomain, NamingError)

    def test_non_ascii_label_reports_first_bad_char(self):
        """Labels with extended characters are not lowercased first."""
        with pytest.raises(InvalidDomain) as exc_info:
            encode_domain('Ab这.stark')
        cause = exc_info.value.__cause__
        assert isinstance(cause, UnknownCharacter)
        assert cause.char == 'A'

    def test_ace_label_encoded_as_written(self):
        """An xn-- label encodes its own characters."""
        assert encode_domain('xn--abc-lp8a.stark') == [encode('xn--abc-lp8a')]

    def test_escaped_dot_reports_dot(self):
        with pytest.raises(InvalidDomain) as exc_info:
            encode_domain('a\\.b.stark')
        assert exc_info.value.__cause__.char == '.'


class TestDecodeDomain:
    """Tests for decode_domain function."""

    def test_known_domain(self):
        assert decode_domain([1499554868251]) == 'fricoben.stark'

    def test_subdomain(self):
        assert decode_domain([encode('sub'), 1499554868251]) == 'sub.fricoben.stark'

    def test_no_labels(self):
        assert decode_domain([]) == ''

    def test_empty_label(self):
        assert decode_domain([0]) == ''

    def test_roundtrip(self):
        for domain in ['fricoben.stark', 'a.b.c.stark', 'ben这来.stark', 'x-1.stark']:
            assert decode_domain(encode_domain(domain)) == domain

    def test_partly_empty_labels_joined_as_is(self):
        """decode_domain stays total; an empty inner label is kept."""
        assert decode_domain([0, encode('x')]) == '.x.stark'
