"""
Label Encoder for the Stark Name Codec

Encodes a domain label (no suffix, no dots) into a single integer using a
bijective mixed-radix positional scheme. The first character is the least
significant digit.

- Basic characters are one digit in radix len(basic) + 1.
- Extended characters are the switch marker followed by one digit in the
  extended radix, or in the terminal radix on the last character.
- A last character with ordinal 0 is written as the switch marker followed
  by an implicit zero, so 'a' and '' (or 'ba' and 'b') never collide.
- escape_tail rewrites the label ending before digits are emitted, removing
  the one ending that would otherwise be ambiguous.
"""

from typing import List, Tuple

from .alphabet import DEFAULT_ALPHABET, EXTENDED, Alphabet, split_trailing
from .errors import UnknownCharacter
from .felt import FIELD_PRIME


def max_label_length(alphabet: Alphabet = DEFAULT_ALPHABET) -> int:
    """
    Longest basic-only label guaranteed to fit one field element.

    Any label of basic characters of this length encodes below
    basic_radix ** length, which does not exceed the field prime. Longer
    labels, or labels using extended characters, may still fit; check the
    encoded value with felt.fits_in_field.
    """
    length = 0
    while alphabet.basic_radix ** (length + 1) <= FIELD_PRIME:
        length += 1
    return length


MAX_LABEL_LENGTH = max_label_length()


def check_label(label: str, alphabet: Alphabet = DEFAULT_ALPHABET) -> None:
    """
    Validate every character of a label against the alphabet.

    Raises:
        UnknownCharacter: For the first character the alphabet rejects
    """
    for char in label:
        if alphabet.classify(char) is None:
            raise UnknownCharacter(char)


def escape_tail(label: str, alphabet: Alphabet = DEFAULT_ALPHABET) -> str:
    """
    Rewrite the end of a label so its digits decode unambiguously.

    An extended[0] followed by a final basic[1] would produce the same
    digits as a final extended[-1]. Runs of extended[-1] at the end are
    therefore re-counted:
    - k trailing copies become 2k - 1 copies (odd)
    - k copies followed by extended[0] + basic[1] become 2(k + 1) copies (even)

    Args:
        label: A label already checked against the alphabet
        alphabet: Character table

    Returns:
        The rewritten label (unchanged when it has no such ending)

    Example:
        >>> escape_tail('abc来')
        'abc来'
        >>> escape_tail('abc这b')
        'abc来来'
    """
    extended = alphabet.extended
    if not extended:
        return label

    last = extended[-1]
    ambiguous = extended[0] + alphabet.basic_char(1)

    if label.endswith(ambiguous):
        head, count = split_trailing(label[:-len(ambiguous)], last)
        return head + last * (2 * (count + 1))

    head, count = split_trailing(label, last)
    if count:
        return head + last * (2 * count - 1)
    return label


def char_digits(
    char: str,
    is_last: bool,
    alphabet: Alphabet = DEFAULT_ALPHABET
) -> List[Tuple[int, int]]:
    """
    Digits emitted for one character, as (digit, radix) pairs.

    Args:
        char: An admissible character
        is_last: True for the final (most significant) character
        alphabet: Character table

    Returns:
        One pair for an ordinary basic character, two pairs when the
        switch marker is involved
    """
    charset, ordinal = alphabet.classify(char)
    switch = (alphabet.switch_marker, alphabet.basic_radix)

    if charset == EXTENDED:
        if is_last:
            return [switch, (ordinal + 1, alphabet.terminal_radix)]
        return [switch, (ordinal, alphabet.extended_radix)]

    if is_last and ordinal == 0:
        return [switch, (0, alphabet.terminal_radix)]
    return [(ordinal, alphabet.basic_radix)]


def encode(label: str, alphabet: Alphabet = DEFAULT_ALPHABET) -> int:
    """
    Encode a domain label as an integer.

    The result is not reduced modulo the field prime; use
    felt.fits_in_field to check that it can be stored.

    Args:
        label: Label without suffix or dots, e.g. 'fricoben'
        alphabet: Character table

    Returns:
        Non-negative integer; the empty label encodes to 0

    Raises:
        UnknownCharacter: For the first character outside the alphabet.
            Nothing is computed before validation completes.

    Example:
        >>> encode('fricoben')
        1499554868251
    """
    check_label(label, alphabet)
    text = escape_tail(label, alphabet)

    value = 0
    multiplier = 1
    last = len(text) - 1
    for position, char in enumerate(text):
        for digit, radix in char_digits(char, position == last, alphabet):
            value += multiplier * digit
            multiplier *= radix
    return value
