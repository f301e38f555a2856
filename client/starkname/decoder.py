"""
Label Decoder for the Stark Name Codec

Reverses encoder.encode. Decoding is total: any integer yields a string,
even if no label would have encoded to it.
"""

from typing import Tuple

from .alphabet import DEFAULT_ALPHABET, Alphabet, split_trailing
from .felt import FIELD_PRIME


def read_switch(value: int, alphabet: Alphabet = DEFAULT_ALPHABET) -> Tuple[str, int]:
    """
    Read the character announced by a switch marker.

    Called after the marker digit has been consumed. A remaining value below
    the terminal radix means this was the last character: 0 is a final
    basic[0], n > 0 is extended[n - 1]. Otherwise one extended digit is
    taken and decoding continues.

    Args:
        value: Remaining value after the marker
        alphabet: Character table

    Returns:
        Tuple of (character, remaining value)
    """
    if value < alphabet.terminal_radix:
        if value == 0:
            return alphabet.basic_char(0), 0
        return alphabet.extended_char(value - 1), 0

    if not alphabet.extended_radix:
        # No extended set: nothing valid encodes here
        return alphabet.basic_char(0), value

    remaining, ordinal = divmod(value, alphabet.extended_radix)
    return alphabet.extended_char(ordinal), remaining


def restore_tail(text: str, alphabet: Alphabet = DEFAULT_ALPHABET) -> str:
    """
    Undo encoder.escape_tail.

    An odd run of 2k - 1 trailing extended[-1] characters becomes k copies;
    an even run of 2(k + 1) becomes k copies followed by extended[0] and
    basic[1].

    Example:
        >>> restore_tail('abc来来')
        'abc这b'
    """
    extended = alphabet.extended
    if not extended:
        return text

    last = extended[-1]
    head, count = split_trailing(text, last)
    if not count:
        return text

    if count % 2 == 0:
        return head + last * (count // 2 - 1) + extended[0] + alphabet.basic_char(1)
    return head + last * ((count + 1) // 2)


def decode(value: int, alphabet: Alphabet = DEFAULT_ALPHABET) -> str:
    """
    Decode an integer back to a domain label.

    Args:
        value: Encoded label. Negative values are read as their field
            representative (value mod P).
        alphabet: Character table

    Returns:
        The label; 0 decodes to ''

    Example:
        >>> decode(1499554868251)
        'fricoben'
    """
    value = int(value)
    if value < 0:
        value %= FIELD_PRIME

    chars = []
    while value:
        value, digit = divmod(value, alphabet.basic_radix)
        if digit == alphabet.switch_marker:
            char, value = read_switch(value, alphabet)
        else:
            char = alphabet.basic_char(digit)
        chars.append(char)

    return restore_tail(''.join(chars), alphabet)
