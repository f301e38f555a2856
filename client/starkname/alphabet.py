"""
Label Alphabet for the Stark Name Codec

Defines which characters may appear in a domain label and the ordinal of
each one. Characters live in one of two sets:
- basic: lowercase letters, digits and the hyphen
- extended: a small table of multi-byte symbols

The encoder reserves one extra ordinal past the basic set as the switch
marker into the extended set, so the basic radix is len(basic) + 1.
"""

from typing import NamedTuple, Optional, Tuple


BASIC = 'basic'
EXTENDED = 'extended'

BASIC_CHARS = 'abcdefghijklmnopqrstuvwxyz0123456789-'
EXTENDED_CHARS = '这来'


class Classified(NamedTuple):
    """Result of classifying an admissible character."""
    charset: str
    ordinal: int


class Alphabet:
    """
    Immutable character table shared by the encoder and decoder.

    Lookups never mutate the instance, so a single Alphabet can be used
    from any number of threads.
    """

    __slots__ = ('_basic', '_extended', '_basic_index', '_extended_index')

    def __init__(self, basic: str = BASIC_CHARS, extended: str = EXTENDED_CHARS):
        """
        Build a character table.

        Args:
            basic: Basic characters in ordinal order (at least two)
            extended: Extended characters in ordinal order (may be empty)

        Raises:
            ValueError: If the table has too few basic characters, or if a
                character appears twice
        """
        if len(basic) < 2:
            raise ValueError("Basic alphabet needs at least two characters")
        if len(set(basic + extended)) != len(basic) + len(extended):
            raise ValueError("Alphabet characters must be unique")

        self._basic = basic
        self._extended = extended
        self._basic_index = {c: i for i, c in enumerate(basic)}
        self._extended_index = {c: i for i, c in enumerate(extended)}

    def __repr__(self) -> str:
        return f"Alphabet(basic={self._basic!r}, extended={self._extended!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._basic == other._basic and self._extended == other._extended

    def __hash__(self) -> int:
        return hash((self._basic, self._extended))

    @property
    def basic(self) -> str:
        return self._basic

    @property
    def extended(self) -> str:
        return self._extended

    @property
    def switch_marker(self) -> int:
        """Basic-radix digit announcing an extended character (or a final zero)."""
        return len(self._basic)

    @property
    def basic_radix(self) -> int:
        return len(self._basic) + 1

    @property
    def extended_radix(self) -> int:
        return len(self._extended)

    @property
    def terminal_radix(self) -> int:
        """Radix of the digit after the switch marker on the last character."""
        return len(self._extended) + 1

    def classify(self, char: str) -> Optional[Classified]:
        """
        Look up a character.

        Args:
            char: A single character

        Returns:
            Classified(charset, ordinal), or None when the character is not
            admissible. Ordinal 0 is a real symbol and never means "absent".

        Example:
            >>> DEFAULT_ALPHABET.classify('a')
            Classified(charset='basic', ordinal=0)
            >>> DEFAULT_ALPHABET.classify('$') is None
            True
        """
        ordinal = self._basic_index.get(char)
        if ordinal is not None:
            return Classified(BASIC, ordinal)
        ordinal = self._extended_index.get(char)
        if ordinal is not None:
            return Classified(EXTENDED, ordinal)
        return None

    def basic_char(self, ordinal: int) -> str:
        """Inverse lookup in the basic set, total over [0, len(basic))."""
        return self._basic[ordinal]

    def extended_char(self, ordinal: int) -> str:
        """Inverse lookup in the extended set, total over [0, len(extended))."""
        return self._extended[ordinal]


DEFAULT_ALPHABET = Alphabet()


def split_trailing(text: str, char: str) -> Tuple[str, int]:
    """
    Split a run of `char` off the end of `text`.

    Example:
        >>> split_trailing('ab来来', '来')
        ('ab', 2)
    """
    head = text.rstrip(char)
    return head, len(text) - len(head)
