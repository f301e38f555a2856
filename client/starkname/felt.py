"""
Field Element Helpers

Starknet stores values as elements of the prime field below. The codec works
on plain non-negative integers; these helpers answer whether such an integer
can be stored as one element and convert between text and integer forms.
"""

FIELD_PRIME = 2 ** 251 + 17 * 2 ** 192 + 1


def fits_in_field(value: int) -> bool:
    """Return True if value is a canonical field element (0 <= value < P)."""
    return 0 <= value < FIELD_PRIME


def parse_felt(text: str) -> int:
    """
    Parse a field element written as hex (0x-prefixed) or decimal.

    Args:
        text: Textual value, e.g. '0x15d246f6c1b' or '1499554868251'

    Returns:
        The integer value

    Raises:
        ValueError: If the text is not a number or falls outside the field

    Example:
        >>> parse_felt('0x15d246f6c1b')
        1499554868251
    """
    cleaned = text.strip().lower()
    try:
        if cleaned.startswith('0x'):
            value = int(cleaned[2:], 16)
        else:
            value = int(cleaned, 10)
    except ValueError:
        raise ValueError(f"Not a field element: '{text}'")

    if not fits_in_field(value):
        raise ValueError(f"Value out of field range: '{text}'")
    return value


def to_hex(value: int) -> str:
    """Format a field element as 0x-prefixed lowercase hex."""
    return hex(value)
