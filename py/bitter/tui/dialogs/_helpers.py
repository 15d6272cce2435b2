"""Shared helpers for dialog modules and the command line."""


def parse_int(text: str) -> int:
    """Parse an integer, auto-detecting 0x/0o/0b prefixes."""
    text = text.strip()
    if not text:
        raise ValueError('empty value')
    try:
        return int(text, 0)
    except ValueError:
        raise ValueError(f'not a number: {text!r}') from None
