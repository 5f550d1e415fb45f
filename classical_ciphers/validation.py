"""
Key checks for the calling layer. The cipher functions never call these.
"""
from .config import CAESAR_KEY_MAX, CAESAR_KEY_MIN


def parse_caesar_key(raw) -> int:
    """
    Turns user input into a Caesar shift.
    Raises ValueError unless it is an integer between 1 and 25.
    """
    message = f"Enter a valid number between {CAESAR_KEY_MIN}-{CAESAR_KEY_MAX} for Caesar cipher"
    try:
        key = int(str(raw).strip())
    except ValueError:
        raise ValueError(message) from None
    if not CAESAR_KEY_MIN <= key <= CAESAR_KEY_MAX:
        raise ValueError(message)
    return key


def parse_keyword_key(raw: str) -> str:
    """
    Accepts a keyword made of ASCII letters, spaces allowed ("playfair example").
    """
    key = (raw or "").strip()
    letters = key.replace(" ", "")
    if not letters:
        raise ValueError("Please provide a keyword.")
    if not letters.isascii() or not letters.isalpha():
        raise ValueError("The key must contain only letters.")
    return key
