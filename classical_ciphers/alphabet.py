"""
Letter helpers shared by the Caesar, Vigenere and Playfair ciphers.

Only the 26 ASCII letters are treated as letters. Everything else is a
passthrough character for Caesar/Vigenere and is dropped by Playfair.
"""
import string

from .config import ALPHABET_SIZE

ALPHABET = string.ascii_uppercase
M = ALPHABET_SIZE


def is_upper(ch: str) -> bool:
    return 'A' <= ch <= 'Z'


def is_lower(ch: str) -> bool:
    return 'a' <= ch <= 'z'


def is_letter(ch: str) -> bool:
    return is_upper(ch) or is_lower(ch)


def letter_index(ch: str) -> int:
    """
    Zero-based position of a letter inside its own case (A=0 ... Z=25, a=0 ... z=25).
    """
    base = ord('A') if is_upper(ch) else ord('a')
    return ord(ch) - base


def index_to_letter(index: int, upper: bool = True) -> str:
    base = ord('A') if upper else ord('a')
    return chr(index % M + base)


def shift_index(index: int, shift: int) -> int:
    # Python's % is already non-negative for a positive modulus
    return (index + shift) % M


def shift_letter(ch: str, shift: int) -> str:
    """
    Shifts a letter within its own case. Non-letters come back unchanged.
    """
    if not is_letter(ch):
        return ch
    return index_to_letter(shift_index(letter_index(ch), shift), is_upper(ch))
