"""
Step-by-step records of a cipher run, for display.

A trace is computed separately from the cipher result and never changes it.
Every function here returns a fresh list, so a viewer can replay it as many
times as it likes.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .alphabet import is_letter, shift_letter
from .caesar import decrypt_shift
from .config import ALPHABET_SIZE, SQUARE_SIZE
from .playfair import (
    Position, Square, build_playfair_square, find_in_square, iter_pairs, pad_ciphertext,
    playfair_decrypt, playfair_encrypt, playfair_preprocess, transform_pair,
)
from .vigenere import iter_shifts


@dataclass(frozen=True)
class TraceStep:
    """
    One transformed unit: a character (Caesar, Vigenere) or a pair (Playfair).

    index is the character position in the input text, or the pair number
    for Playfair. shift is None for passthrough characters and for Playfair
    steps; rule and positions are only set for Playfair.
    """
    index: int
    original: str
    result: str
    key: Optional[str] = None
    shift: Optional[int] = None
    rule: Optional[str] = None
    positions: Tuple[Position, ...] = ()


@dataclass(frozen=True)
class PlayfairTrace:
    square: Square
    prepared: str
    steps: List[TraceStep] = field(default_factory=list)
    result: str = ''

    @property
    def pairs(self) -> List[str]:
        return [self.prepared[i:i + 2] for i in range(0, len(self.prepared), 2)]


def caesar_trace(text: str, key: int, decrypt: bool = False) -> List[TraceStep]:
    """
    One step per character of text. Letters record the forward shift that
    was applied (26 - key for decryption); other characters have shift None.
    """
    shift = decrypt_shift(key) if decrypt else key % ALPHABET_SIZE
    steps = []
    for index, char in enumerate(text):
        if is_letter(char):
            steps.append(TraceStep(index, char, shift_letter(char, shift), shift=shift))
        else:
            steps.append(TraceStep(index, char, char))
    return steps


def vigenere_trace(text: str, key: str, decrypt: bool = False) -> List[TraceStep]:
    """One step per letter of text, with the key letter and its shift."""
    steps = []
    for index, char, key_letter, shift in iter_shifts(text, key):
        applied = -shift if decrypt else shift
        steps.append(TraceStep(index, char, shift_letter(char, applied), key=key_letter, shift=shift))
    return steps


def playfair_trace(text: str, key: str, decrypt: bool = False) -> PlayfairTrace:
    """
    Square, normalized text and one step per transformed pair.

    prepared is always the normalized text. The steps follow the pairs the
    operation really processes: the normalized text when encrypting, the
    padded ciphertext when decrypting. Skipped pairs produce no step.
    """
    square = build_playfair_square(key)
    prepared = playfair_preprocess(text)
    if decrypt:
        source = pad_ciphertext(text)
        step = SQUARE_SIZE - 1
        result = playfair_decrypt(text, key)
    else:
        source = prepared
        step = 1
        result = playfair_encrypt(text, key)
    steps = []
    for index, a, b in iter_pairs(source):
        pair = transform_pair(square, a, b, step)
        if pair is None:
            continue
        out_a, out_b, rule = pair
        steps.append(TraceStep(
            index, a + b, out_a + out_b, rule=rule,
            positions=(find_in_square(square, a), find_in_square(square, b)),
        ))
    return PlayfairTrace(square, prepared, steps, result)
