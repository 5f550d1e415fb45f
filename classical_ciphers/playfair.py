"""
Playfair cipher over a 5x5 key square with I and J sharing one cell.

The square is built once per key and returned as a tuple of row tuples, so
it cannot be changed after construction. Encryption normalizes its input
(see playfair_preprocess); decryption only pads odd-length input with the
filler and otherwise works on the ciphertext as given, because splitting
repeated letters would break legitimate ciphertext pairs.
"""
import logging
from typing import Iterator, List, Optional, Tuple

from .alphabet import ALPHABET, is_upper
from .config import FILLER, MERGED_INTO, MERGED_LETTER, SQUARE_SIZE

logger = logging.getLogger(__name__)

Square = Tuple[Tuple[str, ...], ...]
Position = Tuple[int, int]

NOT_FOUND: Position = (-1, -1)

SAME_ROW = "row"
SAME_COLUMN = "column"
RECTANGLE = "rectangle"


def build_playfair_square(key: str) -> Square:
    """
    Builds the 5x5 key square for a keyword.

    The key is uppercased, J is mapped to I and non-letters are removed.
    Duplicate letters keep their first occurrence, then the unused letters
    of the alphabet (skipping J) fill the remaining cells row by row.
    An empty key gives an empty square.
    """
    if not key:
        return ()
    # dict keeps insertion order, so it works as an ordered set
    seen = dict.fromkeys(
        MERGED_INTO if ch == MERGED_LETTER else ch
        for ch in key.upper()
        if is_upper(ch)
    )
    for ch in ALPHABET:
        if ch != MERGED_LETTER:
            seen.setdefault(ch)
    letters = list(seen)
    square = tuple(
        tuple(letters[r * SQUARE_SIZE:(r + 1) * SQUARE_SIZE]) for r in range(SQUARE_SIZE)
    )
    logger.debug("Playfair square for key %r: %s", key, ' / '.join(''.join(row) for row in square))
    return square


def format_square(square: Square) -> str:
    return "\n".join(" ".join(row) for row in square)


def playfair_preprocess(text: str) -> str:
    """
    Normalizes text for encryption.

    Uppercase, J -> I, non-letters removed. A filler X goes between every
    two identical adjacent letters, and one more X is appended if the
    length is still odd. The result always has even length.
    """
    if not text:
        return ''
    cleaned = [
        MERGED_INTO if ch == MERGED_LETTER else ch
        for ch in text.upper()
        if is_upper(ch)
    ]
    out: List[str] = []
    for i, ch in enumerate(cleaned):
        out.append(ch)
        if i + 1 < len(cleaned) and cleaned[i + 1] == ch:
            out.append(FILLER)
    if len(out) % 2 != 0:
        out.append(FILLER)
    normalized = ''.join(out)
    logger.debug("Playfair normalized %r -> %r", text, normalized)
    return normalized


def find_in_square(square: Square, ch: str) -> Position:
    """
    Returns (row, col) of a letter; J is looked up as I.
    Returns (-1, -1) when the letter is not in the square.
    """
    if ch == MERGED_LETTER:
        ch = MERGED_INTO
    for r, row in enumerate(square):
        for c, cell in enumerate(row):
            if cell == ch:
                return r, c
    return NOT_FOUND


def iter_pairs(text: str) -> Iterator[Tuple[int, str, str]]:
    """Yields (pair_index, a, b) for consecutive two-letter chunks."""
    for i in range(0, len(text) - 1, 2):
        yield i // 2, text[i], text[i + 1]


def transform_pair(square: Square, a: str, b: str, step: int) -> Optional[Tuple[str, str, str]]:
    """
    Applies the Playfair rules to one pair.

    step is +1 for encryption (right / down) and -1 for decryption
    (left / up). Returns (out_a, out_b, rule), or None if either letter is
    not in the square.
    """
    r1, c1 = find_in_square(square, a)
    r2, c2 = find_in_square(square, b)
    if (r1, c1) == NOT_FOUND or (r2, c2) == NOT_FOUND:
        return None
    if r1 == r2:
        return (square[r1][(c1 + step) % SQUARE_SIZE],
                square[r2][(c2 + step) % SQUARE_SIZE],
                SAME_ROW)
    if c1 == c2:
        return (square[(r1 + step) % SQUARE_SIZE][c1],
                square[(r2 + step) % SQUARE_SIZE][c2],
                SAME_COLUMN)
    # rectangle: swap columns, keep rows (its own inverse)
    return square[r1][c2], square[r2][c1], RECTANGLE


def _transform_pairs(text: str, square: Square, step: int) -> str:
    out: List[str] = []
    for _, a, b in iter_pairs(text):
        pair = transform_pair(square, a, b, step)
        if pair is None:
            logger.debug("Skipping pair %r: letter not in square", a + b)
            continue
        out.append(pair[0])
        out.append(pair[1])
    return ''.join(out)


def playfair_encrypt_pairs(normalized: str, square: Square) -> str:
    return _transform_pairs(normalized, square, 1)


def playfair_decrypt_pairs(text: str, square: Square) -> str:
    """
    Mirror of playfair_encrypt_pairs, moving left/up. A pair containing a
    letter that is not in the square is dropped from the output.
    """
    # (idx + 4) % 5 == (idx - 1) % 5
    return _transform_pairs(text, square, SQUARE_SIZE - 1)


def pad_ciphertext(text: str) -> str:
    """Decryption input: only a trailing filler when the length is odd."""
    if len(text) % 2 != 0:
        text += FILLER
    return text


def playfair_encrypt(text: str, key: str) -> str:
    square = build_playfair_square(key)
    return playfair_encrypt_pairs(playfair_preprocess(text), square)


def playfair_decrypt(text: str, key: str) -> str:
    """
    Decrypts Playfair ciphertext.

    The text is not uppercased and repeated letters are not split; only an
    odd length gets a trailing filler. Pairs with characters outside the
    square (lowercase letters, digits, spaces) are skipped.
    """
    square = build_playfair_square(key)
    if not text:
        return ''
    return playfair_decrypt_pairs(pad_ciphertext(text), square)
