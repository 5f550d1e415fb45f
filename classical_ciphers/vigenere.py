from typing import Dict, Iterator, List, Tuple

from .alphabet import ALPHABET, M, index_to_letter, is_letter, is_upper, letter_index, shift_index
from .caesar import format_mapping_table


def normalize_key(key: str) -> str:
    """
    Uppercases the key and keeps only its letters. The result may be empty.
    """
    return ''.join(ch for ch in key.upper() if is_upper(ch))


def generate_vigenere_mapping(key_letter: str) -> Dict[str, str]:
    """
    Generates a mapping for a single key letter.
    For a given key letter (A-Z), it creates a Caesar cipher mapping with a shift
    equal to the letter's position in the alphabet (A=0, B=1, ..., Z=25).
    """
    shift = ALPHABET.index(key_letter.upper())
    return {ALPHABET[i]: ALPHABET[(i + shift) % M] for i in range(M)}


def format_vigenere_tables(key: str) -> str:
    """
    For each letter in the key, renders its mapping table:
      - First row: Plain alphabet (A-Z)
      - Second row: A border (using '--+')
      - Third row: The cipher alphabet for that key letter.
    """
    blocks = []
    for letter in normalize_key(key):
        table = format_mapping_table(generate_vigenere_mapping(letter))
        blocks.append(f"Mapping for key letter '{letter}':\n{table}")
    return "\n\n".join(blocks)


def iter_shifts(text: str, key: str) -> Iterator[Tuple[int, str, str, int]]:
    """
    Walks the letters of text together with the repeating key.
    Yields (position, char, key_letter, shift). Non-letters are skipped and do
    not consume a key position.
    """
    key = normalize_key(key)
    if not text or not key:
        return
    key_index = 0
    for position, char in enumerate(text):
        if not is_letter(char):
            continue
        key_letter = key[key_index % len(key)]
        yield position, char, key_letter, ALPHABET.index(key_letter)
        key_index += 1


def _vigenere(text: str, key: str, decrypt: bool) -> str:
    if not text or not normalize_key(key):
        return ''
    result: List[str] = list(text)
    for position, char, _, shift in iter_shifts(text, key):
        if decrypt:
            shift = -shift
        result[position] = index_to_letter(shift_index(letter_index(char), shift), is_upper(char))
    return ''.join(result)


def vigenere_encrypt(plaintext: str, key: str) -> str:
    """
    Encrypts the plaintext using the Vigenere cipher.
    The key is repeated as needed and only letters consume a key position.
    Case of the text is preserved; non-alphabet characters are left unchanged.
    Returns an empty string when the text or the key is empty.
    """
    return _vigenere(plaintext, key, decrypt=False)


def vigenere_decrypt(ciphertext: str, key: str) -> str:
    """
    Decrypts text encrypted with vigenere_encrypt by reversing each key shift.
    """
    return _vigenere(ciphertext, key, decrypt=True)
