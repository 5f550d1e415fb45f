from typing import Dict

from .alphabet import ALPHABET, M, shift_letter


def generate_mapping(key: int) -> Dict[str, str]:
    """
    Generates a dictionary mapping for uppercase letters based on the Caesar cipher key.
    Each letter is shifted by the given key (mod 26).
    """
    key = key % M
    return {ALPHABET[i]: ALPHABET[(i + key) % M] for i in range(M)}


def format_mapping_table(mapping: Dict[str, str]) -> str:
    """
    Renders a plain -> cipher mapping in the following table format:

     A  B  C  D  E  F  G  H  I  J  K  L  M  N  O  P  Q  R  S  T  U  V  W  X  Y  Z
     --+--+--+--+--+--+--+--+--+--+--+--+--+--+--+--+--+--+--+--+--+--+--+--+--+--
     D  E  F  G  H  I  J  K  L  M  N  O  P  Q  R  S  T  U  V  W  X  Y  Z  A  B  C

    This example is the mapping for key 3: A shifts to D, B shifts to E, etc.
    """
    plain_letters = list(ALPHABET)
    row1 = " ".join(f"{letter:2}" for letter in plain_letters)
    row2 = " " + "--" + "+--" * (len(plain_letters) - 1) + " "
    row3 = " ".join(f"{mapping[letter]:2}" for letter in plain_letters)
    return "\n".join([row1, row2, row3])


def decrypt_shift(key: int) -> int:
    # 26 - 0 reduces back to 0, so a zero key stays a no-op
    return (M - key % M) % M


def caesar_encrypt(text: str, key: int) -> str:
    """
    Encrypts the input text using the Caesar cipher with the given key.
    Handles both uppercase and lowercase letters.
    Non-alphabet characters remain unchanged.

    Any integer key is accepted and reduced mod 26; the 1-25 range is checked
    by the caller (see parse_caesar_key).
    """
    key = key % M
    return ''.join(shift_letter(char, key) for char in text)


def caesar_decrypt(text: str, key: int) -> str:
    return caesar_encrypt(text, decrypt_shift(key))
