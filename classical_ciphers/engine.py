"""
Single entry point over the three ciphers, keyed by cipher kind and operation.
"""
from enum import Enum
from typing import List, Union

from .caesar import caesar_decrypt, caesar_encrypt
from .playfair import playfair_decrypt, playfair_encrypt
from .trace import PlayfairTrace, TraceStep, caesar_trace, playfair_trace, vigenere_trace
from .vigenere import vigenere_decrypt, vigenere_encrypt

Key = Union[int, str]


class CipherKind(str, Enum):
    CAESAR = "caesar"
    VIGENERE = "vigenere"
    PLAYFAIR = "playfair"

    def label(self) -> str:
        return {
            CipherKind.CAESAR: "Caesar",
            CipherKind.VIGENERE: "Vigenère",
            CipherKind.PLAYFAIR: "Playfair",
        }[self]


class Operation(str, Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"

    @classmethod
    def from_bool(cls, decrypt: bool) -> "Operation":
        return cls.DECRYPT if decrypt else cls.ENCRYPT


_CIPHERS = {
    (CipherKind.CAESAR, Operation.ENCRYPT): caesar_encrypt,
    (CipherKind.CAESAR, Operation.DECRYPT): caesar_decrypt,
    (CipherKind.VIGENERE, Operation.ENCRYPT): vigenere_encrypt,
    (CipherKind.VIGENERE, Operation.DECRYPT): vigenere_decrypt,
    (CipherKind.PLAYFAIR, Operation.ENCRYPT): playfair_encrypt,
    (CipherKind.PLAYFAIR, Operation.DECRYPT): playfair_decrypt,
}

_TRACERS = {
    CipherKind.CAESAR: caesar_trace,
    CipherKind.VIGENERE: vigenere_trace,
    CipherKind.PLAYFAIR: playfair_trace,
}


def run(cipher: CipherKind, operation: Operation, text: str, key: Key) -> str:
    """
    Encrypts or decrypts text. Caesar takes an integer shift (numeric
    strings such as "3" are converted with int()), the other two a keyword
    string.
    """
    cipher = CipherKind(cipher)
    if cipher is CipherKind.CAESAR:
        key = int(key)
    return _CIPHERS[cipher, Operation(operation)](text, key)


def trace(cipher: CipherKind, operation: Operation, text: str, key: Key) -> Union[List[TraceStep], PlayfairTrace]:
    decrypt = Operation(operation) is Operation.DECRYPT
    if CipherKind(cipher) is CipherKind.CAESAR:
        key = int(key)
    return _TRACERS[CipherKind(cipher)](text, key, decrypt=decrypt)
