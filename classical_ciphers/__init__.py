"""Caesar, Vigenere and Playfair ciphers with step-by-step traces."""
from .caesar import caesar_decrypt, caesar_encrypt
from .engine import CipherKind, Operation, run, trace
from .playfair import (
    build_playfair_square, find_in_square, playfair_decrypt, playfair_decrypt_pairs,
    playfair_encrypt, playfair_encrypt_pairs, playfair_preprocess,
)
from .trace import PlayfairTrace, TraceStep, caesar_trace, playfair_trace, vigenere_trace
from .vigenere import vigenere_decrypt, vigenere_encrypt

__version__ = "0.1.0"
