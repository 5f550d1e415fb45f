import string

from classical_ciphers.vigenere import (
    format_vigenere_tables, generate_vigenere_mapping, normalize_key, vigenere_decrypt,
    vigenere_encrypt,
)


def test_reference_vector():
    assert vigenere_encrypt("ATTACKATDAWN", "LEMON") == "LXFOPVEFRNHR"
    assert vigenere_decrypt("LXFOPVEFRNHR", "LEMON") == "ATTACKATDAWN"


def test_key_case_does_not_matter():
    assert vigenere_encrypt("ATTACKATDAWN", "lemon") == "LXFOPVEFRNHR"


def test_text_case_and_spacing_preserved():
    assert vigenere_encrypt("Attack At Dawn", "LEMON") == "Lxfopv Ef Rnhr"


def test_non_letters_do_not_consume_key():
    assert vigenere_encrypt("A-A", "AB") == "A-B"


def test_empty_inputs_give_empty_string():
    assert vigenere_encrypt("", "KEY") == ""
    assert vigenere_encrypt("TEXT", "") == ""
    assert vigenere_decrypt("", "KEY") == ""
    assert vigenere_decrypt("TEXT", "") == ""


def test_round_trip_printable_ascii():
    text = string.printable
    assert vigenere_decrypt(vigenere_encrypt(text, "Secret"), "Secret") == text


def test_non_letters_in_key_are_ignored():
    assert normalize_key("le mon!") == "LEMON"
    assert vigenere_encrypt("ATTACKATDAWN", "LE MON") == "LXFOPVEFRNHR"
    assert vigenere_encrypt("TEXT", "123") == ""


def test_mapping_tables():
    assert generate_vigenere_mapping('B')['Z'] == 'A'
    tables = format_vigenere_tables("ab")
    assert "Mapping for key letter 'A':" in tables
    assert "Mapping for key letter 'B':" in tables
