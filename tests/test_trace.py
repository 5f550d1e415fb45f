from classical_ciphers.playfair import playfair_decrypt
from classical_ciphers.trace import PlayfairTrace, caesar_trace, playfair_trace, vigenere_trace
from classical_ciphers.vigenere import vigenere_encrypt


def test_caesar_trace_records_every_character():
    steps = caesar_trace("Hi!", 3)
    assert [step.result for step in steps] == ['K', 'l', '!']
    assert [step.index for step in steps] == [0, 1, 2]
    assert steps[0].shift == 3
    assert steps[2].shift is None


def test_caesar_trace_decrypt_uses_complement_shift():
    steps = caesar_trace("Khoor", 3, decrypt=True)
    assert {step.shift for step in steps} == {23}
    assert ''.join(step.result for step in steps) == "Hello"


def test_vigenere_trace_letters_only():
    steps = vigenere_trace("AT TACK", "LEMON")
    assert [step.index for step in steps] == [0, 1, 3, 4, 5, 6]
    assert [step.key for step in steps] == ['L', 'E', 'M', 'O', 'N', 'L']
    assert [step.shift for step in steps] == [11, 4, 12, 14, 13, 11]
    assert ''.join(step.result for step in steps) == vigenere_encrypt("ATTACK", "LEMON")


def test_vigenere_trace_decrypt():
    steps = vigenere_trace("LXF", "LEMON", decrypt=True)
    assert ''.join(step.result for step in steps) == "ATT"
    assert steps[0].shift == 11


def test_vigenere_trace_empty():
    assert vigenere_trace("", "KEY") == []
    assert vigenere_trace("TEXT", "") == []


def test_playfair_trace_encrypt():
    trace = playfair_trace("instruments", "MONARCHY")
    assert isinstance(trace, PlayfairTrace)
    assert trace.prepared == "INSTRUMENTSX"
    assert trace.pairs == ["IN", "ST", "RU", "ME", "NT", "SX"]
    assert trace.result == "GATLMZCLRQXA"
    assert [step.original for step in trace.steps] == trace.pairs
    assert trace.steps[0].rule == "rectangle"
    assert trace.steps[0].positions == ((2, 3), (0, 2))
    assert trace.steps[-1].rule == "column"


def test_playfair_trace_decrypt_follows_ciphertext_pairs():
    trace = playfair_trace("GATLMZCLRQXA", "MONARCHY", decrypt=True)
    assert ''.join(step.result for step in trace.steps) == "INSTRUMENTSX"
    assert trace.result == "INSTRUMENTSX"


def test_trace_is_repeatable():
    assert caesar_trace("abc", 5) == caesar_trace("abc", 5)
    assert playfair_trace("hello", "key") == playfair_trace("hello", "key")


def test_playfair_trace_decrypt_skips_pairs_outside_square():
    trace = playfair_trace("BM OD", "playfair example", decrypt=True)
    assert [(step.index, step.original, step.result) for step in trace.steps] == [
        (0, "BM", "HI"), (2, "DX", "GE"),
    ]
    assert trace.prepared == "BMOD"
    assert trace.result == "HIGE"
    assert ''.join(step.result for step in trace.steps) == playfair_decrypt("BM OD", "playfair example")


def test_playfair_trace_decrypt_pads_odd_length():
    trace = playfair_trace("BMO", "playfair example", decrypt=True)
    assert [(step.original, step.result) for step in trace.steps] == [("BM", "HI"), ("OX", "QE")]
    assert trace.result == "HIQE"
    assert ''.join(step.result for step in trace.steps) == playfair_decrypt("BMO", "playfair example")
