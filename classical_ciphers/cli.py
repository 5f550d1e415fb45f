import argparse
import logging
import sys

from .caesar import format_mapping_table, generate_mapping
from .config import configure_logging
from .engine import CipherKind, Operation, run, trace
from .playfair import build_playfair_square, format_square
from .trace import PlayfairTrace
from .validation import parse_caesar_key, parse_keyword_key
from .vigenere import format_vigenere_tables
from .visual import save_trace_figure

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classical-ciphers",
        description="Caesar, Vigenere and Playfair ciphers with step-by-step traces",
    )
    parser.add_argument("cipher", choices=[kind.value for kind in CipherKind], help="Cipher to use")
    parser.add_argument("text", help="Input text")
    parser.add_argument("--key", required=True,
                        help="Shift 1-25 for Caesar, keyword for Vigenere/Playfair")
    parser.add_argument("--decrypt", action="store_true", help="Decrypt instead of encrypt")
    parser.add_argument("--trace", action="store_true", help="Print one line per transformation step")
    parser.add_argument("--table", action="store_true",
                        help="Print the shift tables (Caesar/Vigenere) or the key square (Playfair)")
    parser.add_argument("--plot", metavar="PATH", help="Write a PNG figure of the trace to PATH")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def parse_key(cipher: CipherKind, raw: str):
    if cipher is CipherKind.CAESAR:
        return parse_caesar_key(raw)
    return parse_keyword_key(raw)


def format_table(cipher: CipherKind, key) -> str:
    if cipher is CipherKind.CAESAR:
        return format_mapping_table(generate_mapping(key))
    if cipher is CipherKind.VIGENERE:
        return format_vigenere_tables(key)
    return format_square(build_playfair_square(key))


def format_trace(steps) -> str:
    lines = []
    if isinstance(steps, PlayfairTrace):
        lines.append("Processed text (pairs): " + " ".join(steps.pairs))
        for step in steps.steps:
            (r1, c1), (r2, c2) = step.positions
            lines.append(f"{step.index:3}  {step.original} -> {step.result}  "
                         f"[{step.rule}] ({r1},{c1}) ({r2},{c2})")
        return "\n".join(lines)
    for step in steps:
        if step.shift is None:
            lines.append(f"{step.index:3}  {step.original!r} unchanged")
        elif step.key is not None:
            lines.append(f"{step.index:3}  {step.original} + {step.key} = {step.result}  (shift: {step.shift})")
        else:
            lines.append(f"{step.index:3}  {step.original} -> {step.result}  (shift: {step.shift})")
    return "\n".join(lines)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        cipher = CipherKind(args.cipher)
        operation = Operation.from_bool(args.decrypt)
        key = parse_key(cipher, args.key)
        logger.debug("%s %s, %d characters", cipher.label(), operation.value, len(args.text))

        if args.table:
            print(format_table(cipher, key))
            print()

        print(run(cipher, operation, args.text, key))

        if args.trace or args.plot:
            steps = trace(cipher, operation, args.text, key)
            if args.trace:
                print()
                print(format_trace(steps))
            if args.plot:
                save_trace_figure(steps, args.plot, title=f"{cipher.label()} {operation.value}")
    except (ValueError, OSError) as e:
        print("Error:", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
