import argparse
import sys

from typing import List, Optional, Tuple
from encoder import EncodingResult, encode

SYMBOL_LABELS = {" ": "SPACE", "\n": "NEWLINE", "\t": "TAB"}  #: Export names


def get_parser():
    """Create and configure the CLI argument parser.

    :returns: Configured argument parser.
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Huffman coding of text: frequencies, codes and bitstream"
    )
    subparsers = parser.add_subparsers(
        title="subcommands", dest="cmd", required=True
    )

    enc = subparsers.add_parser(
        "encode", aliases=["e"], help="Encode text and show the code table"
    )
    enc.add_argument("text", nargs="?", help="Text to encode")
    enc.add_argument(
        "-f", "--file", help="Read the text to encode from a UTF-8 file"
    )
    only = enc.add_mutually_exclusive_group()
    only.add_argument(
        "--codes-only",
        action="store_true",
        help="Print only the code table (one 'symbol: code' line each)",
    )
    only.add_argument(
        "--bits-only",
        action="store_true",
        help="Print only the encoded bit string",
    )
    enc.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Skip the frequency and code listings",
    )

    return parser


def _symbol_label(symbol: str) -> str:
    """Return a printable name for ``symbol`` (e.g. ``SPACE`` for ``' '``).

    :param symbol: A single character.
    :type symbol: str
    :returns: Label used in listings and exports.
    :rtype: str
    """
    return SYMBOL_LABELS.get(symbol, symbol)


def _fmt_pct(value: float) -> str:
    """Format a percentage with one decimal, like ``42.5%``.

    :param value: Percentage value.
    :type value: float
    :returns: Percentage.
    :rtype: str
    """
    return f"{value:.1f}%"


def sorted_frequencies(result: EncodingResult) -> List[Tuple[str, int]]:
    """Frequencies ordered for display: most frequent first.

    :param result: Encoding result.
    :type result: EncodingResult
    :returns: ``(symbol, count)`` pairs.
    :rtype: List[Tuple[str, int]]
    """
    return sorted(result.frequencies.items(), key=lambda kv: (-kv[1], kv[0]))


def sorted_codes(result: EncodingResult) -> List[Tuple[str, str]]:
    """Codes ordered for display: shortest first, then by code.

    :param result: Encoding result.
    :type result: EncodingResult
    :returns: ``(symbol, code)`` pairs.
    :rtype: List[Tuple[str, str]]
    """
    return sorted(result.codes.items(), key=lambda kv: (len(kv[1]), kv[1]))


def format_code_table(result: EncodingResult) -> str:
    """Render the code table as ``label: code`` lines.

    :param result: Encoding result.
    :type result: EncodingResult
    :returns: Newline-separated table, empty for empty input.
    :rtype: str
    """
    return "\n".join(
        f"{_symbol_label(sym)}: {code}" for sym, code in sorted_codes(result)
    )


def format_stats(result: EncodingResult) -> str:
    """Render size and ratio metrics, one per line.

    :param result: Encoding result.
    :type result: EncodingResult
    :returns: Statistics block.
    :rtype: str
    """
    lines = [
        f"Original size:       {result.original_size} bits",
        f"Compressed size:     {result.compressed_size} bits",
        f"Compression ratio:   {_fmt_pct(result.compression_ratio)}",
        f"Space saved:         {_fmt_pct(result.space_saved)}",
        f"Average code length: {result.average_code_length:.3f} bits/symbol",
        f"Entropy:             {result.entropy:.3f} bits/symbol",
    ]
    return "\n".join(lines)


def _read_input(args) -> Optional[str]:
    """Return the text selected on the command line.

    :param args: Parsed ``encode`` arguments.
    :type args: argparse.Namespace
    :returns: The text, or ``None`` if the file could not be read.
    :rtype: str | None
    """
    if args.file is None:
        return args.text
    try:
        with open(args.file, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        print(f"[!] Input file not found: {args.file}")
    except (OSError, UnicodeDecodeError) as e:
        print(f"[!] Could not read {args.file}: {e}")
    return None


def run_encode(args) -> int:
    """Encode the selected input and print the report.

    :param args: Parsed ``encode`` arguments.
    :type args: argparse.Namespace
    :returns: Process exit status.
    :rtype: int
    """
    text = _read_input(args)
    if text is None:
        return 1
    if not text.strip():
        print("[!] Input required: please provide some text to encode.")
        return 1

    result = encode(text)
    if not result.is_lossless:
        print("[!] Round-trip verification failed")
        return 2

    if args.codes_only:
        print(format_code_table(result))
        return 0
    if args.bits_only:
        print(result.encoded)
        return 0

    print(format_stats(result))
    if not args.quiet:
        print()
        print("Character frequencies:")
        for sym, count in sorted_frequencies(result):
            print(f"  {_symbol_label(sym)}: {count}")
        print()
        print("Huffman codes:")
        for line in format_code_table(result).splitlines():
            print(f"  {line}")
    print()
    print("Encoded:")
    print(result.encoded)
    print()
    print("Decoded:")
    print(result.decoded)
    print()
    print("Verification: match")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI tool.

    :param argv: Arguments to parse instead of ``sys.argv[1:]``.
    :type argv: List[str] | None
    :returns: Process exit status.
    :rtype: int
    """
    parser = get_parser()
    args = parser.parse_args(argv)

    if args.cmd in ["encode", "e"]:
        if (args.text is None) == (args.file is None):
            parser.error("exactly one of TEXT or --file is required")
        return run_encode(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
