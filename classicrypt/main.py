"""
ClassiCrypt - Main Entry Point
Command-line front end for the classical ciphers and the RSA demonstrator.

    classicrypt caesar "hello world" --mode enc
    classicrypt shift "KHOOR" --brute
    classicrypt affine "hello" --mode enc -a 5 -b 8
    classicrypt transposition "we are discovered" --key zebra --show-grid
    classicrypt rsa keygen -p 3 -q 11
    classicrypt rsa encrypt -m 5 -e 3 -n 33
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

from .core_crypto.alphabet import alphabet_table
from .integration.event_logger import EventLogger
from .integration.service import CipherService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classicrypt",
        description="Classical ciphers and a small RSA demonstrator",
    )
    parser.add_argument("--audit", action="store_true",
                        help="print the audit log after the operation")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_text_cipher(name: str, help_text: str, brute: bool = False):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("text", help="input text")
        p.add_argument("--mode", choices=["enc", "dec"], default="enc")
        if brute:
            p.add_argument("--brute", action="store_true",
                           help="decrypt with every possible key")
        return p

    add_text_cipher("caesar", "Caesar cipher (shift 3)")

    p = add_text_cipher("shift", "general shift cipher", brute=True)
    p.add_argument("-k", "--key", default=None, help="shift key")

    p = add_text_cipher("affine", "affine cipher", brute=True)
    p.add_argument("-a", default=None, help="multiplier, coprime with 26")
    p.add_argument("-b", default=None, help="offset")

    p = add_text_cipher("transposition", "columnar transposition")
    p.add_argument("--key", required=True, help="keyword (2+ letters)")
    p.add_argument("--show-grid", action="store_true")

    rsa = sub.add_parser("rsa", help="RSA demonstrator")
    rsa_sub = rsa.add_subparsers(dest="rsa_command", required=True)
    keygen = rsa_sub.add_parser("keygen", help="generate a key from primes p and q")
    keygen.add_argument("-p", required=True)
    keygen.add_argument("-q", required=True)
    enc = rsa_sub.add_parser("encrypt", help="c = m^e mod n")
    enc.add_argument("-m", required=True)
    enc.add_argument("-e", required=True)
    enc.add_argument("-n", required=True)
    dec = rsa_sub.add_parser("decrypt", help="m = c^d mod n")
    dec.add_argument("-c", required=True)
    dec.add_argument("-d", required=True)
    dec.add_argument("-n", required=True)

    sub.add_parser("alphabet", help="print the letter/number table")
    return parser


def run(args: argparse.Namespace, service: CipherService) -> Dict[str, Any]:
    """Dispatch parsed arguments to the service."""
    cmd = args.command
    if cmd == "caesar":
        return service.caesar(args.text, args.mode)
    if cmd == "shift":
        if args.brute:
            return service.shift_brute_force(args.text)
        return service.shift(args.text, args.mode, args.key)
    if cmd == "affine":
        if args.brute:
            return service.affine_brute_force(args.text)
        return service.affine(args.text, args.mode, args.a, args.b)
    if cmd == "transposition":
        return service.transposition(args.text, args.mode, args.key)
    if cmd == "rsa":
        if args.rsa_command == "keygen":
            return service.rsa_generate(args.p, args.q)
        if args.rsa_command == "encrypt":
            return service.rsa_encrypt(args.m, args.e, args.n)
        return service.rsa_decrypt(args.c, args.d, args.n)
    raise ValueError(f"Unknown command: {cmd}")


def format_result(args: argparse.Namespace, result: Dict[str, Any]) -> str:
    if not result['success']:
        return f"Error: {result['message']}"
    if 'candidates' in result:
        return "\n".join(f"{c['label']}  {c['text']}" for c in result['candidates'])
    if 'key' in result:
        key = result['key']
        return (f"n = {key['n']}\nφ(n) = {key['phi']}\n"
                f"e (public) = {key['e']}\nd (private) = {key['d']}")
    if getattr(args, 'show_grid', False):
        return f"{result['grid']}\n\n{result['result']}"
    return str(result['result'])


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for ClassiCrypt."""
    args = build_parser().parse_args(argv)

    if args.command == "alphabet":
        for letter, number in alphabet_table():
            print(f"{letter} {number}")
        return 0

    logger = EventLogger()
    service = CipherService(logger=logger)
    result = run(args, service)

    print(format_result(args, result))
    if args.audit:
        print(logger.format_audit_log())
    return 0 if result['success'] else 1


if __name__ == "__main__":
    sys.exit(main())
