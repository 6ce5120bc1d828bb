from __future__ import annotations
import argparse, json, sys
from . import config as CFG
from .engine import Engine
from .errors import DictionaryLoadError, UnmappedDigitError

MODES = ("expand", "valid", "resolve")


def _print_mapping(mapping, indent: int = 0) -> None:
    pad = " " * indent
    if not mapping:
        print(pad + "(empty)"); return
    width = max(12 - indent, 1)
    for key, value in mapping.items():
        if isinstance(value, dict):
            print(f"{pad}{key:<{width}} -> split")
            _print_mapping(value, indent + 2)
        else:
            print(f"{pad}{key:<{width}} {', '.join(value) if value else '(none)'}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Keypad words CLI (Engine-backed)")
    p.add_argument("--words", default=CFG.WORDLIST_URL,
                   help="Word list: https URL, file path, file:// URL")
    p.add_argument("--timeout", type=float, default=None, help="Fetch timeout in seconds")
    p.add_argument("--mode", choices=MODES, default="resolve")
    p.add_argument("--q", default=None, help="Single digit string to run once")
    p.add_argument("--repl", action="store_true", help="Interactive loop")
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--strict", action="store_true", help="Reject non-digit input")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    eng = Engine(strict=args.strict or None)
    try:
        if args.mode != "expand":
            try:
                eng.load(args.words, timeout=args.timeout, verbose=args.verbose)
            except DictionaryLoadError as exc:
                print(f"error: dictionary unavailable: {exc}", file=sys.stderr)
                return 2

        def run_query(q: str) -> None:
            if args.mode == "expand":
                out = eng.expand(q)
            elif args.mode == "valid":
                out = eng.filter_valid(q)
            else:
                out = eng.resolve(q).to_dict()

            if args.json:
                print(json.dumps(out, ensure_ascii=False, indent=2)); return
            if args.mode == "resolve":
                tree = out["validPermutations"]
                _print_mapping(tree if isinstance(tree, dict) else {q: tree})
                phrases = out["finalResults"]
                print(f"-- {len(phrases)} phrase(s)")
                for phrase in phrases:
                    print(phrase)
            else:
                _print_mapping(out)

        def safe_query(q: str) -> bool:
            try:
                run_query(q)
            except UnmappedDigitError as exc:
                print(f"error: {exc}", file=sys.stderr)
                return False
            return True

        status = 0
        if args.q is not None:
            status = 0 if safe_query(args.q) else 1

        if args.repl:
            print("Type digits (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                safe_query(q)

        return status
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
