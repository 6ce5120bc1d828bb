from __future__ import annotations
import argparse, sys
from flask import Flask, request, jsonify
from keypad import config as CFG
from keypad.engine import Engine
from keypad.errors import DictionaryLoadError, UnmappedDigitError

app = Flask(__name__)
# run keys are ordered by position in the input
app.json.sort_keys = False
_engine: Engine | None = None


def _get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = Engine()
        _engine.load(CFG.WORDLIST_URL)
    return _engine


@app.errorhandler(DictionaryLoadError)
def _dictionary_unavailable(exc: DictionaryLoadError):
    body = {"error": exc.message, "source": exc.source, "status": exc.status}
    return jsonify(body), 503


@app.errorhandler(UnmappedDigitError)
def _bad_digits(exc: UnmappedDigitError):
    return jsonify({"error": str(exc)}), 400


# ---------- API ----------
@app.get("/api/expand")
def api_expand():
    q = request.args.get("q", "", type=str)
    # expansion needs no word set
    return jsonify((_engine or Engine()).expand(q))


@app.get("/api/valid")
def api_valid():
    q = request.args.get("q", "", type=str)
    return jsonify(_get_engine().filter_valid(q))


@app.get("/api/resolve")
def api_resolve():
    q = request.args.get("q", "", type=str)
    return jsonify(_get_engine().resolve(q).to_dict())


@app.get("/health")
def health():
    return jsonify({"ok": True, "engine": _engine is not None})


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask JSON API on top of Engine")
    ap.add_argument("--words", default=CFG.WORDLIST_URL)
    ap.add_argument("--timeout", type=float, default=None)
    ap.add_argument("--strict", action="store_true")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine(strict=args.strict or None)
    try:
        _engine.load(args.words, timeout=args.timeout, verbose=args.verbose)
    except DictionaryLoadError as exc:
        print(f"error: dictionary unavailable: {exc}", file=sys.stderr)
        _engine.shutdown()
        return 2

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
