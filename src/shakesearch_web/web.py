from __future__ import annotations
import argparse
import logging
import os

from flask import Flask, Response, jsonify, request, send_from_directory

from shakesearch import config as CFG
from shakesearch.engine import Engine
from shakesearch.errors import LoadError, SerializationError, ValidationError

log = logging.getLogger(__name__)


def _text(body: str, status: int) -> Response:
    return Response(body, status=status, mimetype="text/plain")


def _parse_limit(raw: str | None) -> int:
    if raw is None or raw == "":
        return CFG.DEFAULT_LIMIT
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"invalid limit {raw!r}: expected an integer") from None


def create_app(engine: Engine, static_dir: str | None = None) -> Flask:
    """
    Flask app over an already built engine.
    The engine is read-only from here on; every handler shares the same instance.
    """
    static_root = os.path.abspath(static_dir or CFG.STATIC_DIR)
    app = Flask(__name__, static_folder=None)

    @app.errorhandler(ValidationError)
    def _bad_request(exc: ValidationError):
        log.info("Rejected request %s: %s", request.full_path, exc)
        return _text(str(exc), 400)

    @app.errorhandler(SerializationError)
    def _encoding_failure(exc: SerializationError):
        log.error("Couldn't encode results for %s", request.full_path, exc_info=exc)
        return _text("encoding failure", 500)

    # ---------- API ----------
    @app.get("/search")
    def search():
        q = request.args.get("q", "", type=str)
        if not q:
            raise ValidationError("missing search query in URL params")
        limit = _parse_limit(request.args.get("limit"))
        results = engine.search(q, limit=limit)
        try:
            return jsonify(results)
        except TypeError as exc:
            raise SerializationError(str(exc)) from exc

    @app.get("/healthz")
    def healthz():
        return jsonify({"ok": True, **engine.stats()})

    # ---------- static ----------
    @app.get("/")
    def home():
        return send_from_directory(static_root, "index.html")

    @app.get("/<path:filename>")
    def static_files(filename: str):
        return send_from_directory(static_root, filename)

    return app


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the ShakeSearch web service")
    ap.add_argument("--corpus", default=CFG.CORPUS_PATH)
    ap.add_argument("--cache", default=None, help="Engine cache; loaded if present, written otherwise")
    ap.add_argument("--static", dest="static_dir", default=CFG.STATIC_DIR)
    ap.add_argument("--host", default=CFG.HOST)
    ap.add_argument("--port", type=int, default=CFG.PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    engine = Engine()
    try:
        if args.cache and os.path.exists(args.cache):
            engine.load(args.cache, verbose=args.verbose)
        else:
            engine.build(args.corpus, cache=args.cache, verbose=args.verbose)
    except LoadError as exc:
        log.error("Startup aborted: %s", exc)
        return 1

    app = create_app(engine, static_dir=args.static_dir)
    print(f"Listening on port {args.port}...")
    try:
        app.run(host=args.host, port=args.port, debug=False, threaded=True)
    finally:
        engine.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
