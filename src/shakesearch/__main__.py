from __future__ import annotations
import argparse, os, json
from shakesearch import Engine, LoadError
from shakesearch import config as CFG
from shakesearch.search import CONTEXT_MODES

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="ShakeSearch CLI (Engine-backed)")
    p.add_argument("--corpus", default=CFG.CORPUS_PATH, help="Corpus text file")
    p.add_argument("--cache", default=None, help="Pickle path for engine cache (loaded if present)")
    p.add_argument("--rebuild", action="store_true", help="Ignore an existing --cache and rebuild it")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--limit", type=int, default=CFG.DEFAULT_LIMIT, help="Max results (-1 = all)")
    p.add_argument("--context", choices=CONTEXT_MODES, default=CFG.CONTEXT_MODE)
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    eng = Engine()
    try:
        if args.cache and not args.rebuild and os.path.exists(args.cache):
            eng.load(args.cache, verbose=args.verbose)
        else:
            eng.build(args.corpus, cache=args.cache, verbose=args.verbose)
    except LoadError as exc:
        print(f"error: {exc}")
        return 1

    try:
        def run_query(q: str):
            if args.json:
                rows = eng.search(q, limit=args.limit, context=args.context)
                print(json.dumps(rows, ensure_ascii=False, indent=2))
                return
            hits = eng.hits(q, limit=args.limit, context=args.context)
            if not hits:
                print("(no matches)"); return
            original = eng.corpus.original
            print("#    Offset     Context            Paragraph")
            for i, h in enumerate(hits, 1):
                ctx = f"[{h.open},{h.close})"
                text = " ".join(original[h.open:h.close].decode("utf-8", errors="replace").split())
                print(f"{i:<4} {h.offset:<10} {ctx:<18} {text[:70]}")

        if args.q:
            run_query(args.q)

        if args.repl:
            print("Type a query (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                run_query(q)

        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
