import json
from pathlib import Path
import pytest
from shakesearch.__main__ import main as cli_main
from shakesearch_web.web import main as web_main

def _seed(tmp: Path) -> str:
    path = tmp / "completeworks.txt"
    path.write_bytes(b"To be, or not to be.\r\nThat is the question.")
    return str(path)

@pytest.mark.e2e
def test_cli_single_query_json(tmp_path: Path, capsys):
    rc = cli_main(["--corpus", _seed(tmp_path), "--q", "be", "--json"])
    assert rc == 0
    rows = json.loads(capsys.readouterr().out)
    assert len(rows) == 2 and all("<b>be</b>" in r for r in rows)

@pytest.mark.e2e
def test_cli_table_and_no_matches(tmp_path: Path, capsys):
    corpus = _seed(tmp_path)
    assert cli_main(["--corpus", corpus, "--q", "question"]) == 0
    out = capsys.readouterr().out
    assert "[22,43)" in out and "That is the question." in out
    assert cli_main(["--corpus", corpus, "--q", "nobler"]) == 0
    assert "(no matches)" in capsys.readouterr().out

@pytest.mark.e2e
def test_cli_writes_then_reuses_cache(tmp_path: Path, capsys):
    corpus = _seed(tmp_path)
    cache = tmp_path / "engine.pkl"
    assert cli_main(["--corpus", corpus, "--cache", str(cache)]) == 0
    assert cache.exists()
    # corpus gone: the cache alone must answer
    Path(corpus).unlink()
    assert cli_main(["--corpus", corpus, "--cache", str(cache), "--q", "be", "--json"]) == 0
    assert len(json.loads(capsys.readouterr().out)) == 2

@pytest.mark.e2e
def test_missing_corpus_is_fatal(tmp_path: Path):
    missing = str(tmp_path / "nope.txt")
    assert cli_main(["--corpus", missing, "--q", "be"]) == 1
    assert web_main(["--corpus", missing]) == 1
