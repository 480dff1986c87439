import json

import pytest
from typer.testing import CliRunner

from urlcanon.cli import app


runner = CliRunner()


@pytest.fixture(autouse=True)
def log_dir(tmp_path, monkeypatch):
	monkeypatch.setenv("URLCANON_LOG_DIR", str(tmp_path / "logs"))


def test_canonicalize_command():
	res = runner.invoke(app, ["canonicalize", "www.google.com", "http://evil.com/foo#bar#baz"])
	assert res.exit_code == 0
	assert res.output.split() == ["http://www.google.com/", "http://evil.com/foo"]


def test_canonicalize_full_escape_command():
	res = runner.invoke(app, ["canonicalize", "--full-escape", "http://evil.com/foo;"])
	assert res.exit_code == 0
	assert "http%3A%2F%2Fevil.com%2Ffoo%3B" in res.output


def test_normalize_command_failure_exit_code():
	res = runner.invoke(app, ["normalize", "mailto:x@example.com"])
	assert res.exit_code == 1


def test_absolute_command():
	res = runner.invoke(app, ["absolute", "http://WebReference.com/html/", "../experts/"])
	assert res.exit_code == 0
	assert res.output.strip() == "http://webreference.com/experts/"


def test_hostname_command():
	res = runner.invoke(app, ["hostname", "http://www.may.in/wp/"])
	assert "may.in" in res.output.splitlines()
	res = runner.invoke(app, ["hostname", "--keep-www", "http://www.may.in/wp/"])
	assert "www.may.in" in res.output.splitlines()
	res = runner.invoke(app, ["hostname", "--registered", "http://a.b.example.co.uk/"])
	assert "example.co.uk" in res.output.splitlines()


def test_query_command():
	res = runner.invoke(app, ["query", "0;URL=http://verifrom.com"])
	assert res.exit_code == 0
	assert res.output.splitlines() == ["0", "URL=http://verifrom.com"]


def test_batch_command(tmp_path):
	src = tmp_path / "urls.txt"
	out = tmp_path / "out" / "canonical.jsonl"
	src.write_text("www.google.com\n\nmailto:x\nhttp://3279880203/blah\n", encoding="utf-8")
	res = runner.invoke(app, ["batch", str(src), str(out)])
	assert res.exit_code == 0
	rows = [json.loads(line) for line in out.read_text(encoding="utf-8").splitlines()]
	assert [r["canonical"] for r in rows] == ["http://www.google.com/", None, "http://195.127.0.11/blah"]
	assert rows[0]["hostname"] == "google.com"


def test_print_config(monkeypatch):
	monkeypatch.setenv("URLCANON_DEFAULT_SCHEME", "https")
	res = runner.invoke(app, ["print-config"])
	assert res.exit_code == 0
	assert "default_scheme" in res.output
	assert "https" in res.output


def test_batch_keeps_raw_bytes(tmp_path):
	src = tmp_path / "urls.txt"
	out = tmp_path / "canonical.jsonl"
	src.write_bytes(b"http://host/\xe9\nhttp://host/caf\xc3\xa9\n")
	res = runner.invoke(app, ["batch", str(src), str(out)])
	assert res.exit_code == 0
	lines = out.read_text(encoding="utf-8", errors="surrogateescape").splitlines()
	rows = [json.loads(line) for line in lines]
	assert [r["canonical"] for r in rows] == ["http://host/%E9", "http://host/caf%C3%A9"]
	assert b'"url": "http://host/\xe9"' in out.read_bytes()
