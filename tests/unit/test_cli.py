"""Unit tests for the run_analysis.py command line entry point."""

import json

import pytest

import run_analysis as cli
from stylometry.engine import StylometryEngine
from stylometry.errors import AnnotationError
from tests.fixtures.fake_annotator import FakeAnnotator, FakeScorer


@pytest.fixture
def corpus_file(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text("The good dog runs. The bad dog sleeps.", encoding="utf-8")
    return str(path)


@pytest.fixture
def fake_engine(monkeypatch):
    """Replace the production engine with in-memory adapters."""
    def build(config):
        return StylometryEngine(config.engine, FakeAnnotator(), FakeScorer())
    monkeypatch.setattr(StylometryEngine, "from_config", staticmethod(build))


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def test_success_writes_report(fake_engine, corpus_file, tmp_path, capsys):
    out = tmp_path / "reports"

    assert cli.main([corpus_file, str(out), "--text"]) == 0

    data = json.loads((out / "result.json").read_text(encoding="utf-8"))
    assert (out / "result.txt").exists()
    assert f"Lexical diversity (MATTR): {data['lexical_diversity_as_MATTR']}" in capsys.readouterr().out


def test_config_file_is_used(fake_engine, corpus_file, tmp_path):
    config_path = tmp_path / "custom.json"
    config_path.write_text(json.dumps({"output": {"directory": str(tmp_path / "from_config")}}))

    assert cli.main([corpus_file, "--config", str(config_path)]) == 0
    assert (tmp_path / "from_config" / "result.json").exists()


def test_missing_config_file(corpus_file, tmp_path):
    assert cli.main([corpus_file, "--config", str(tmp_path / "absent.json")]) == 1


def test_missing_corpus(fake_engine, tmp_path):
    assert cli.main([str(tmp_path / "absent.txt"), str(tmp_path)]) == 1


def test_annotation_failure(monkeypatch, corpus_file, tmp_path):
    def build(config):
        return StylometryEngine(config.engine, FakeAnnotator(fail=True), FakeScorer())
    monkeypatch.setattr(StylometryEngine, "from_config", staticmethod(build))

    assert cli.main([corpus_file, str(tmp_path)]) == 1


def test_annotation_error_is_reported(monkeypatch, corpus_file, tmp_path):
    def fail(**kwargs):
        raise AnnotationError("no model")
    monkeypatch.setattr(cli, "run_analysis", fail)

    assert cli.main([corpus_file]) == 1


@pytest.mark.parametrize("config", [
    {"log_level": "VERBOSE"},
    {"nlp": ["en_core_web_sm"]},
    {"output": {"write_text": "yes"}},
])
def test_invalid_config_exits_with_error(corpus_file, tmp_path, config):
    config_path = tmp_path / "bad.json"
    config_path.write_text(json.dumps(config))

    assert cli.main([corpus_file, "--config", str(config_path)]) == 1
