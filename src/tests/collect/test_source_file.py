import logging

import pytest

from src.main.collect.source_file import SourceFile
from src.main.complexity.analyzer import Analyzer


def test_requires_path_or_code():
    with pytest.raises(ValueError):
        SourceFile()


def test_from_path_reads_file(tmp_path):
    f = tmp_path / "app.js"
    f.write_text("function go() { run(); }", encoding="utf-8")
    source = SourceFile.from_path(f)
    assert source.code == "function go() { run(); }"
    assert source.name == str(f)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        SourceFile.from_path(tmp_path / "missing.js")


def test_analyze_collects_records_in_creation_order():
    source = SourceFile(code="function a() { function b() {} }\nvar c = function() {};")
    records = source.analyze()
    assert records is source.records
    assert [r.signature() for r in records] == ["*", "a", "b", "c"]
    assert source.root() is records[0]
    assert source.score() == 3 + 3 + 3


def test_empty_source_has_no_records():
    source = SourceFile(code="")
    assert source.ast() is None
    assert source.analyze() == []
    assert source.root() is None
    assert source.score() == 0


def test_reanalysis_replaces_records():
    source = SourceFile(code="function a() {}")
    source.analyze()
    source.analyze(Analyzer())
    assert len(source.records) == 2


def test_ast_is_cached():
    source = SourceFile(code="a();")
    assert source.ast() is source.ast()


def test_to_json():
    source = SourceFile(code="\nfunction foo() { if (a) { bar(); } else { baz(); } }")
    source.analyze()
    assert source.to_json() == [
        {"score": 25, "signature": "*", "location": 0},
        {"score": 22, "signature": "foo", "location": 2},
    ]


def test_syntax_errors_are_logged(caplog):
    source = SourceFile(code="function broken( { if (a) {}")
    with caplog.at_level(logging.WARNING, logger="src.main.collect.source_file"):
        source.analyze()
    assert "syntax errors" in caplog.text
    assert source.records


@pytest.mark.parametrize(
    "code",
    [
        pytest.param("   \n\t", id="whitespace"),
        pytest.param("// nothing here\n", id="comment"),
    ],
)
def test_blank_program_still_has_root(code):
    records = SourceFile(code=code).analyze()
    assert [r.signature() for r in records] == ["*"]
    assert records[0].score() == 0
