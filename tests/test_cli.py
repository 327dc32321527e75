import pytest

import intergeo_ir.__main__ as cli
from intergeo_ir import load_document

SCENE = (
    "<construction><elements>"
    '<point id="A"><euclidean_coordinates><double>0</double><double>0</double></euclidean_coordinates></point>'
    '<point id="B"><euclidean_coordinates><double>1</double><double>0</double></euclidean_coordinates></point>'
    '<conic id="k"><matrix><double>1</double></matrix></conic>'
    "</elements><constraints>"
    "<line_through_two_points><line>L</line><point>A</point><point>B</point></line_through_two_points>"
    "</constraints></construction>"
)


def test_main_prints_objects_and_diagnostics(tmp_path, capsys):
    path = tmp_path / "intergeo.xml"
    path.write_text(SCENE, encoding="utf-8")

    cli.main([str(path), "--log-level", "ERROR"])

    out = capsys.readouterr().out
    assert "  A: point (0.000000, 0.000000)" in out
    assert "  L: line " in out
    assert "[unsupported_element] Not implemented: conic k" in out


def test_main_strict_exit_on_diagnostics(tmp_path):
    path = tmp_path / "intergeo.xml"
    path.write_text(SCENE, encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(path), "--strict-exit", "--log-level", "ERROR"])
    assert excinfo.value.code == 2


def test_main_exits_with_error_on_construction_failure(monkeypatch, capsys):
    broken = SCENE.replace("<point>B</point>", "<point>Z</point>")
    monkeypatch.setattr(cli, "load_document", lambda path: load_document(broken))

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["scene.i2g", "--log-level", "ERROR"])

    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert "Import failed at line_through_two_points (Z)" in out
    assert "  B: (not constructed)" in out
