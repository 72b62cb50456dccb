import json
from pathlib import Path

from typer.testing import CliRunner

from cardstamp.cli import app

runner = CliRunner()


def test_normalize_command_prints_json(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "layout.yml").write_text("title:\n  x: 25\n  y: 40\n", encoding="utf-8")
    opts = tmp_path / "opts.yml"
    opts.write_text("layout: ':title'\ncolor: '#fff'\n", encoding="utf-8")

    result = runner.invoke(
        app,
        [
            "normalize",
            str(opts),
            "--cards",
            "2",
            "--layout",
            str(tmp_path / "layout.yml"),
            "--need",
            "layout,expand,range,color",
        ],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload == {
        "layout": ["title", "title"],
        "x": [25, 25],
        "y": [40, 40],
        "color": ["#FFFFFFFF", "#FFFFFFFF"],
        "range": [0, 1],
    }


def test_normalize_command_reports_domain_errors(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    opts = tmp_path / "opts.yml"
    opts.write_text("color: nonexist\n", encoding="utf-8")

    result = runner.invoke(app, ["normalize", str(opts), "--cards", "1", "--need", "color"])

    assert result.exit_code == 1
    assert "unknown color name: nonexist" in result.output


def test_init_config_writes_file(tmp_path: Path) -> None:
    target = tmp_path / "config.yml"
    result = runner.invoke(app, ["init-config", "--path", str(target)])
    assert result.exit_code == 0
    assert target.exists()


def test_layouts_command_prints_merged_table(tmp_path: Path) -> None:
    layout = tmp_path / "layout.yml"
    layout.write_text("title:\n  x: 25\nsubtitle:\n  extends: title\n  y: 60\n", encoding="utf-8")

    result = runner.invoke(app, ["layouts", str(layout)])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"title": {"x": 25}, "subtitle": {"x": 25, "y": 60}}


def test_normalize_command_reports_malformed_options(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    opts = tmp_path / "opts.yml"
    opts.write_text("color: [unclosed\n", encoding="utf-8")

    result = runner.invoke(app, ["normalize", str(opts), "--cards", "1", "--need", "color"])

    assert result.exit_code == 1
    assert "cannot parse option file" in result.output
    assert isinstance(result.exception, SystemExit)


def test_normalize_command_keeps_need_names_verbatim(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    opts = tmp_path / "opts.yml"
    opts.write_text("x: 1\n", encoding="utf-8")

    result = runner.invoke(app, ["normalize", str(opts), "--cards", "1", "--need", "Range"])

    assert result.exit_code == 1
    assert "unknown option needs: Range" in result.output
