import json

import pytest

from cli import main


def test_cli_build(tmp_path, capsys):
    src = tmp_path / "in"
    src.mkdir()
    (src / "a.vyint").write_text("a")
    (src / "b.mp3").write_text("b")
    out = tmp_path / "out"

    code = main(["--in", str(src), "--out", str(out), "--ignoreSound", "--verbose", "--run-id", "cli-run"])

    assert code == 0
    manifest = json.loads((out / "resource.json").read_text())
    assert len(manifest["interface"]) == 1
    assert manifest["sound"] == []
    assert '"run_id": "cli-run"' in capsys.readouterr().out


def test_cli_missing_in_flag(tmp_path):
    assert main(["--out", str(tmp_path / "out")]) == 2
    assert not (tmp_path / "out").exists()


def test_cli_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert "resource-builder" in capsys.readouterr().out


def test_cli_settings_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("RESOURCE_BUILDER_IDENTIFIER_LENGTH", "4")
    src = tmp_path / "in"
    src.mkdir()
    (src / "x.vym").write_text("x")

    assert main(["--in", str(src), "--out", str(tmp_path / "out")]) == 0

    manifest = json.loads((tmp_path / "out" / "resource.json").read_text())
    assert len(manifest["map"][0]["resourceIdentifier"]) == len("abcd.vym")


@pytest.mark.parametrize("flag", ["--in", "--out"])
def test_cli_blank_root_aborts(tmp_path, monkeypatch, flag):
    src = tmp_path / "in"
    src.mkdir()
    (src / "a.vyi").write_text("a")
    workdir = tmp_path / "cwd"
    (workdir / "resources" / "icon").mkdir(parents=True)
    (workdir / "resources" / "icon" / "precious.bin").write_text("keep me")
    monkeypatch.chdir(workdir)
    roots = {"--in": str(src), "--out": str(tmp_path / "out")}
    roots[flag] = ""

    code = main(["--in", roots["--in"], "--out", roots["--out"]])

    assert code == 2
    assert (workdir / "resources" / "icon" / "precious.bin").exists()
    assert not (workdir / "resource.json").exists()
    assert not (tmp_path / "out").exists()


@pytest.mark.parametrize("option", ["--workers", "--identifier-length"])
def test_cli_invalid_number_returns_aborted(tmp_path, option):
    src = tmp_path / "in"
    src.mkdir()

    code = main(["--in", str(src), "--out", str(tmp_path / "out"), option, "0"])

    assert code == 2
    assert not (tmp_path / "out").exists()
