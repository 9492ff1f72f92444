import os
import subprocess
import sys
from pathlib import Path

import pytest

import dirsort
from sorter import FatalSortError


def test_parser_accepts_optional_folder():
    parser = dirsort.build_parser()
    assert parser.parse_args([]).folder is None
    assert parser.parse_args(["some/dir"]).folder == "some/dir"


def test_parser_rejects_extra_arguments():
    with pytest.raises(SystemExit) as exc:
        dirsort.build_parser().parse_args(["one", "two"])
    assert exc.value.code == 2


def test_resolve_directory_uses_argument_verbatim():
    assert dirsort.resolve_directory("does/not/exist", {}) == Path("does/not/exist")


def test_resolve_directory_defaults_to_documents():
    assert dirsort.resolve_directory(None, {"HOME": "/home/sam"}) == Path("/home/sam/Documents")


def test_resolve_directory_without_home():
    with pytest.raises(FatalSortError, match="HOME environment variable not set"):
        dirsort.resolve_directory(None, {})


def test_main_sorts_given_folder(tmp_path, capsys):
    (tmp_path / "a.jpg").write_text("x")
    (tmp_path / "c.xyz").write_text("x")

    assert dirsort.main([str(tmp_path)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "Done"
    assert "Moved a.jpg to Images folder" in out
    assert "Skipping c.xyz" in out
    assert (tmp_path / "Images" / "a.jpg").is_file()


def test_main_defaults_to_home_documents(tmp_path, monkeypatch, capsys):
    docs = tmp_path / "Documents"
    docs.mkdir()
    (docs / "b.pdf").write_text("x")
    monkeypatch.setenv("HOME", str(tmp_path))

    assert dirsort.main([]) == 0

    assert (docs / "Documents" / "b.pdf").is_file()
    assert capsys.readouterr().out.splitlines()[-1] == "Done"


def test_main_missing_folder_prints_done(tmp_path, capsys):
    assert dirsort.main([str(tmp_path / "missing")]) == 0
    assert capsys.readouterr().out == "Done\n"
    assert list(tmp_path.iterdir()) == []


def test_main_without_home_exits(monkeypatch, capsys):
    monkeypatch.delenv("HOME", raising=False)

    with pytest.raises(SystemExit) as exc:
        dirsort.main([])

    assert exc.value.code == "HOME environment variable not set"
    assert "Done" not in capsys.readouterr().out


def test_main_exits_on_conflict(tmp_path, capsys):
    (tmp_path / "Music").mkdir()
    (tmp_path / "Music" / "s.wav").write_text("old")
    (tmp_path / "s.wav").write_text("new")

    with pytest.raises(SystemExit) as exc:
        dirsort.main([str(tmp_path)])

    assert "already exists" in exc.value.code
    assert "Done" not in capsys.readouterr().out


def write_raw_names(folder, *raw_names):
    for raw in raw_names:
        try:
            with open(os.path.join(os.fsencode(folder), raw), "wb") as f:
                f.write(b"x")
        except (OSError, ValueError):
            pytest.skip("filesystem does not accept undecodable names")


@pytest.mark.skipif(sys.platform == "win32", reason="needs byte file names")
def test_main_survives_undecodable_names(tmp_path, capsys):
    write_raw_names(tmp_path, b"x.\xff", b"\xff.jpg")

    assert dirsort.main([str(tmp_path)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "Done"
    assert "Skipping x.\\xff" in out
    assert "Moved \\xff.jpg to Images folder" in out
    assert os.path.exists(os.path.join(os.fsencode(tmp_path), b"x.\xff"))
    assert os.path.exists(os.path.join(os.fsencode(tmp_path), b"Images", b"\xff.jpg"))


@pytest.mark.skipif(sys.platform == "win32", reason="needs byte file names")
def test_script_prints_undecodable_names_on_utf8_stdout(tmp_path):
    write_raw_names(tmp_path, b"x.\xff", b"\xff.jpg")
    script = Path(dirsort.__file__)
    env = dict(os.environ, PYTHONIOENCODING="utf-8")

    proc = subprocess.run(
        [sys.executable, str(script), str(tmp_path)],
        capture_output=True, env=env, cwd=str(script.parent),
    )

    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.decode("utf-8").splitlines()[-1] == "Done"
