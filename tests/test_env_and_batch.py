from pathlib import Path

import cv2
import numpy as np
import pytest

import photo4k.resizer as resizer
from photo4k.errors import DecodeError


def _write_image(path: Path, width: int = 320, height: int = 240) -> None:
    cv2.imwrite(str(path), np.full((height, width, 3), 120, dtype=np.uint8))


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    # Empty values count as unset and are restored after the test.
    for var in (resizer.WORKERS_ENV_VAR, resizer.SCAN_WORKERS_ENV_VAR, resizer.DEBUG_ENV_VAR):
        monkeypatch.setenv(var, "")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_load_dotenv_parses_comments_exports_and_quotes(tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "\n".join(
            [
                "# comment",
                "export PHOTO4K_WORKERS='4'",
                'PHOTO4K_DEBUG="yes"',
                "INVALID_LINE",
                "  EMPTY = spaced-value  ",
            ]
        ),
        encoding="utf-8",
    )

    parsed = resizer._load_dotenv(env_file)

    assert parsed["PHOTO4K_WORKERS"] == "4"
    assert parsed["PHOTO4K_DEBUG"] == "yes"
    assert parsed["EMPTY"] == "spaced-value"
    assert "INVALID_LINE" not in parsed
    assert resizer._load_dotenv(tmp_path / "missing.env") == {}


def test_resolve_workers_defaults_and_clamps(monkeypatch, clean_env) -> None:
    assert resizer.resolve_workers() == 1

    monkeypatch.setenv(resizer.WORKERS_ENV_VAR, "64")
    assert resizer.resolve_workers() == resizer.MAX_WORKERS

    monkeypatch.setenv(resizer.WORKERS_ENV_VAR, "0")
    assert resizer.resolve_workers() == 1

    monkeypatch.setenv(resizer.WORKERS_ENV_VAR, "not-a-number")
    assert resizer.resolve_workers() == 1

    monkeypatch.setenv(resizer.WORKERS_ENV_VAR, "3")
    assert resizer.resolve_workers() == 3


def test_resolve_scan_workers_reads_env_file_in_search_dir(monkeypatch, clean_env) -> None:
    search = clean_env / "photos"
    search.mkdir()
    (search / ".env").write_text("PHOTO4K_SCAN_WORKERS=6\n", encoding="utf-8")

    assert resizer.resolve_scan_workers(search_dir=search) == 6


def test_environment_takes_precedence_over_env_file(monkeypatch, clean_env) -> None:
    (clean_env / ".env").write_text("PHOTO4K_WORKERS=8\n", encoding="utf-8")
    monkeypatch.setenv(resizer.WORKERS_ENV_VAR, "2")

    assert resizer.resolve_workers(search_dir=clean_env) == 2


@pytest.mark.parametrize(
    "raw,expected",
    [("1", True), ("yes", True), ("ON", True), ("0", False), ("off", False), ("maybe", False)],
)
def test_resolve_debug_boolean_values(monkeypatch, clean_env, raw, expected) -> None:
    monkeypatch.setenv(resizer.DEBUG_ENV_VAR, raw)

    assert resizer.resolve_debug() is expected


def test_expand_path_expands_home(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    assert resizer.expand_path("~/Photos/Input") == tmp_path / "Photos" / "Input"
    assert resizer.expand_path("relative").is_absolute()


def test_find_images_filters_extensions_and_skips_subfolders(tmp_path) -> None:
    for name in ("b.JPG", "a.png", "c.heic", "d.NEF", "notes.txt", "clip.mp4", "e.tiff"):
        (tmp_path / name).write_bytes(b"x")
    (tmp_path / "nested.jpg").mkdir()
    (tmp_path / "nested.jpg" / "inner.jpg").write_bytes(b"x")

    found = resizer.find_images(tmp_path)

    assert [p.name for p in found] == ["a.png", "b.JPG", "c.heic", "d.NEF", "e.tiff"]


def test_run_batch_converts_good_files_and_counts_errors(tmp_path, capsys) -> None:
    input_dir = tmp_path / "input"
    output_dir = tmp_path / "output" / "nested"
    input_dir.mkdir()
    _write_image(input_dir / "a.jpg")
    _write_image(input_dir / "b.png", width=500, height=200)
    (input_dir / "bad.jpg").write_bytes(b"garbage")
    (input_dir / "readme.txt").write_text("skip me", encoding="utf-8")

    summary = resizer.run_batch(
        str(input_dir), str(output_dir), workers=1, scan_workers=1, debug=False, show_progress=False
    )

    assert summary.processed == 2
    assert summary.errors == 1
    assert sorted(p.name for p in output_dir.iterdir()) == ["a_4K.jpg", "b_4K.jpg"]
    assert summary.failures[0][0].name == "bad.jpg"

    out = capsys.readouterr().out
    assert "✅ Processed: a.jpg" in out
    assert "✅ Processed: b.png" in out
    assert "❌ Error on bad.jpg:" in out
    assert "readme.txt" not in out
    assert "🎉 Processing complete! 2 files processed, 1 errors" in out


def test_run_batch_parallel_workers_record_every_file(tmp_path, monkeypatch, capsys) -> None:
    input_dir = tmp_path / "input"
    output_dir = tmp_path / "output"
    input_dir.mkdir()
    names = [f"img_{i}.jpg" for i in range(6)]
    for name in names:
        (input_dir / name).write_bytes(b"x")

    seen = []

    def fake_convert_file(src, output_folder, config, debug=False):
        seen.append(src.name)
        assert config.scan_workers == 2
        if src.name == "img_3.jpg":
            raise DecodeError("corrupt")
        dest = output_folder / resizer.output_name(src)
        dest.write_bytes(b"jpeg")
        return dest

    monkeypatch.setattr(resizer, "convert_file", fake_convert_file)

    summary = resizer.run_batch(
        str(input_dir), str(output_dir), workers=3, scan_workers=2, debug=False, show_progress=False
    )

    assert sorted(seen) == names
    assert summary.processed == 5
    assert summary.errors == 1
    assert summary.failures == [(input_dir / "img_3.jpg", "corrupt")]
    out = capsys.readouterr().out
    assert "Workers: 3 file(s), 2 scan thread(s)" in out
    assert "❌ Error on img_3.jpg: corrupt" in out


def test_run_batch_survives_unexpected_exceptions(tmp_path, monkeypatch) -> None:
    input_dir = tmp_path / "input"
    input_dir.mkdir()
    (input_dir / "a.jpg").write_bytes(b"x")
    (input_dir / "b.jpg").write_bytes(b"x")

    def flaky_convert_file(src, output_folder, config, debug=False):
        if src.name == "a.jpg":
            raise RuntimeError("boom")
        return output_folder / "b_4K.jpg"

    monkeypatch.setattr(resizer, "convert_file", flaky_convert_file)

    summary = resizer.run_batch(
        str(input_dir), str(tmp_path / "out"), workers=1, scan_workers=1, debug=False, show_progress=False
    )

    assert summary.processed == 1
    assert summary.errors == 1


def test_run_batch_uses_env_configuration(tmp_path, monkeypatch, clean_env, capsys) -> None:
    input_dir = tmp_path / "input"
    input_dir.mkdir()
    (input_dir / ".env").write_text("PHOTO4K_WORKERS=2\nPHOTO4K_SCAN_WORKERS=5\n", encoding="utf-8")

    resizer.run_batch(str(input_dir), str(tmp_path / "out"), show_progress=False)

    assert "Workers: 2 file(s), 5 scan thread(s)" in capsys.readouterr().out


def test_run_batch_missing_input_folder_exits(tmp_path, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        resizer.run_batch(str(tmp_path / "missing"), str(tmp_path / "out"), show_progress=False)

    assert exc.value.code == 1
    assert "❌ Source folder does not exist:" in capsys.readouterr().out
    assert not (tmp_path / "out").exists()


def test_env_file_values_are_not_exported_to_the_process(monkeypatch, clean_env, capsys) -> None:
    (clean_env / ".env").write_text("PHOTO4K_SCAN_WORKERS=4\n", encoding="utf-8")

    assert resizer.resolve_scan_workers() == 4
    assert resizer.os.environ[resizer.SCAN_WORKERS_ENV_VAR] == ""
    assert "PHOTO4K_SCAN_WORKERS=4 (from" in capsys.readouterr().out
