import os

import pytest

from dummygen import generator
from dummygen.config import Settings
from dummygen.generator import (
    GenerationRequest,
    generate_files,
    output_path,
    resolve_filename,
)


def test_resolve_filename_placeholder():
    assert resolve_filename("dummy{n}", 2, 3) == "dummy2"
    assert resolve_filename("{n}-copy-{n}", 4, 5) == "4-copy-4"


def test_resolve_filename_single_without_placeholder():
    assert resolve_filename("report", 1, 1) == "report"


def test_resolve_filename_suffix_for_many():
    assert resolve_filename("report", 3, 5) == "report3"


def test_output_path_uses_configured_dir(tmp_path):
    settings = Settings(output_dir=str(tmp_path))
    assert output_path(settings, "a", "txt") == os.path.join(str(tmp_path), "a.txt")


def test_output_path_defaults_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert output_path(Settings(), "a", "bin") == os.path.join(os.getcwd(), "a.bin")


def test_request_normalizes_extension():
    req = GenerationRequest.create(".TXT", 10, "f")
    assert req.extension == "txt"
    assert req.image_dimensions is None


@pytest.mark.parametrize("kwargs", [
    dict(extension="", size_bytes=1, filename_template="f"),
    dict(extension="txt", size_bytes=-1, filename_template="f"),
    dict(extension="txt", size_bytes=1, filename_template="f", count=0),
    dict(extension="txt", size_bytes=1, filename_template=""),
    dict(extension="png", size_bytes=1, filename_template="f"),
    dict(extension="png", size_bytes=1, filename_template="f", width=0, height=5),
])
def test_request_validation(kwargs):
    with pytest.raises(ValueError):
        GenerationRequest.create(**kwargs)


def test_request_is_immutable():
    req = GenerationRequest.create("txt", 10, "f")
    with pytest.raises(AttributeError):
        req.count = 4


def test_generates_numbered_raw_files(tmp_path, capsys):
    req = GenerationRequest.create("txt", 2048, "dummy{n}", count=3)
    results = generate_files(req, Settings(output_dir=str(tmp_path)))

    assert sorted(os.listdir(tmp_path)) == ["dummy1.txt", "dummy2.txt", "dummy3.txt"]
    assert all(r.ok and r.size == 2048 for r in results)
    out = capsys.readouterr().out
    assert "-> generating:" in out
    assert out.rstrip().endswith("Done.")


def test_failure_does_not_stop_batch(tmp_path, monkeypatch, capsys):
    real_write_raw = generator.write_raw

    def flaky_write_raw(path, size_bytes, chunk_size):
        if os.path.basename(path) == "dummy2.bin":
            raise OSError("disk full")
        return real_write_raw(path, size_bytes, chunk_size=chunk_size)

    monkeypatch.setattr(generator, "write_raw", flaky_write_raw)
    req = GenerationRequest.create("bin", 10, "dummy{n}", count=3)
    results = generate_files(req, Settings(output_dir=str(tmp_path)))

    assert sorted(os.listdir(tmp_path)) == ["dummy1.bin", "dummy3.bin"]
    assert [r.ok for r in results] == [True, False, True]
    assert isinstance(results[1].error, OSError)
    assert results[1].size is None
    assert "Done." in capsys.readouterr().out


def test_dispatches_images(tmp_path):
    req = GenerationRequest.create("png", 0, "img{n}", count=2, width=8, height=6)
    results = generate_files(req, Settings(output_dir=str(tmp_path)))
    assert sorted(os.listdir(tmp_path)) == ["img1.png", "img2.png"]
    assert all(r.ok for r in results)
    assert (tmp_path / "img1.png").read_bytes() == (tmp_path / "img2.png").read_bytes()


def test_dispatches_spreadsheets(tmp_path, monkeypatch):
    calls = []
    monkeypatch.setattr(generator, "write_xlsx",
                        lambda path, size: calls.append((path, size)) or open(path, "wb").close())
    req = GenerationRequest.create("XLSX", 64, "sheet", count=1)
    generate_files(req, Settings(output_dir=str(tmp_path)))
    assert calls == [(os.path.join(str(tmp_path), "sheet.xlsx"), 64)]


def test_uses_configured_chunk_size(tmp_path, monkeypatch):
    seen = {}

    def fake_write_raw(path, size_bytes, chunk_size):
        seen["chunk_size"] = chunk_size
        open(path, "wb").close()

    monkeypatch.setattr(generator, "write_raw", fake_write_raw)
    req = GenerationRequest.create("dat", 1, "x")
    generate_files(req, Settings(output_dir=str(tmp_path), chunk_size=4096))
    assert seen["chunk_size"] == 4096
