from fgkhuff.cli import main
from fgkhuff.codec import compress


def test_compress_then_decompress_files(tmp_path):
    original = tmp_path / "in.bin"
    packed = tmp_path / "packed.huff"
    restored = tmp_path / "out.bin"
    data = b"banana bandana " * 50
    original.write_bytes(data)
    assert main(["c", str(original), str(packed)]) == 0
    assert packed.read_bytes() == compress(data)
    assert main(["d", str(packed), str(restored)]) == 0
    assert restored.read_bytes() == data


def test_wrong_argument_count_shows_usage(capsys):
    assert main(["c", "only-one"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_unknown_mode_shows_usage(tmp_path, capsys):
    source = tmp_path / "in.bin"
    source.write_bytes(b"data")
    assert main(["x", str(source), str(tmp_path / "out.bin")]) == 1
    assert "Usage" in capsys.readouterr().err


def test_missing_input_fails(tmp_path, capsys):
    assert main(["c", str(tmp_path / "absent"), str(tmp_path / "out")]) == 1
    assert "open" in capsys.readouterr().err


def test_corrupt_input_fails(tmp_path, capsys):
    bad = tmp_path / "bad.huff"
    bad.write_bytes(b"\x05\x00")
    assert main(["d", str(bad), str(tmp_path / "out.bin")]) == 1
    assert "ERROR" in capsys.readouterr().err


def test_full_mode_word_uses_first_letter(tmp_path):
    source = tmp_path / "in.bin"
    target = tmp_path / "out.huff"
    source.write_bytes(b"abc")
    assert main(["compress", str(source), str(target)]) == 0
    assert target.read_bytes() == compress(b"abc")