import pytest

from chiton.simple_run import main, run_search


def test_run_search_reports_cost(sample_file, capsys):
    cost = run_search({"map": str(sample_file), "algorithm": "indexed"})

    out = capsys.readouterr().out
    assert cost == 40
    assert "Algorithm        : indexed" in out
    assert "Size             : 10x10" in out
    assert "Lowest risk      : 40" in out


def test_run_search_expanded_with_image(sample_file, tmp_path, capsys):
    image = tmp_path / "cave.png"
    cost = run_search({"map": str(sample_file), "expand": True, "image": str(image)})

    out = capsys.readouterr().out
    assert cost == 315
    assert "Size             : 50x50 (expanded)" in out
    assert image.exists()


def test_run_search_unknown_algorithm(sample_file):
    with pytest.raises(ValueError, match="Unknown algorithm"):
        run_search({"map": str(sample_file), "algorithm": "greedy"})


def test_main_solves_both_parts(sample_file, capsys):
    assert main([str(sample_file)]) == 0

    out = capsys.readouterr().out
    assert "--- Part 1 ---" in out
    assert "Lowest risk      : 40" in out
    assert "--- Part 2 ---" in out
    assert "Lowest risk      : 315" in out


def test_main_single_part(sample_file, capsys):
    assert main([str(sample_file), "--part", "2", "--algorithm", "indexed"]) == 0

    out = capsys.readouterr().out
    assert "--- Part 1 ---" not in out
    assert "Lowest risk      : 315" in out


def test_main_malformed_input(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("12\n3x\n")

    assert main([str(path)]) == 1
    assert "non-digit character 'x'" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt")]) == 1
    assert "error:" in capsys.readouterr().err


def test_main_non_ascii_input(tmp_path, capsys):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"12\n3\xff\n")

    assert main([str(path)]) == 1
    assert "non-ASCII" in capsys.readouterr().err


def test_main_writes_one_image_per_part(sample_file, tmp_path, capsys):
    image = tmp_path / "cave.png"

    assert main([str(sample_file), "--image", str(image)]) == 0

    out = capsys.readouterr().out
    assert (tmp_path / "cave_part1.png").exists()
    assert (tmp_path / "cave_part2.png").exists()
    assert not image.exists()
    assert "Saved map to" in out


def test_main_single_part_keeps_image_name(sample_file, tmp_path, capsys):
    image = tmp_path / "cave.png"

    assert main([str(sample_file), "--part", "1", "--image", str(image)]) == 0
    assert image.exists()
