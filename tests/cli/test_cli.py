import pytest

from seqslice.cli import build_parser, main


def test_get_prints_sequence(small_fasta, capsys):
    assert main(["get", str(small_fasta), "3", "6"]) == 0
    assert capsys.readouterr().out == "GTAC\n"


def test_get_caps_and_fasta_output(write_fasta, capsys):
    path = write_fasta(">seq1\nacgt\nac\n")
    assert main(["get", str(path), "1", "6", "--caps", "--fasta-out"]) == 0
    assert capsys.readouterr().out == ">seq1:1-6\nACGT\nAC\n"


def test_get_out_of_bounds_exits_with_error(small_fasta, capsys):
    assert main(["get", str(small_fasta), "1", "7"]) == 1
    assert "seqslice: error:" in capsys.readouterr().err


def test_get_invalid_range(small_fasta, capsys):
    assert main(["get", str(small_fasta), "2", "1"]) == 1
    assert "end (1) must be >= start (2)" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main(["get", str(tmp_path / "missing.fa"), "1", "2"]) == 1
    assert "cannot open FASTA file" in capsys.readouterr().err


def test_info(small_fasta, capsys):
    assert main(["info", str(small_fasta)]) == 0
    out = capsys.readouterr().out
    assert "name\tseq1" in out
    assert "header_length\t6" in out
    assert "line_width\t4" in out


def test_batch(small_fasta, tmp_path, capsys):
    config = tmp_path / "batch.yaml"
    config.write_text(f"fasta: {small_fasta.name}\nregions:\n  - 1-4\n  - {{start: 5, end: 6, name: tail}}\n")
    assert main(["batch", str(config)]) == 0
    assert capsys.readouterr().out == ">seq1:1-4\nACGT\n>tail\nAC\n"


def test_batch_missing_config(tmp_path, capsys):
    assert main(["batch", str(tmp_path / "none.yaml")]) == 1
    assert "Config file not found" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage:" in capsys.readouterr().out


def test_bad_arguments_exit_with_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["get", "x.fa", "one", "2"])
    assert excinfo.value.code == 2
