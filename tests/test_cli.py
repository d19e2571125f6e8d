"""
End-to-end tests for the command-line entry point.
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

import app
from app import EXIT_CONFIG_FAILURE, EXIT_IO_FAILURE, EXIT_OK, main


@pytest.fixture
def example_fasta(tmp_path):
    path = tmp_path / "example.fa"
    path.write_text(">example\nACATGAGGC\n")
    return str(path)


class TestCli:

    def test_reference_example(self, example_fasta, capsys):
        assert main([example_fasta, "-w", "4"]) == EXIT_OK
        assert capsys.readouterr().out == "1\tCATG\n"

    def test_zero_hits_is_success(self, example_fasta, capsys):
        assert main([example_fasta, "-w", "6"]) == EXIT_OK
        assert capsys.readouterr().out == ""

    def test_window_longer_than_sequence(self, example_fasta, capsys):
        assert main([example_fasta, "-w", "50"]) == EXIT_OK
        assert capsys.readouterr().out == ""

    def test_count_line(self, example_fasta, capsys):
        assert main([example_fasta, "-w", "4", "--count"]) == EXIT_OK
        assert capsys.readouterr().out == "1\tCATG\n# total_hits\t1\n"

    def test_multiple_threads(self, tmp_path, capsys):
        path = tmp_path / "repeat.fa"
        path.write_text(">r\n" + "ACGT" * 500 + "\n")
        assert main([str(path), "-w", "4", "-t", "1"]) == EXIT_OK
        single = capsys.readouterr().out
        assert main([str(path), "-w", "4", "-t", "4", "--chunk-size", "64"]) == EXIT_OK
        assert capsys.readouterr().out == single
        assert single.count("\n") == 999

    def test_threads_auto(self, example_fasta, capsys):
        assert main([example_fasta, "-w", "4", "--threads", "auto"]) == EXIT_OK
        assert capsys.readouterr().out == "1\tCATG\n"

    def test_pairwise_policy(self, tmp_path, capsys):
        path = tmp_path / "odd.fa"
        path.write_text("ACNGT\n")
        assert main([str(path), "-w", "5"]) == EXIT_OK
        assert capsys.readouterr().out == ""
        assert main([str(path), "-w", "5", "-p", "pairwise"]) == EXIT_OK
        assert capsys.readouterr().out == "0\tACNGT\n"

    def test_keep_case(self, tmp_path, capsys):
        path = tmp_path / "soft.fa"
        path.write_text("acgt\n")
        assert main([str(path), "-w", "4"]) == EXIT_OK
        assert capsys.readouterr().out == "0\tACGT\n"
        # lowercase compares as N, so the window is all-N and filtered
        assert main([str(path), "-w", "4", "--keep-case"]) == EXIT_OK
        assert capsys.readouterr().out == ""

    def test_bed_export(self, example_fasta, tmp_path, capsys):
        bed = tmp_path / "hits.bed"
        assert main([example_fasta, "-w", "4", "--bed", str(bed)]) == EXIT_OK
        assert capsys.readouterr().out == "1\tCATG\n"
        assert "example\t1\t5\tRC_palindrome" in bed.read_text()

    def test_bed_uses_sequence_id(self, tmp_path, capsys):
        fasta = tmp_path / "desc.fa"
        fasta.write_text(">chrX some description\nACATGAGGC\n")
        bed = tmp_path / "hits.bed"
        assert main([str(fasta), "-w", "4", "--bed", str(bed)]) == EXIT_OK
        assert bed.read_text().splitlines()[1].startswith("chrX\t1\t5\t")

    def test_bed_write_failure(self, example_fasta, tmp_path, capsys):
        bed = tmp_path / "no_such_dir" / "hits.bed"
        assert main([example_fasta, "-w", "4", "--bed", str(bed)]) == EXIT_IO_FAILURE

    def test_threads_auto_respects_small_chunk_size(self, tmp_path, capsys):
        path = tmp_path / "repeat.fa"
        path.write_text(">r\n" + "ACGT" * 500 + "\n")
        assert main([str(path), "-w", "4", "-t", "auto", "--chunk-size", "10", "--stats"]) == EXIT_OK
        captured = capsys.readouterr()
        assert captured.out.count("\n") == 999
        # 1997 offsets in chunks of at most 10
        assert "Chunks processed   : 200" in captured.err

    def test_stats_go_to_stderr(self, example_fasta, capsys):
        assert main([example_fasta, "-w", "4", "--stats"]) == EXIT_OK
        captured = capsys.readouterr()
        assert captured.out == "1\tCATG\n"
        assert "Performance Summary" in captured.err


class TestCliFailures:

    def test_missing_file(self, tmp_path, capsys, caplog):
        missing = str(tmp_path / "missing.fa")
        assert main([missing, "-w", "4"]) == EXIT_IO_FAILURE
        assert capsys.readouterr().out == ""
        assert "missing.fa" in caplog.text

    @pytest.mark.parametrize("argv_tail", [
        ["-w", "0"],
        ["-w", "-3"],
        ["-t", "0"],
        ["--chunk-size", "0"],
    ])
    def test_invalid_configuration(self, example_fasta, argv_tail, capsys):
        assert main([example_fasta] + argv_tail) == EXIT_CONFIG_FAILURE
        assert capsys.readouterr().out == ""

    def test_configuration_checked_before_input(self, tmp_path, caplog):
        missing = str(tmp_path / "missing.fa")
        assert main([missing, "-w", "4", "-t", "0"]) == EXIT_CONFIG_FAILURE
        assert "Configuration error" in caplog.text

    def test_non_numeric_threads(self, example_fasta):
        with pytest.raises(SystemExit) as excinfo:
            main([example_fasta, "-t", "many"])
        assert excinfo.value.code == 2

    def test_unknown_policy(self, example_fasta):
        with pytest.raises(SystemExit):
            main([example_fasta, "-p", "bisect"])


class TestThreadsArg:

    def test_auto(self):
        assert app._threads_arg("AUTO") == "auto"

    def test_integer(self):
        assert app._threads_arg("3") == 3
