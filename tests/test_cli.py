import json

from click.testing import CliRunner

from seqalign import cli


def _invoke(*args):
    return CliRunner().invoke(cli.main, list(args))


def test_align_prints_score_and_rows():
    result = _invoke("align", "ATC", "AC")
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "score\t1"
    assert lines[1] == "similarity\t0.333333"
    assert lines[2:] == ["ATC", "A-C"]


def test_align_without_similarity():
    result = _invoke("align", "--no-similarity", "ATC", "AC")
    assert result.exit_code == 0, result.output
    assert "similarity\tNA" in result.output


def test_align_json():
    result = _invoke("align", "--json", "ATC", "AC")
    assert result.exit_code == 0, result.output
    record = json.loads(result.output)
    assert record["steps"] == [0, 1, 0]
    assert record["score"] == 1


def test_align_words_keeps_columns_lined_up():
    result = _invoke(
        "align", "--tokenize", "words", "the cat sat", "the sat"
    )
    assert result.exit_code == 0, result.output
    top, bottom = result.output.splitlines()[2:]
    assert top.split() == ["the", "cat", "sat"]
    assert bottom.split() == ["the", "-", "sat"]


def test_align_with_named_matrix():
    result = _invoke("align", "--matrix", "BLOSUM62", "W", "W")
    assert result.exit_code == 0, result.output
    assert result.output.splitlines()[0] == "score\t11"


def test_align_unknown_matrix():
    result = _invoke("align", "--matrix", "NOPE", "A", "A")
    assert result.exit_code == 1
    assert "Unknown substitution matrix" in result.output


def test_align_with_matrix_file(tmp_path):
    table = tmp_path / "table.tsv"
    table.write_text("a\tb\t5\n")
    result = _invoke("align", "--matrix-file", str(table), "ab", "aa")
    assert result.exit_code == 0, result.output
    assert result.output.splitlines()[0] == "score\t6"


def test_matrix_options_are_exclusive(tmp_path):
    table = tmp_path / "table.tsv"
    table.write_text("a\tb\t5\n")
    result = _invoke(
        "align", "--matrix", "BLOSUM62", "--matrix-file", str(table), "A", "A"
    )
    assert result.exit_code == 2
    assert "mutually exclusive" in result.output


def test_align_empty_sequence_fails():
    result = _invoke("align", "", "AC")
    assert result.exit_code == 1
    assert "empty" in result.output


def test_align_set_fasta(fasta_file):
    result = _invoke("align-set", str(fasta_file))
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "i\tj\tname_i\tname_j\tscore\tsimilarity"
    assert [line.split("\t")[:4] for line in lines[1:]] == [
        ["0", "1", "s0", "s1"],
        ["0", "2", "s0", "s2"],
        ["1", "2", "s1", "s2"],
    ]


def test_align_set_lines_json_parallel(tmp_path):
    path = tmp_path / "phrases.txt"
    path.write_text("the cat sat\nthe hat sat\na cat\n")
    result = _invoke(
        "align-set",
        str(path),
        "--format",
        "lines",
        "--tokenize",
        "words",
        "--json",
        "-j",
        "2",
    )
    assert result.exit_code == 0, result.output
    records = json.loads(result.output)
    assert [(r["i"], r["j"]) for r in records] == [(0, 1), (0, 2), (1, 2)]
    assert records[0]["name_i"] == "seq0"
    assert records[0]["score"] == 1


def test_align_set_rejects_negative_jobs(fasta_file):
    result = _invoke("align-set", str(fasta_file), "-j", "-1")
    assert result.exit_code == 2


def test_align_set_reports_empty_sequence(tmp_path):
    path = tmp_path / "seqs.fasta"
    path.write_text(">a\nACGT\n>b\n\n>c\nAC\n")
    result = _invoke("align-set", str(path))
    assert result.exit_code == 1
    assert "pair (0, 1)" in result.output


def test_align_score_overflow_is_reported(tmp_path):
    table = tmp_path / "table.tsv"
    table.write_text(f"a\ta\t{2**62}\nb\tb\t{2**62}\n")
    result = _invoke("align", "--matrix-file", str(table), "ab", "ab")
    assert result.exit_code == 1
    assert "exceeds int64 range" in result.output
