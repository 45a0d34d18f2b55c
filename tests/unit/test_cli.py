"""Tests for the bst-demo command line driver."""

from search_tree.cli.main import gap_sequence, main

SAMPLE_TEXT = "in-order: 11 20 21 30 31 33 40 41 50\n"


def test_gap_sequence():
    assert gap_sequence() == [10, 20, 30, 40]


def test_demo_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out

    assert out.startswith("printing tree tree1:" + SAMPLE_TEXT + "\n")
    assert "printing tree tree2:in-order: 10 20 30 40\n\n" in out
    assert "checking for equality \nFalse\n" in out
    assert "checking for is full\nFalse\n" in out
    assert "Node count of tree t is\n9\n" in out
    assert "checking for structures\nTrue\nFalse\n" in out
    assert "Mirrored tree of tree1 is:\nin-order: 50 41 40 33 31 30 21 20 11\n\n" in out
    assert "checking for ismirror condition\nTrue\nFalse\n" in out
    assert "performing rotate right:\n" + SAMPLE_TEXT + "\n" in out
    assert out.endswith("printing levels\n33 \n11 40 \n30 50 \n20 31 41 \n21 \n")


def test_demo_with_missing_rotation_target(capsys):
    assert main(["--values", "5", "3", "8", "--rotate", "99"]) == 0
    out = capsys.readouterr().out
    assert "performing rotate right:\nthere is no rotation\n" in out
    assert "checking for is full\nTrue\n" in out


def test_demo_with_value_equality_config(tmp_path, capsys):
    path = tmp_path / "tree.toml"
    path.write_text('[tree]\nelement_equality = "value"\n', encoding="utf-8")
    assert main(["--config", str(path)]) == 0
    assert "checking for ismirror condition\nTrue\n" in capsys.readouterr().out


def test_demo_bad_config_reports_error(tmp_path, capsys):
    path = tmp_path / "tree.toml"
    path.write_text('[tree]\nelement_equality = "fuzzy"\n', encoding="utf-8")
    assert main(["--config", str(path)]) == 2
    assert capsys.readouterr().err.startswith("Error: ")


def test_demo_unhashable_config_value_reports_error(tmp_path, capsys):
    path = tmp_path / "tree.toml"
    path.write_text('[tree]\nelement_equality = ["value"]\n', encoding="utf-8")
    assert main(["--config", str(path)]) == 2
    assert capsys.readouterr().err.startswith("Error: ")
