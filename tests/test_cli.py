from cli import main


def test_prints_output_lines(example_file, example_output, capsys):
    assert main([str(example_file)]) == 0

    assert capsys.readouterr().out.splitlines() == example_output


def test_prints_offending_line_on_bad_input(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("3\n09:00 19:00\n10\n09:41 1 client1\n25:00 1 client2\n", encoding="utf-8")

    assert main([str(path)]) == 1

    assert capsys.readouterr().out == "25:00 1 client2\n"


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 2

    assert capsys.readouterr().out == ""
