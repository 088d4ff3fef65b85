import io

from loxlang.cli import EXIT_DATAERR, EXIT_OK, EXIT_USAGE, main


def test_too_many_arguments(capsys):
    assert main(["a.lox", "b.lox"]) == EXIT_USAGE
    assert EXIT_USAGE == 64
    assert capsys.readouterr().out == "Usage: jlox [script]\n"


def test_runs_good_file(tmp_path, capsys):
    script = tmp_path / "ok.lox"
    script.write_text("var a = 2;")
    assert main([str(script)]) == EXIT_OK
    assert "Running :\nvar a = 2;" in capsys.readouterr().out


def test_bad_file_is_data_error(tmp_path, capsys):
    script = tmp_path / "bad.lox"
    script.write_text("/* never closed")
    assert main([str(script)]) == EXIT_DATAERR
    assert EXIT_DATAERR == 65


def test_no_arguments_starts_prompt(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main([]) == EXIT_OK
    out = capsys.readouterr().out
    assert out.startswith("> ")
    assert out.count("Running :") == 1