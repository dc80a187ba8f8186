import pytest

from gaussjordan import cli


@pytest.fixture
def system_file(tmp_path):
    path = tmp_path / "system.txt"
    path.write_text("2,1,-1,8\n-3,-1,2,-11\n-2,1,2,-3\n", encoding="utf-8")
    return path


def test_solves_file_and_prints_result(system_file, capsys):
    assert cli.main([str(system_file)]) == 0

    out = capsys.readouterr().out
    assert "RESULT:" in out
    assert "var1 = 2" in out
    assert "var2 = 3" in out
    assert "var3 = -1" in out


def test_echoes_input_matrix(system_file, capsys):
    cli.main([str(system_file)])

    out = capsys.readouterr().out
    assert "  2   1  -1 |   8" in out
    assert " -3  -1   2 | -11" in out


def test_prompts_for_filename(system_file, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": f"  {system_file}  ")

    assert cli.main([]) == 0
    assert "var2 = 3" in capsys.readouterr().out


def test_builtin_example(capsys):
    assert cli.main(["--example", "pre-reduced"]) == 0

    out = capsys.readouterr().out
    assert "var1 = 5" in out
    assert "var2 = 7" in out


def test_list_examples(capsys):
    assert cli.main(["--list-examples"]) == 0

    out = capsys.readouterr().out
    assert "three-variable" in out
    assert "dependent-rows" in out


def test_missing_file_reports_error(tmp_path, capsys):
    assert cli.main([str(tmp_path / "missing.txt")]) == 1
    assert "ERROR:" in capsys.readouterr().out


def test_empty_file_reports_zero_rows(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("\n", encoding="utf-8")

    assert cli.main([str(path)]) == 1
    assert "zero rows" in capsys.readouterr().out


def test_wrong_shape_reports_error(tmp_path, capsys):
    path = tmp_path / "square.txt"
    path.write_text("1,2\n3,4\n", encoding="utf-8")

    assert cli.main([str(path)]) == 1
    assert "not an N x (N+1) matrix" in capsys.readouterr().out


def test_singular_system_fails_by_default(capsys):
    assert cli.main(["--example", "dependent-rows"]) == 1
    assert "Singular matrix" in capsys.readouterr().out


def test_singular_system_can_propagate_nan(capsys):
    assert cli.main(["--example", "dependent-rows", "--on-singular", "propagate"]) == 0
    assert "var1 = nan" in capsys.readouterr().out


def test_steps_print_intermediate_matrices(capsys):
    assert cli.main(["--example", "single-equation", "--steps"]) == 0

    out = capsys.readouterr().out
    assert "Normalize row 1:" in out
    assert "var1 = 2" in out


def test_configuration_file_and_overrides(tmp_path, capsys):
    config_path = tmp_path / "solver.json"
    config_path.write_text('{"on_singular": "propagate", "precision": 3, "label": "cfg"}', encoding="utf-8")

    assert cli.main(["--example", "dependent-rows", "--config", str(config_path)]) == 0
    capsys.readouterr()

    assert cli.main(
        ["--example", "dependent-rows", "--config", str(config_path), "--on-singular", "raise"]
    ) == 1


def test_build_configuration_overrides():
    args = cli.build_parser().parse_args(["--tolerance", "1e-9", "--precision", "4"])
    config = cli.build_configuration(args)

    assert config.tolerance == 1e-9
    assert config.precision == 4
    assert config.on_singular == "raise"


def test_markdown_output(capsys):
    assert cli.main(["--example", "pre-reduced", "--markdown"]) == 0
    assert "| var1 | 5 |" in capsys.readouterr().out


def test_excel_output(tmp_path, capsys):
    pytest.importorskip("xlsxwriter")
    output = tmp_path / "out" / "report.xlsx"

    assert cli.main(["--example", "three-variable", "--excel", str(output)]) == 0
    assert output.exists()
    assert "Report saved to" in capsys.readouterr().out


def test_verbose_progress(capsys):
    assert cli.main(["--example", "three-variable", "--verbose"]) == 0

    out = capsys.readouterr().out
    assert "Reducing 3 x 4 matrix" in out
    assert "Max |residual|" in out


def test_end_of_input_at_prompt_reports_error(monkeypatch, capsys):
    def closed_stdin(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed_stdin)

    assert cli.main([]) == 1
    out = capsys.readouterr().out
    assert "ERROR:" in out
    assert "No file name given" in out


def test_blank_filename_at_prompt_reports_error(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "   ")

    assert cli.main([]) == 1
    assert "No file name given" in capsys.readouterr().out


def test_singular_policy_aliases(capsys):
    assert cli.main(["--example", "dependent-rows", "--on-singular", "nan"]) == 0
    assert "var1 = nan" in capsys.readouterr().out

    args = cli.build_parser().parse_args(["--on-singular", "ieee"])
    assert cli.build_configuration(args).on_singular == "propagate"


def test_verbose_warns_about_rounding_residue(capsys):
    assert cli.main(["--example", "rounding-drift", "--verbose"]) == 0
    assert "not exactly in row canonical form" in capsys.readouterr().out

    assert cli.main(["--example", "rounding-drift", "--verbose", "--tolerance", "1e-9"]) == 0
    assert "not exactly in row canonical form" not in capsys.readouterr().out


def test_overflowed_elimination_reports_error(tmp_path, capsys):
    path = tmp_path / "subnormal.txt"
    path.write_text("1,1,2\n5e-324,1,1\n", encoding="utf-8")

    assert cli.main([str(path)]) == 1
    assert "ERROR:" in capsys.readouterr().out
