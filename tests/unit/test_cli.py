import io
import json
from pathlib import Path

import pytest

from modelgen.cli import build_parser, main

TWO_STRUCTS = """
pub struct Account {
    pub id: ID,
}

pub struct Other {
    pub name: String,
}
"""


def test_model_to_stdout(capsys):
    assert main(["model", "Todo", "--fields", "title:z,done:b"]) == 0

    out = capsys.readouterr().out
    assert "class Todo extends Equatable" in out


def test_model_rust_target_with_verbose(capsys):
    assert main(["--verbose", "model", "Todo", "--fields", "title:z", "--target", "rs"]) == 0

    out = capsys.readouterr().out
    assert "pub struct Todo" in out
    assert "Field Count" in out


def test_model_output_file(tmp_path: Path):
    output = tmp_path / "out" / "todo.dart"

    assert main(["model", "Todo", "--fields", "title:z", "-o", str(output)]) == 0
    assert "class Todo extends Equatable" in output.read_text(encoding="utf-8")


def test_model_write_refuses_existing_file(dart_project: Path, capsys):
    args = ["model", "Todo", "--fields", "title:z", "--write", "--root", str(dart_project)]

    assert main(args) == 0
    assert (dart_project / "lib" / "models" / "todo.dart").exists()

    assert main(args) == 1
    assert "already exists" in capsys.readouterr().out


def test_config_warnings_are_printed(tmp_path: Path, capsys):
    config_file = tmp_path / "modelgen.json"
    config_file.write_text(json.dumps({"indent_size": 0}), encoding="utf-8")

    assert main(["--config", str(config_file), "model", "Todo", "--fields", "title:z"]) == 0

    out = capsys.readouterr().out
    assert "Invalid indent_size: 0" in out
    assert "class Todo extends Equatable" in out


def test_model_name_without_letters_fails(capsys):
    assert main(["model", "!!!", "--fields", "title:z"]) == 1


def test_model_write_needs_dart_target(tmp_path: Path):
    args = ["model", "Todo", "--fields", "a:z", "--target", "rust", "--write", "--root", str(tmp_path)]
    assert main(args) == 1


def test_model_failures_return_one():
    assert main(["model", "Todo", "--fields", ""]) == 1
    assert main(["model", "Todo", "--fields", "a:z", "--target", "cobol"]) == 1


def test_dao_inline(capsys):
    assert main(["dao", "Todo", "--fields", "title:z"]) == 0
    assert "TodoDao" in capsys.readouterr().out


def test_dao_new_file(rust_project: Path, capsys):
    args = ["dao", "Todo", "--fields", "title:z", "--new-file", "--root", str(rust_project)]

    assert main(args) == 0
    assert main(args) == 0

    lib_rs = (rust_project / "src" / "lib.rs").read_text(encoding="utf-8")
    assert lib_rs.count("pub mod todo_dao;") == 1
    assert (rust_project / "src" / "todo_dao.rs").exists()


def test_dao_new_file_without_registry(tmp_path: Path):
    args = ["dao", "Todo", "--fields", "title:z", "--new-file", "--root", str(tmp_path)]

    assert main(args) == 1
    assert (tmp_path / "src" / "todo_dao.rs").exists()


def test_from_sql_append(rust_project: Path):
    ddl = rust_project / "schema.sql"
    ddl.write_text("CREATE TABLE accounts (\n  id BIGSERIAL,\n  email VARCHAR\n);\n", encoding="utf-8")

    assert main(["from-sql", str(ddl), "--append", "--root", str(rust_project)]) == 0
    assert "pub struct Account {" in (rust_project / "src" / "models.rs").read_text(encoding="utf-8")


def test_from_sql_without_table(tmp_path: Path):
    ddl = tmp_path / "schema.sql"
    ddl.write_text("SELECT 1;\n", encoding="utf-8")

    assert main(["from-sql", str(ddl)]) == 1


def test_from_sql_missing_file(tmp_path: Path):
    assert main(["from-sql", str(tmp_path / "missing.sql")]) == 1


def test_api_convert_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("pub struct Account {\n    pub email: String,\n}\n"))

    assert main(["api-convert", "--stdin"]) == 0
    assert "ToApiType<Account>" in capsys.readouterr().out


def test_api_convert_two_structs(tmp_path: Path, capsys):
    source = tmp_path / "models.rs"
    source.write_text(TWO_STRUCTS, encoding="utf-8")

    assert main(["api-convert", str(source)]) == 1
    assert "Name already defined" in capsys.readouterr().out


def test_information_commands(capsys):
    assert main(["list-targets"]) == 0
    assert "rust-dao" in capsys.readouterr().out

    assert main(["target-info", "dao"]) == 0
    assert "RustDaoGenerator" in capsys.readouterr().out

    assert main(["target-info", "cobol"]) == 1


def test_input_source_is_required():
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["from-sql"])
    assert excinfo.value.code == 2


def test_log_level_is_case_insensitive():
    args = build_parser().parse_args(["--log-level", "debug", "list-targets"])
    assert args.log_level == "DEBUG"
