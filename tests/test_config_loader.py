import argparse

import pytest

from sqlcsv.cli.cli import parse_args
from sqlcsv.config.config_loader import ConfigLoader
from sqlcsv.errors import ConfigError


def load(argv, environ=None):
    args = parse_args(argv)
    return ConfigLoader(args.config, args.env, environ or {}).load(args)


def test_defaults_with_literal_connection_string():
    config = load(["-cs", "SERVER=db"])
    assert config.connection_string == "SERVER=db"
    assert config.null_literal == "NULL"
    assert config.query_timeout_seconds == 60
    assert config.ping_timeout_seconds == 10
    assert config.odbc_driver == "ODBC Driver 18 for SQL Server"


def test_connection_string_from_environment():
    config = load(["-csenv", "SQLCONN"], {"SQLCONN": "SERVER=env"})
    assert config.connection_string == "SERVER=env"


def test_literal_wins_over_environment():
    config = load(["-cs", "SERVER=flag", "-csenv", "SQLCONN"], {"SQLCONN": "SERVER=env"})
    assert config.connection_string == "SERVER=flag"


def test_missing_connection_string():
    with pytest.raises(ConfigError, match="via -cs or -csenv flag"):
        load([])


def test_empty_environment_variable():
    with pytest.raises(ConfigError, match="environment variable 'SQLCONN'"):
        load(["-csenv", "SQLCONN"], {})


def test_short_and_long_flags():
    config = load(["--connection-string", "SERVER=db", "-null", "", "-t", "5"])
    assert config.null_literal == ""
    assert config.query_timeout_seconds == 5


@pytest.mark.parametrize("timeout", ["0", "-3"])
def test_non_positive_timeout(timeout):
    with pytest.raises(ConfigError):
        load(["-cs", "SERVER=db", "-t", timeout])


def test_yaml_file_with_env_override_and_flag_precedence(tmp_path):
    base = tmp_path / "sqlcsv.yaml"
    base.write_text(
        "connection_string_env: SQLCONN\n"
        "null_literal: ''\n"
        "query_timeout_seconds: 30\n",
        encoding="utf-8",
    )
    (tmp_path / "sqlcsv_prod.yaml").write_text("query_timeout_seconds: 300\nodbc_driver: FreeTDS\n", encoding="utf-8")

    config = load(["--config", str(base), "--env", "prod", "-null", "-"], {"SQLCONN": "SERVER=prod"})

    assert config.connection_string == "SERVER=prod"
    assert config.query_timeout_seconds == 300
    assert config.odbc_driver == "FreeTDS"
    assert config.null_literal == "-"


def test_unknown_yaml_key(tmp_path):
    path = tmp_path / "c.yaml"
    path.write_text("connection_string: x\nretries: 3\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="retries"):
        load(["--config", str(path)])


def test_env_without_config():
    with pytest.raises(ConfigError):
        ConfigLoader(None, "prod", {}).load(argparse.Namespace())


def test_config_str_hides_connection_string():
    config = load(["-cs", "SERVER=db;PWD=secret"])
    assert "secret" not in str(config)


@pytest.mark.parametrize("yaml_value", ["NULL", "null", "~", ""])
def test_yaml_null_keeps_default_null_literal(tmp_path, yaml_value):
    path = tmp_path / "c.yaml"
    path.write_text(f"connection_string: SERVER=db\nnull_literal: {yaml_value}\n", encoding="utf-8")

    config = load(["--config", str(path)])

    assert config.null_literal == "NULL"


def test_quoted_yaml_null_literal_is_kept(tmp_path):
    path = tmp_path / "c.yaml"
    path.write_text("connection_string: SERVER=db\nnull_literal: '<null>'\n", encoding="utf-8")

    assert load(["--config", str(path)]).null_literal == "<null>"
