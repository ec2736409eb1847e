# sqlcsv/cli/cli.py
import argparse
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="sqlcsv",
        description="Read SQL batches separated by GO lines from stdin, run them against SQL Server "
                    "and write every result set to stdout as CSV",
    )
    ap.add_argument("-cs", "--connection-string", dest="connection_string", type=str, default=None,
                    help="SQL connection string (ODBC keywords or sqlserver:// URL)")
    ap.add_argument("-csenv", "--connection-string-env", dest="connection_string_env", type=str, default=None,
                    help="Get the SQL connection string from this environment variable")
    ap.add_argument("-null", "--null", dest="null", type=str, default=None,
                    help="Text written for NULL values in CSV output (default: NULL)")
    ap.add_argument("-t", "--timeout", dest="timeout", type=int, default=None,
                    help="Query timeout per batch in seconds (default: 60)")
    ap.add_argument("--ping-timeout", type=int, default=None,
                    help="Seconds allowed to connect and check connectivity (default: 10)")
    ap.add_argument("--odbc-driver", type=str, default=None,
                    help="ODBC driver used when the connection string names none "
                         "(default: ODBC Driver 18 for SQL Server)")
    ap.add_argument("--config", type=Path, default=None,
                    help="YAML file with default settings")
    ap.add_argument("--env", type=str, default=None,
                    help="Environment name for configuration override (e.g., 'dev', 'prod'). "
                         "Loads <config>_<env>.yaml in addition to --config.")
    ap.add_argument("--log-file", type=Path, default=None,
                    help="Also write DEBUG logs to this file")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="Log per-batch timing and row counts to stderr")
    return ap


def parse_args(argv=None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
