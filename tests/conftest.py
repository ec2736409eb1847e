import io

import pytest

from fakes import FakeConnection, make_dbapi
from sqlcsv.service.driver.mssql_driver import MssqlDriver
from sqlcsv.service.sink.csv_sink import CsvRecordSink


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def sink(output):
    return CsvRecordSink(output)


@pytest.fixture
def dbapi():
    return make_dbapi()


@pytest.fixture
def driver(dbapi):
    return MssqlDriver(module=dbapi)


@pytest.fixture
def responses():
    return {}


@pytest.fixture
def connection(responses):
    return FakeConnection(responses)
