"""Unit tests for engines.sql.expression and the shared default engine."""

import logging
from unittest.mock import patch

import pytest

from sqltemplate.engines.sql import (
    MySQLQuotation,
    PassthroughQuotation,
    PostgresQuotation,
    SqlExpression,
    bind,
    get_engine,
    raw,
)
from sqltemplate.engines.sql import template_engine


class TestSqlExpression:
    def test_is_str(self):
        e = raw("NOW()")
        assert isinstance(e, str)
        assert isinstance(e, SqlExpression)
        assert e == "NOW()"

    def test_raw_idempotent(self):
        e = raw("1")
        assert raw(e) is e

    def test_raw_rejects_non_str(self):
        with pytest.raises(TypeError):
            raw(1)

    def test_repr(self):
        assert repr(raw("x")) == "SqlExpression('x')"

    def test_infinity_is_data_not_a_sentinel(self):
        sql = bind("SELECT 1{ LIMIT :x}", {":x": float("inf")}, PassthroughQuotation())
        assert sql == "SELECT 1 LIMIT inf"


@pytest.fixture
def _reset_default_engine():
    template_engine._default_engine = None
    yield
    template_engine._default_engine = None


@pytest.mark.usefixtures("_reset_default_engine")
class TestGetEngine:
    def test_default_dialect(self):
        with patch("sqltemplate.engines.sql.template_engine.settings") as m:
            m.DIALECT = "postgres"
            e = get_engine()
        assert isinstance(e.quotation, PostgresQuotation)
        assert get_engine() is e

    def test_configured_dialect(self):
        with patch("sqltemplate.engines.sql.template_engine.settings") as m:
            m.DIALECT = "mysql"
            e = get_engine()
        assert isinstance(e.quotation, MySQLQuotation)
        assert e.bind("SELECT @f", {"@f": "a"}) == "SELECT `a`"


class TestLogging:
    def test_log_sql(self, caplog):
        caplog.set_level(logging.DEBUG, logger="sqltemplate.engines.sql.template_engine")
        with patch("sqltemplate.engines.sql.template_engine.settings") as m:
            m.LOG_SQL = True
            bind("SELECT :x", {":x": 1}, PostgresQuotation())
        assert "SELECT 1" in caplog.text

    def test_no_log_sql_by_default(self, caplog):
        caplog.set_level(logging.DEBUG, logger="sqltemplate.engines.sql.template_engine")
        with patch("sqltemplate.engines.sql.template_engine.settings") as m:
            m.LOG_SQL = False
            bind("SELECT :x", {":x": 12345}, PostgresQuotation())
        assert "12345" not in caplog.text

    def test_pruned_blocks_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="sqltemplate.engines.sql.template_engine")
        bind("SELECT 1{ WHERE :a}{ LIMIT 1}", {}, PostgresQuotation())
        assert "1 of 2 block(s) removed" in caplog.text
