"""Unit tests for engines.sql.template_engine.bind_each()."""

import pytest

from sqltemplate.engines.sql import PassthroughQuotation, PostgresQuotation, bind_each

PG = PostgresQuotation()
PASS = PassthroughQuotation()


class TestBindEach:
    def test_list_rows(self):
        assert bind_each("(:row)", [1, 2], PASS) == ["(1)", "(2)"]

    def test_value_alias(self):
        assert bind_each("(:value)", ["a"], PG) == ["('a')"]

    def test_mapping_rows_key(self):
        result = bind_each("@key = :value", {"a": 1, "b": 2}, PG)
        assert result == {"a": '"a" = 1', "b": '"b" = 2'}

    def test_key_as_value(self):
        assert bind_each(":key", {"x": 1}, PG) == {"x": "'x'"}

    def test_dict_rows_insert(self):
        rows = [{"id": 1, "name": "x"}, {"id": 2, "name": "y"}]
        result = bind_each("INSERT INTO t (@row[]) VALUES (:row[])", rows, PG)
        assert result == [
            "INSERT INTO t (\"id\", \"name\") VALUES (1, 'x')",
            "INSERT INTO t (\"id\", \"name\") VALUES (2, 'y')",
        ]

    def test_sequence_rows_expanded(self):
        assert bind_each("(:value[])", [(1, 2), (3, 4)], PASS) == ["(1, 2)", "(3, 4)"]

    def test_field_rows(self):
        assert bind_each("@value[]", ["a", ["b", "c"]], PG) == ['"a"', '"b", "c"']

    def test_no_key_for_positional_rows(self):
        assert bind_each("{:key = }:row", [1], PASS) == ["1"]

    def test_shared_params(self):
        result = bind_each("SELECT :row FROM @tbl", [1, 2], PG, params={"@tbl": "t"})
        assert result == ['SELECT 1 FROM "t"', 'SELECT 2 FROM "t"']

    def test_row_keys_win_over_params(self):
        assert bind_each(":row", [1], PASS, params={":row": 9}) == ["1"]

    def test_only_referenced_placeholders_quoted(self):
        # @row[] of a dict row would fail as a value; it is never quoted here
        assert bind_each(":row[]", [{"a": None}], PG) == ["NULL"]

    def test_empty(self):
        assert bind_each(":row", [], PG) == []
        assert bind_each(":row", {}, PG) == {}

    def test_string_rows_rejected(self):
        with pytest.raises(TypeError):
            bind_each(":row", "abc", PG)
