"""Unit tests for engines.sql.safety - static checks for SQL templates."""

from sqltemplate.engines.sql.safety import check_sql_template_safety


class TestCheckSqlTemplateSafety:
    def test_no_placeholders(self):
        assert check_sql_template_safety("SELECT 1") == []

    def test_bound_placeholder_no_warning(self):
        assert check_sql_template_safety("SELECT * FROM t WHERE a = :a{ AND b = @b}") == []

    def test_placeholder_in_literal_warns(self):
        warnings = check_sql_template_safety("WHERE name LIKE '%:name%'")
        assert len(warnings) == 1
        assert warnings[0]["placeholder"] == ":name"
        assert warnings[0]["line"] == 1

    def test_escaped_quote_in_literal(self):
        warnings = check_sql_template_safety("WHERE a = 'it''s @x' AND b = :b")
        assert [w["placeholder"] for w in warnings] == ["@x"]

    def test_multiline_template(self):
        sql = "SELECT *\nFROM t\nWHERE name = ':name'"
        warnings = check_sql_template_safety(sql)
        assert len(warnings) == 1
        assert warnings[0]["line"] == 3

    def test_cast_in_literal_not_flagged(self):
        assert check_sql_template_safety("SELECT 'a::text'") == []

    def test_unbalanced_tags(self):
        warnings = check_sql_template_safety("SELECT 1{ WHERE a = :a")
        assert len(warnings) == 1
        assert warnings[0]["placeholder"] is None
        assert "not balanced" in warnings[0]["message"]

    def test_empty_template(self):
        assert check_sql_template_safety("") == []
