"""
Tests for genorm.mapping (type mapping table and fact records).
"""
import pytest

from genorm.mapping import (
    KIND_FACTS,
    ColumnClause,
    facts_for,
    member_facts,
    object_facts,
)
from genorm.schema import Kind, ValidatedMember, ValidatedObjectType


def _member(name="v", kind=Kind.INT32, allow_null=False, indexed=False):
    return ValidatedMember(name=name, kind=kind, allow_null=allow_null, indexed=indexed)


class TestKindFacts:
    """Tests for the closed kind table."""
    
    def test_every_kind_has_facts(self):
        """The table covers exactly the Kind enum."""
        assert set(KIND_FACTS) == set(Kind)
    
    def test_integer_types(self):
        """Integers map to fixed-width signed types."""
        assert facts_for(Kind.INT32).cxx_type == "int32_t"
        assert facts_for(Kind.INT64).cxx_type == "int64_t"
        assert facts_for(Kind.INT32).sql_type == "INTEGER"
        assert facts_for(Kind.INT64).sql_type == "INTEGER"
    
    def test_bytearray(self):
        """Byte arrays are blobs, never null, never indexed."""
        facts = facts_for(Kind.BYTEARRAY)
        assert facts.cxx_type == "std::vector<uint8_t>"
        assert facts.sql_type == "BLOB"
        assert not facts.nullable
        assert not facts.indexable
        assert facts.by_reference
        assert facts.move_on_transfer


class TestColumnClause:
    """Tests for column rendering."""
    
    def test_render_not_null_with_default(self):
        assert ColumnClause("x", "INTEGER", not_null=True, default="0").render() == "x INTEGER NOT NULL DEFAULT 0"
    
    def test_render_without_default(self):
        assert ColumnClause("data", "BLOB", not_null=False).render() == "data BLOB"


class TestMemberFacts:
    """Tests for per-member facts."""
    
    def test_non_null_integer(self):
        """Non-null integer: plain type, NOT NULL DEFAULT 0, direct bind."""
        m = member_facts(_member("x"))
        assert m.representation == "int32_t"
        assert m.column.render() == "x INTEGER NOT NULL DEFAULT 0"
        assert m.bind_expression == "x"
        assert m.parameter == "int32_t x"
        assert m.field_name == "_x"
    
    def test_nullable_integer(self):
        """Nullable integer: optional type, NULL default, no NOT NULL."""
        m = member_facts(_member("b", Kind.INT64, allow_null=True))
        assert m.representation == "std::optional<int64_t>"
        column = m.column.render()
        assert column == "b INTEGER DEFAULT NULL"
        assert "NOT NULL" not in column
        assert m.bind_expression == "b ? value_variant{*b} : value_variant{std::monostate{}}"
    
    def test_bytearray(self):
        """Byte arrays: bare BLOB column, direct bind, move into the instance."""
        m = member_facts(_member("data", Kind.BYTEARRAY))
        assert m.representation == "std::vector<uint8_t>"
        column = m.column.render()
        assert column == "data BLOB"
        assert "NOT NULL" not in column
        assert "DEFAULT" not in column
        assert m.bind_expression == "data"
        assert m.transfer_expression == "std::move(data)"
        assert m.initializer == "_data(std::move(data))"
        assert m.getter_return_type == "const std::vector<uint8_t>&"
    
    def test_scalar_getter_by_value(self):
        m = member_facts(_member("x"))
        assert m.getter_return_type == "int32_t"
        assert m.initializer == "_x(x)"
    
    def test_derived_names(self):
        """Accessor and lookup names derive from the member name."""
        m = member_facts(_member("email", indexed=True))
        assert m.getter_name == "get_email"
        assert m.setter_name == "set_email"
        assert m.find_first_name == "find_first_by_email"
        assert m.find_all_name == "find_all_by_email"
    
    def test_extract_non_null(self):
        m = member_facts(_member("x"))
        assert m.extract_expression("cell") == "std::get<int32_t>(cell)"
    
    def test_extract_nullable(self):
        """Nullable extract maps a missing value to std::nullopt."""
        m = member_facts(_member("b", Kind.INT64, allow_null=True))
        expr = m.extract_expression("cell")
        assert expr.startswith("std::holds_alternative<int64_t>(cell)")
        assert expr.endswith(": std::nullopt")
    
    def test_extract_bytearray(self):
        """Byte array extract falls back to an empty vector."""
        m = member_facts(_member("data", Kind.BYTEARRAY))
        expr = m.extract_expression("cell")
        assert "std::move(cell)" in expr
        assert expr.endswith(": std::vector<uint8_t>{}")
    
    @pytest.mark.parametrize("kind,value_kind", [
        (Kind.INT32, "int32"),
        (Kind.INT64, "int64"),
        (Kind.BYTEARRAY, "bytes"),
    ])
    def test_value_kind(self, kind, value_kind):
        assert member_facts(_member(kind=kind)).value_kind == value_kind


class TestObjectFacts:
    """Tests for per-type facts."""
    
    def test_point_statements(self, validated_point):
        """Point renders the expected bootstrap and insert statements."""
        obj = object_facts(validated_point)
        assert obj.create_table_statement() == (
            "CREATE TABLE IF NOT EXISTS Point (__id INTEGER PRIMARY KEY NOT NULL, "
            "x INTEGER NOT NULL DEFAULT 0, y INTEGER NOT NULL DEFAULT 0) STRICT;"
        )
        assert [m.name for m in obj.indexed] == ["y"]
        assert obj.create_index_statement(obj.indexed[0]) == (
            "CREATE INDEX IF NOT EXISTS Point_y_index ON Point (y);"
        )
        assert obj.insert_statement() == "INSERT INTO Point VALUES (NULL, ?, ?);"
        assert obj.select_by_rowid_statement() == "SELECT * FROM Point WHERE __id = ?;"
    
    def test_parameters_and_arguments(self, validated_sample):
        obj = object_facts(validated_sample)
        assert obj.parameters == "int32_t a, std::optional<int64_t> b, std::vector<uint8_t> c"
        assert obj.constructor_arguments == "a, b, std::move(c)"
        assert obj.value_kinds == ("int64", "int32", "int64", "bytes")
    
    def test_member_order_preserved(self):
        obj = object_facts(ValidatedObjectType(
            name="T",
            members=(_member("z"), _member("a"), _member("m")),
        ))
        assert [m.name for m in obj.members] == ["z", "a", "m"]
