"""
genORM Type Mapping

Translates a member kind into the facts both emitters need: the C++
representation, the SQL column clause, the runtime value kind, and the
bind/extract expressions that move a value into and out of the runtime's
value_variant.

Facts are computed once per member (MemberFacts) and once per object type
(ObjectFacts). The emitters only ever render these records, so every
keyword, type spelling and derived name has exactly one source here.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .schema import Kind, ValidatedMember, ValidatedObjectType


# Identity column shared by every generated table
IDENTITY_NAME = "__id"
IDENTITY_CXX_TYPE = "uint64_t"
IDENTITY_COLUMN = f"{IDENTITY_NAME} INTEGER PRIMARY KEY NOT NULL"
IDENTITY_VALUE_KIND = "int64"

DATABASE_PARAMETER = "genORM::database& __db"


@dataclass(frozen=True)
class KindFacts:
    """Fixed generation facts for one Kind."""
    cxx_type: str           # Storage representation
    sql_type: str           # Column type in the STRICT table
    value_kind: str         # genORM::object::value_kind enumerator
    nullable: bool          # May be declared allow-null
    indexable: bool         # May be declared indexed
    by_reference: bool      # Getter returns a const reference
    move_on_transfer: bool  # Passed on with std::move instead of copied


KIND_FACTS: Dict[Kind, KindFacts] = {
    Kind.INT32: KindFacts(
        cxx_type="int32_t",
        sql_type="INTEGER",
        value_kind="int32",
        nullable=True,
        indexable=True,
        by_reference=False,
        move_on_transfer=False,
    ),
    Kind.INT64: KindFacts(
        cxx_type="int64_t",
        sql_type="INTEGER",
        value_kind="int64",
        nullable=True,
        indexable=True,
        by_reference=False,
        move_on_transfer=False,
    ),
    Kind.BYTEARRAY: KindFacts(
        cxx_type="std::vector<uint8_t>",
        sql_type="BLOB",
        value_kind="bytes",
        nullable=False,
        indexable=False,
        by_reference=True,
        move_on_transfer=True,
    ),
}


def facts_for(kind: Kind) -> KindFacts:
    """Look up the facts for a kind. Every Kind has an entry."""
    return KIND_FACTS[kind]


def optional_of(cxx_type: str) -> str:
    return f"std::optional<{cxx_type}>"


@dataclass(frozen=True)
class ColumnClause:
    """One column of a CREATE TABLE statement."""
    name: str
    sql_type: str
    not_null: bool
    default: Optional[str] = None

    def render(self) -> str:
        parts = [self.name, self.sql_type]
        if self.not_null:
            parts.append("NOT NULL")
        if self.default is not None:
            parts.append(f"DEFAULT {self.default}")
        return " ".join(parts)


@dataclass(frozen=True)
class MemberFacts:
    """Everything the emitters need to know about one member."""
    name: str
    kind: Kind
    description: Optional[str]
    allow_null: bool
    indexed: bool
    representation: str         # C++ type of field, parameter and getter
    column: ColumnClause
    value_kind: str
    bind_expression: str        # Yields a value_variant from the parameter

    @property
    def facts(self) -> KindFacts:
        return facts_for(self.kind)

    @property
    def field_name(self) -> str:
        return f"_{self.name}"

    @property
    def parameter(self) -> str:
        return f"{self.representation} {self.name}"

    @property
    def getter_name(self) -> str:
        return f"get_{self.name}"

    @property
    def getter_return_type(self) -> str:
        if self.facts.by_reference:
            return f"const {self.representation}&"
        return self.representation

    @property
    def setter_name(self) -> str:
        return f"set_{self.name}"

    @property
    def find_first_name(self) -> str:
        return f"find_first_by_{self.name}"

    @property
    def find_all_name(self) -> str:
        return f"find_all_by_{self.name}"

    @property
    def transfer_expression(self) -> str:
        """Argument expression used when handing the value on."""
        if self.facts.move_on_transfer:
            return f"std::move({self.name})"
        return self.name

    @property
    def initializer(self) -> str:
        """Constructor member-initializer."""
        return f"{self.field_name}({self.transfer_expression})"

    def extract_expression(self, cell: str) -> str:
        """Expression turning the row cell `cell` back into the field type."""
        cxx_type = self.facts.cxx_type
        if self.facts.move_on_transfer:
            return (f"std::holds_alternative<{cxx_type}>({cell}) "
                    f"? std::get<{cxx_type}>(std::move({cell})) : {cxx_type}{{}}")
        if self.allow_null:
            return (f"std::holds_alternative<{cxx_type}>({cell}) "
                    f"? {self.representation}{{std::get<{cxx_type}>({cell})}} : std::nullopt")
        return f"std::get<{cxx_type}>({cell})"


def member_facts(member: ValidatedMember) -> MemberFacts:
    """Compute the facts for a validated member."""
    facts = facts_for(member.kind)
    name = member.name

    if member.allow_null:
        representation = optional_of(facts.cxx_type)
        column = ColumnClause(name, facts.sql_type, not_null=False, default="NULL")
        bind_expression = f"{name} ? value_variant{{*{name}}} : value_variant{{std::monostate{{}}}}"
    elif member.kind is Kind.BYTEARRAY:
        representation = facts.cxx_type
        column = ColumnClause(name, facts.sql_type, not_null=False)
        bind_expression = name
    else:
        representation = facts.cxx_type
        column = ColumnClause(name, facts.sql_type, not_null=True, default="0")
        bind_expression = name

    return MemberFacts(
        name=name,
        kind=member.kind,
        description=member.description,
        allow_null=member.allow_null,
        indexed=member.indexed,
        representation=representation,
        column=column,
        value_kind=facts.value_kind,
        bind_expression=bind_expression,
    )


@dataclass(frozen=True)
class ObjectFacts:
    """Facts for one object type; members keep declaration order."""
    name: str
    description: Optional[str]
    members: Tuple[MemberFacts, ...]

    @property
    def indexed(self) -> Tuple[MemberFacts, ...]:
        return tuple(m for m in self.members if m.indexed)

    @property
    def parameters(self) -> str:
        return ", ".join(m.parameter for m in self.members)

    @property
    def constructor_arguments(self) -> str:
        return ", ".join(m.transfer_expression for m in self.members)

    @property
    def value_kinds(self) -> Tuple[str, ...]:
        return (IDENTITY_VALUE_KIND,) + tuple(m.value_kind for m in self.members)

    def index_name(self, member: MemberFacts) -> str:
        return f"{self.name}_{member.name}_index"

    def create_table_statement(self) -> str:
        columns = ", ".join([IDENTITY_COLUMN] + [m.column.render() for m in self.members])
        return f"CREATE TABLE IF NOT EXISTS {self.name} ({columns}) STRICT;"

    def create_index_statement(self, member: MemberFacts) -> str:
        return (f"CREATE INDEX IF NOT EXISTS {self.index_name(member)} "
                f"ON {self.name} ({member.name});")

    def insert_statement(self) -> str:
        placeholders = ", ".join(["?"] * len(self.members))
        return f"INSERT INTO {self.name} VALUES (NULL, {placeholders});"

    def select_by_rowid_statement(self) -> str:
        return f"SELECT * FROM {self.name} WHERE {IDENTITY_NAME} = ?;"


def object_facts(object_type: ValidatedObjectType) -> ObjectFacts:
    """Compute the facts for a validated object type."""
    return ObjectFacts(
        name=object_type.name,
        description=object_type.description,
        members=tuple(member_facts(m) for m in object_type.members),
    )
