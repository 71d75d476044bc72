"""
genORM Definition Emitter

Generates the C++ source (<file-prefix>.orm.cc): constructors, the create()
factory (table bootstrap, index bootstrap, insert) and find_by_rowid().
Setters and the find-by-indexed-member lookups are declared in the header
but have no generated body.
"""

from typing import List, Sequence

from .declaration import BANNER, INDENT, declaration_filename
from .mapping import DATABASE_PARAMETER, IDENTITY_CXX_TYPE, IDENTITY_NAME, ObjectFacts, object_facts
from .schema import ValidatedObjectType

DEFINITION_EXTENSION = ".orm.cc"

UNREACHABLE = 'throw std::logic_error("Implementation error");'


def definition_filename(file_prefix: str) -> str:
    return f"{file_prefix}{DEFINITION_EXTENSION}"


def _unexpected(result: str) -> str:
    return f"return std::unexpected{{std::move({result}.error())}};"


class DefinitionGenerator:
    """Generate the definition artifact from validated object types."""

    def __init__(self, namespace: str, file_prefix: str):
        self.namespace = namespace
        self.file_prefix = file_prefix

    def generate(self, object_types: Sequence[ValidatedObjectType]) -> str:
        """Generate the source file content."""
        lines = []

        lines.append(BANNER)
        lines.append(f'#include "{declaration_filename(self.file_prefix)}"')
        lines.append("#include <stdexcept>")
        lines.append("#include <utility>")
        lines.append("")

        for object_type in object_types:
            obj = object_facts(object_type)
            lines.extend(self._generate_constructor(obj))
            lines.append("")
            lines.extend(self._generate_create(obj))
            lines.append("")
            lines.extend(self._generate_find_by_rowid(obj))
            lines.append("")

        return "\n".join(lines)

    def _qualified(self, obj: ObjectFacts) -> str:
        return f"{self.namespace}::{obj.name}"

    def _generate_constructor(self, obj: ObjectFacts) -> List[str]:
        initializers = ", ".join(["object(__db, __id)"] + [m.initializer for m in obj.members])
        return [
            f"{self._qualified(obj)}::{obj.name}({DATABASE_PARAMETER}, {IDENTITY_CXX_TYPE} {IDENTITY_NAME}, {obj.parameters})",
            f"{INDENT}: {initializers} {{}}",
        ]

    def _generate_binder(self, expressions: Sequence[str]) -> List[str]:
        """Binder lambda mapping 1-based value indices to bind expressions."""
        i1 = INDENT
        i2 = INDENT * 2
        lines = [f"{i1}const auto __binder = [&](int __value_index) -> value_variant {{"]
        for index, expression in enumerate(expressions, start=1):
            lines.append(f"{i2}if (__value_index == {index}) {{ return {expression}; }}")
        lines.append(f"{i2}{UNREACHABLE}")
        lines.append(f"{i1}}};")
        return lines

    def _generate_create(self, obj: ObjectFacts) -> List[str]:
        """create(): table bootstrap, index bootstrap, insert. First failure returns."""
        lines = []
        i1 = INDENT
        i2 = INDENT * 2
        qualified = self._qualified(obj)

        lines.append(f"std::expected<{qualified}, std::string> {qualified}::create({DATABASE_PARAMETER}, {obj.parameters}) {{")

        lines.append(f'{i1}static constexpr std::string_view __create_table_statement = "{obj.create_table_statement()}";')
        lines.append(f"{i1}if (auto __create_table_result = create_table_if_not_exists(__db, __create_table_statement); not __create_table_result) {{")
        lines.append(f"{i2}{_unexpected('__create_table_result')}")
        lines.append(f"{i1}}}")

        for m in obj.indexed:
            statement = f"__create_index_{m.name}_statement"
            lines.append(f'{i1}static constexpr std::string_view {statement} = "{obj.create_index_statement(m)}";')
            lines.append(f"{i1}if (auto __create_index_result = create_index_if_not_exists(__db, {statement}); not __create_index_result) {{")
            lines.append(f"{i2}{_unexpected('__create_index_result')}")
            lines.append(f"{i1}}}")

        lines.append(f'{i1}static constexpr std::string_view __insert_statement = "{obj.insert_statement()}";')
        lines.extend(self._generate_binder([m.bind_expression for m in obj.members]))
        lines.append(f"{i1}if (auto __insert_result = insert_into_table(__db, __insert_statement, {len(obj.members)}, __binder)) {{")
        lines.append(f"{i2}return {obj.name}{{__db, *__insert_result, {obj.constructor_arguments}}};")
        lines.append(f"{i1}}} else {{")
        lines.append(f"{i2}{_unexpected('__insert_result')}")
        lines.append(f"{i1}}}")

        lines.append("}")
        return lines

    def _generate_find_by_rowid(self, obj: ObjectFacts) -> List[str]:
        """find_by_rowid(): select one row and map every column back."""
        lines = []
        i1 = INDENT
        i2 = INDENT * 2
        qualified = self._qualified(obj)

        lines.append(f"std::expected<{qualified}, std::string> {qualified}::find_by_rowid({DATABASE_PARAMETER}, {IDENTITY_CXX_TYPE} {IDENTITY_NAME}) {{")
        lines.append(f'{i1}static constexpr std::string_view __select_statement = "{obj.select_by_rowid_statement()}";')
        lines.extend(self._generate_binder([f"static_cast<int64_t>({IDENTITY_NAME})"]))

        kinds = ", ".join(f"value_kind::{kind}" for kind in obj.value_kinds)
        lines.append(f"{i1}static constexpr value_kind __column_kinds[] = {{{kinds}}};")

        # Column 0 is the identity; members follow in declaration order
        arguments = ", ".join(
            m.extract_expression(f"__row[{column}]")
            for column, m in enumerate(obj.members, start=1)
        )
        lines.append(f"{i1}if (auto __select_result = select_from_table(__db, __select_statement, 1, __binder, __column_kinds)) {{")
        lines.append(f"{i2}auto& __row = *__select_result;")
        lines.append(f"{i2}return {obj.name}{{__db, {IDENTITY_NAME}, {arguments}}};")
        lines.append(f"{i1}}} else {{")
        lines.append(f"{i2}{_unexpected('__select_result')}")
        lines.append(f"{i1}}}")

        lines.append("}")
        return lines


def generate_definition(namespace: str, file_prefix: str, object_types: Sequence[ValidatedObjectType]) -> str:
    """Generate the definition artifact text."""
    return DefinitionGenerator(namespace, file_prefix).generate(object_types)
