"""
genORM Declaration Emitter

Generates the C++ header (<file-prefix>.orm.h) declaring one class per
object type inside a single namespace.
"""

from typing import List, Sequence

from .mapping import DATABASE_PARAMETER, IDENTITY_CXX_TYPE, IDENTITY_NAME, ObjectFacts, object_facts
from .schema import ValidatedObjectType

BANNER = "// Auto-generated file. Changes will be overridden."

DECLARATION_EXTENSION = ".orm.h"

INCLUDES = [
    "<genORM/genORM.h>",
    "<cstdint>",
    "<expected>",
    "<optional>",
    "<string>",
    "<vector>",
]

INDENT = "    "


def declaration_filename(file_prefix: str) -> str:
    return f"{file_prefix}{DECLARATION_EXTENSION}"


class DeclarationGenerator:
    """Generate the declaration artifact from validated object types."""

    def __init__(self, namespace: str):
        self.namespace = namespace

    def generate(self, object_types: Sequence[ValidatedObjectType]) -> str:
        """Generate the header file content."""
        lines = []

        lines.append(BANNER)
        lines.append("#pragma once")
        for include in INCLUDES:
            lines.append(f"#include {include}")
        lines.append("")
        lines.append(f"namespace {self.namespace} {{")

        for object_type in object_types:
            lines.extend(self._generate_class(object_facts(object_type)))
            lines.append("")

        lines.append("}")
        lines.append("")
        return "\n".join(lines)

    def _generate_class(self, obj: ObjectFacts) -> List[str]:
        """Generate the class declaration for one object type."""
        lines = []
        name = obj.name
        i1 = INDENT
        i2 = INDENT * 2

        if obj.description:
            lines.append(f"{i1}/// {obj.description}")
        lines.append(f"{i1}class {name} final : public genORM::object {{")

        # Storage fields
        for m in obj.members:
            if m.description:
                lines.append(f"{i2}/// {m.description}")
            lines.append(f"{i2}{m.representation} {m.field_name};")
        lines.append("")

        lines.append(f"{i2}explicit {name}({DATABASE_PARAMETER}, {IDENTITY_CXX_TYPE} {IDENTITY_NAME}, {obj.parameters});")
        lines.append("")

        # Factory and lookups
        lines.append(f"{i1}public:")
        lines.append(f"{i2}static std::expected<{name}, std::string> create({DATABASE_PARAMETER}, {obj.parameters});")
        lines.append(f"{i2}static std::expected<{name}, std::string> find_by_rowid({DATABASE_PARAMETER}, {IDENTITY_CXX_TYPE} {IDENTITY_NAME});")
        for m in obj.indexed:
            lines.append(f"{i2}static std::expected<std::optional<{name}>, std::string> {m.find_first_name}({DATABASE_PARAMETER}, {m.parameter});")
            lines.append(f"{i2}static std::expected<std::vector<{name}>, std::string> {m.find_all_name}({DATABASE_PARAMETER}, {m.parameter});")
        lines.append("")

        # Getters
        for m in obj.members:
            lines.append(f"{i2}[[nodiscard]] {m.getter_return_type} {m.getter_name}() const {{ return {m.field_name}; }}")
        lines.append("")

        # Setters (declarations only)
        for m in obj.members:
            lines.append(f"{i2}void {m.setter_name}({m.representation});")

        lines.append(f"{i1}}};")
        return lines


def generate_declaration(namespace: str, object_types: Sequence[ValidatedObjectType]) -> str:
    """Generate the declaration artifact text."""
    return DeclarationGenerator(namespace).generate(object_types)
