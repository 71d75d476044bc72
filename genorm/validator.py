"""
genORM Schema Validator

Checks object types against the structural and kind-specific rules before
any text is emitted. validate_all() covers a whole run, so a defect in the
last object type aborts generation before the first artifact is written.
"""

from typing import Iterable, List

from ._logging import get_logger
from .mapping import facts_for
from .schema import Kind, Member, ObjectType, ValidatedMember, ValidatedObjectType
from .types import ErrorCode, SchemaError

logger = get_logger("validator")

_KINDS = {kind.value: kind for kind in Kind}

RESERVED_PREFIX = "__"


def validate_member(object_type: ObjectType, member: Member) -> ValidatedMember:
    """Validate one member of `object_type`."""
    if not member.name:
        raise SchemaError(
            ErrorCode.EMPTY_NAME,
            f"Member name is empty in object type: {object_type.name}",
            object_type=object_type.name,
        )

    # __db, __id, __row and the emitted locals live in this namespace
    if member.name.startswith(RESERVED_PREFIX):
        raise SchemaError(
            ErrorCode.RESERVED_NAME,
            f"Member name uses the reserved {RESERVED_PREFIX} prefix: {object_type.name}.{member.name}",
            object_type=object_type.name,
            member=member.name,
        )

    kind = _KINDS.get(member.kind)
    if kind is None:
        raise SchemaError(
            ErrorCode.UNKNOWN_KIND,
            f"Unexpected type: {member.kind} ({object_type.name}.{member.name})",
            object_type=object_type.name,
            member=member.name,
        )

    facts = facts_for(kind)
    if member.allow_null and not facts.nullable:
        raise SchemaError(
            ErrorCode.INVALID_NULLABILITY,
            f"{kind.value} cannot be null ({object_type.name}.{member.name})",
            object_type=object_type.name,
            member=member.name,
        )
    if member.indexed and not facts.indexable:
        raise SchemaError(
            ErrorCode.INVALID_INDEX,
            f"{kind.value} cannot be indexed ({object_type.name}.{member.name})",
            object_type=object_type.name,
            member=member.name,
        )

    return ValidatedMember(
        name=member.name,
        kind=kind,
        description=member.description,
        allow_null=member.allow_null,
        indexed=member.indexed,
    )


def validate(object_type: ObjectType) -> ValidatedObjectType:
    """
    Validate an object type.

    Raises:
        SchemaError: On the first member (in declaration order) that fails.
    """
    if not object_type.members:
        raise SchemaError(
            ErrorCode.EMPTY_MEMBERS,
            f"Object type has no members: {object_type.name}",
            object_type=object_type.name,
        )

    members = tuple(validate_member(object_type, m) for m in object_type.members)
    return ValidatedObjectType(
        name=object_type.name,
        members=members,
        description=object_type.description,
    )


def validate_all(object_types: Iterable[ObjectType]) -> List[ValidatedObjectType]:
    """Validate every object type of a run, in order."""
    validated = [validate(t) for t in object_types]
    logger.debug("Validated %d object type(s)", len(validated))
    return validated
