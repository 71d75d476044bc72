"""
Error codes and exceptions for the genORM code generator.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Optional


class ErrorCode(IntEnum):
    """
    genORM error codes.
    
    Every fatal condition of a generation run maps to exactly one code.
    """
    OK = 0
    
    # Config document errors
    CONFIG_UNREADABLE = 1
    CONFIG_MALFORMED = 2
    
    # Schema errors
    EMPTY_MEMBERS = 3
    EMPTY_NAME = 4
    UNKNOWN_KIND = 5
    INVALID_NULLABILITY = 6
    INVALID_INDEX = 7
    RESERVED_NAME = 10
    
    # Output errors
    UNKNOWN_ROOT = 8
    WRITE_FAILED = 9


_DEFAULT_MESSAGES = {
    ErrorCode.CONFIG_UNREADABLE: "Unable to read config document",
    ErrorCode.CONFIG_MALFORMED: "Malformed config document",
    ErrorCode.EMPTY_MEMBERS: "Object type has no members",
    ErrorCode.EMPTY_NAME: "Member name is empty",
    ErrorCode.UNKNOWN_KIND: "Unexpected type",
    ErrorCode.INVALID_NULLABILITY: "Bytearray cannot be null",
    ErrorCode.INVALID_INDEX: "Bytearray cannot be indexed",
    ErrorCode.RESERVED_NAME: "Member name uses the reserved __ prefix",
    ErrorCode.UNKNOWN_ROOT: "Unknown root",
    ErrorCode.WRITE_FAILED: "Unable to write artifact",
}


# ============== Exceptions ==============


class GenOrmError(Exception):
    """
    Base exception for all genORM errors.
    
    Attributes:
        code: The error code
        message: Human-readable error message
    """
    
    def __init__(self, code: int, message: Optional[str] = None):
        self.code = ErrorCode(code) if code in ErrorCode._value2member_map_ else code
        if message is None:
            message = _DEFAULT_MESSAGES.get(self.code, f"genORM error code {code}")
        self.message = message
        super().__init__(self.message)
    
    @classmethod
    def from_code(cls, code: int, message: Optional[str] = None) -> "GenOrmError":
        """
        Create the appropriate exception subclass for an error code.
        
        Args:
            code: Error code
            message: Optional message overriding the default one
            
        Returns:
            Appropriate GenOrmError subclass instance, None for OK
        """
        if code == ErrorCode.OK:
            return None  # type: ignore
        
        error_map = {
            ErrorCode.CONFIG_UNREADABLE: ConfigError,
            ErrorCode.CONFIG_MALFORMED: ConfigError,
            ErrorCode.EMPTY_MEMBERS: SchemaError,
            ErrorCode.EMPTY_NAME: SchemaError,
            ErrorCode.UNKNOWN_KIND: SchemaError,
            ErrorCode.INVALID_NULLABILITY: SchemaError,
            ErrorCode.INVALID_INDEX: SchemaError,
            ErrorCode.RESERVED_NAME: SchemaError,
            ErrorCode.UNKNOWN_ROOT: OutputPathError,
            ErrorCode.WRITE_FAILED: GenerationIOError,
        }
        
        exception_class = error_map.get(code, cls)
        return exception_class(code, message)


class ConfigError(GenOrmError):
    """Raised when the config document is unreadable or malformed."""
    pass


class SchemaError(GenOrmError):
    """
    Raised when an object type or member cannot be represented.
    
    Attributes:
        object_type: Name of the offending object type
        member: Name of the offending member, None for type-level errors
    """
    
    def __init__(
        self,
        code: int,
        message: Optional[str] = None,
        object_type: Optional[str] = None,
        member: Optional[str] = None,
    ):
        self.object_type = object_type
        self.member = member
        super().__init__(code, message)


class OutputPathError(GenOrmError):
    """Raised when the output directory cannot be resolved."""
    pass


class GenerationIOError(GenOrmError):
    """Raised when a generated artifact cannot be written."""
    pass

