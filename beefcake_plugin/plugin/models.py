"""Plugin model dataclasses.

These classes sit between the protobuf descriptors handed over by protoc and
the Ruby text written out for them. A FieldCompiler wraps one
FieldDescriptorProto and exposes the tokens of its Beefcake declaration:

    <label> <name>, <type>, <number>[, :default => <default>]

Descriptors are never modified; everything is computed from ``proto_obj``
and the request-wide SymbolTable on demand.
"""

import sys
from dataclasses import dataclass, field
from functools import cached_property
from typing import List, Optional

from google.protobuf.descriptor_pb2 import FieldDescriptorProto

from ..compile import literals
from ..compile.naming import (
    LABEL_TOKENS,
    TYPE_TOKENS,
    rubyize_field_name,
    rubyize_scalar_type,
    rubyize_type_reference,
)
from ..compile.symbols import KIND_ENUM, KIND_MESSAGE, Symbol, SymbolTable, join_name
from ..errors import (
    CompilerError,
    MalformedDefaultError,
    MissingDescriptorError,
    UnmappedTypeError,
    UnresolvedReferenceError,
)

DEFAULT_SUFFIX = ".pb.rb"

# Organize proto types into categories
PROTO_FLOAT_TYPES = (
    FieldDescriptorProto.TYPE_DOUBLE,  # 1
    FieldDescriptorProto.TYPE_FLOAT,  # 2
)
PROTO_INT_TYPES = (
    FieldDescriptorProto.TYPE_INT64,  # 3
    FieldDescriptorProto.TYPE_UINT64,  # 4
    FieldDescriptorProto.TYPE_INT32,  # 5
    FieldDescriptorProto.TYPE_FIXED64,  # 6
    FieldDescriptorProto.TYPE_FIXED32,  # 7
    FieldDescriptorProto.TYPE_UINT32,  # 13
    FieldDescriptorProto.TYPE_SFIXED32,  # 15
    FieldDescriptorProto.TYPE_SFIXED64,  # 16
    FieldDescriptorProto.TYPE_SINT32,  # 17
    FieldDescriptorProto.TYPE_SINT64,  # 18
)
PROTO_MESSAGE_TYPES = (
    FieldDescriptorProto.TYPE_GROUP,  # 10
    FieldDescriptorProto.TYPE_MESSAGE,  # 11
)
PROTO_ENUM_TYPES = (FieldDescriptorProto.TYPE_ENUM,)  # 14


@dataclass
class PluginOptions:
    """Options passed as ``--beefcake_opt=a,b=c`` on the protoc command line."""

    requested_only: bool = False
    rooted_references: bool = False
    suffix: str = DEFAULT_SUFFIX

    @classmethod
    def from_parameter(cls, parameter: str) -> "PluginOptions":
        options = cls()
        for option in (part.strip() for part in parameter.split(",")):
            if not option:
                continue
            key, _, value = option.partition("=")
            if key in ("requested_only", "rooted_references") and not value:
                setattr(options, key, True)
            elif key == "suffix" and value:
                options.suffix = value
            else:
                print(
                    f"\033[33mIgnoring unknown plugin option: {option}\033[0m",
                    file=sys.stderr,
                )
        return options


@dataclass
class FieldCompiler:
    proto_obj: FieldDescriptorProto
    symbols: SymbolTable
    # Fully-qualified name of the declaring message, e.g. "pkg.Outer.Inner".
    scope: str = ""
    file_name: Optional[str] = None
    options: PluginOptions = field(default_factory=PluginOptions)

    def error(self, cls, msg: str) -> CompilerError:
        return cls(msg, file_name=self.file_name, element=self.full_name)

    def get_field_string(self) -> str:
        """Construct the Beefcake declaration line for this field."""
        out = (
            f"{self.label_token} {self.name_token}, "
            f"{self.type_token}, {self.number}"
        )
        default = self.default_expr
        if default is not None:
            out += f", :default => {default}"
        return out

    @property
    def full_name(self) -> str:
        return join_name(self.scope, self.proto_obj.name or "<unnamed>")

    @property
    def number(self) -> int:
        if not self.proto_obj.HasField("number"):
            raise self.error(MissingDescriptorError, "Field has no number")
        return self.proto_obj.number

    @property
    def label_token(self) -> str:
        if not self.proto_obj.HasField("label"):
            raise self.error(MissingDescriptorError, "Field has no label")
        token = LABEL_TOKENS.get(self.proto_obj.label)
        if token is None:
            raise self.error(
                UnmappedTypeError, f"Unknown field label {self.proto_obj.label}"
            )
        return token

    @property
    def name_token(self) -> str:
        if not self.proto_obj.name:
            raise self.error(MissingDescriptorError, "Field has no name")
        return rubyize_field_name(self.proto_obj.name)

    @cached_property
    def symbol(self) -> Optional[Symbol]:
        """The message or enum referenced by type_name, if there is one."""
        type_name = self.proto_obj.type_name
        if not type_name:
            return None
        try:
            symbol = self.symbols.resolve(type_name, self.scope)
        except UnresolvedReferenceError as err:
            raise self.error(UnresolvedReferenceError, err.msg) from err

        if self.proto_obj.HasField("type"):
            expected = None
            if self.proto_obj.type in PROTO_ENUM_TYPES:
                expected = KIND_ENUM
            elif self.proto_obj.type in PROTO_MESSAGE_TYPES:
                expected = KIND_MESSAGE
            if expected is not None and symbol.kind != expected:
                raise self.error(
                    UnresolvedReferenceError,
                    f"Type {type_name!r} is a {symbol.kind}, expected a {expected}",
                )
        return symbol

    @property
    def field_type(self) -> int:
        """The proto type constant, inferred from type_name when unset."""
        if self.proto_obj.HasField("type"):
            return self.proto_obj.type
        symbol = self.symbol
        if symbol is None:
            raise self.error(
                MissingDescriptorError, "Field has neither a type nor a type_name"
            )
        if symbol.kind == KIND_ENUM:
            return FieldDescriptorProto.TYPE_ENUM
        return FieldDescriptorProto.TYPE_MESSAGE

    @property
    def type_token(self) -> str:
        # Dangling references must never reach the output.
        if self.proto_obj.type_name and self.symbol:
            return rubyize_type_reference(
                self.proto_obj.type_name, rooted=self.options.rooted_references
            )

        field_type = self.field_type
        token = TYPE_TOKENS.get(field_type)
        if token is None:
            raise self.error(UnmappedTypeError, f"Unknown field type {field_type}")
        if field_type in PROTO_MESSAGE_TYPES + PROTO_ENUM_TYPES:
            raise self.error(
                MissingDescriptorError, f"Field of type {token} has no type_name"
            )
        return rubyize_scalar_type(token)

    @property
    def default_expr(self) -> Optional[str]:
        """Ruby expression for the declared default value, if any."""
        if not self.proto_obj.HasField("default_value"):
            return None

        text = self.proto_obj.default_value
        field_type = self.field_type
        try:
            if field_type in PROTO_ENUM_TYPES:
                return self.enum_default(text)
            elif field_type == FieldDescriptorProto.TYPE_STRING:
                return literals.ruby_string(text)
            elif field_type == FieldDescriptorProto.TYPE_BYTES:
                return literals.ruby_bytes(text)
            elif field_type == FieldDescriptorProto.TYPE_BOOL:
                return literals.ruby_bool(text)
            elif field_type in PROTO_INT_TYPES:
                return literals.ruby_integer(text)
            elif field_type in PROTO_FLOAT_TYPES:
                return literals.ruby_float(text)
            else:
                raise ValueError("Message fields cannot have a default value")
        except ValueError as err:
            raise self.error(MalformedDefaultError, str(err)) from err

    def enum_default(self, text: str) -> str:
        literal = literals.ruby_enum_value(self.type_token, text)
        if text not in self.symbol.values:
            raise ValueError(
                f"{text!r} is not a value of {self.proto_obj.type_name.lstrip('.')}"
            )
        return literal


@dataclass
class Artifact:
    """One generated Ruby file."""

    name: str
    content: str


@dataclass
class CompileFailure:
    file_name: str
    error: CompilerError

    def __str__(self) -> str:
        if self.error.file_name:
            return str(self.error)
        return f"{self.file_name}: {self.error}"


@dataclass
class CompileResult:
    artifacts: List[Artifact] = field(default_factory=list)
    failures: List[CompileFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures
