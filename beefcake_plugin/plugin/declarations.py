"""Beefcake declarations for the messages and enums of one proto file.

Output is written in three passes inside the package modules:

1. top-level enums, as modules of constants;
2. message shells: every class with its nested enums and nested shells, but
   no fields, so that any type a field refers to is already defined;
3. message bodies: every class reopened, nested bodies first, then one
   declaration per field.

Ruby reopens classes, so the second pass only adds to the shells of the
first. Declaration order is kept at every level.
"""

from dataclasses import dataclass, field
from typing import Callable, Sequence

from google.protobuf.descriptor_pb2 import (
    DescriptorProto,
    EnumDescriptorProto,
    FileDescriptorProto,
)

from ..compile.naming import rubyize_class_name
from ..compile.symbols import SymbolTable, join_name
from ..errors import MissingDescriptorError
from .models import FieldCompiler, PluginOptions
from .writer import IndentedWriter

MESSAGE_MIXIN = "Beefcake::Message"


def open_namespace(
    writer: IndentedWriter, segments: Sequence[str], body: Callable[[], None]
) -> None:
    """Wrap ``body`` in one module per package segment, outermost first."""
    if not segments:
        body()
        return

    writer.emit(f"module {rubyize_class_name(segments[0])}")
    with writer.scoped():
        open_namespace(writer, segments[1:], body)
    writer.emit("end")


@dataclass
class DeclarationCompiler:
    proto_file: FileDescriptorProto
    writer: IndentedWriter
    symbols: SymbolTable
    options: PluginOptions = field(default_factory=PluginOptions)

    @property
    def package(self) -> str:
        return self.proto_file.package

    def compile(self) -> None:
        segments = self.package.split(".") if self.package else []
        open_namespace(self.writer, segments, self.compile_declarations)

    def compile_declarations(self) -> None:
        for enum in self.proto_file.enum_type:
            self.enum(self.package, enum)

        for message in self.proto_file.message_type:
            self.define(self.package, message)

        for message in self.proto_file.message_type:
            self.message(self.package, message)

    def class_name(self, scope: str, proto_obj) -> str:
        if not proto_obj.name:
            raise MissingDescriptorError(
                f"{type(proto_obj).__name__} has no name",
                file_name=self.proto_file.name,
                element=scope or None,
            )
        return rubyize_class_name(proto_obj.name)

    def enum(self, scope: str, enum: EnumDescriptorProto) -> None:
        name = self.class_name(scope, enum)
        self.writer.emit()
        self.writer.emit(f"module {name}")
        with self.writer.scoped():
            for value in enum.value:
                if not value.name:
                    raise MissingDescriptorError(
                        "Enum value has no name",
                        file_name=self.proto_file.name,
                        element=join_name(scope, enum.name),
                    )
                self.writer.emit(f"{value.name} = {value.number:d}")
        self.writer.emit("end")

    def define(self, scope: str, message: DescriptorProto) -> None:
        """Write the class shell: nested enums and nested shells, no fields."""
        name = self.class_name(scope, message)
        full_name = join_name(scope, message.name)
        self.writer.emit()
        self.writer.emit(f"class {name}")
        with self.writer.scoped():
            self.writer.emit(f"include {MESSAGE_MIXIN}")

            for enum in message.enum_type:
                self.enum(full_name, enum)

            for nested in message.nested_type:
                self.define(full_name, nested)
        self.writer.emit("end")

    def message(self, scope: str, message: DescriptorProto) -> None:
        """Reopen the class and declare its fields, nested classes first."""
        name = self.class_name(scope, message)
        full_name = join_name(scope, message.name)
        self.writer.emit()
        self.writer.emit(f"class {name}")
        with self.writer.scoped():
            for nested in message.nested_type:
                self.message(full_name, nested)

            for proto_field in message.field:
                compiler = FieldCompiler(
                    proto_obj=proto_field,
                    symbols=self.symbols,
                    scope=full_name,
                    file_name=self.proto_file.name,
                    options=self.options,
                )
                self.writer.emit(compiler.get_field_string())
        self.writer.emit("end")
