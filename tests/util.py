from typing import Iterable, Optional, Sequence, Tuple

from google.protobuf.compiler.plugin_pb2 import CodeGeneratorRequest
from google.protobuf.descriptor_pb2 import (
    DescriptorProto,
    EnumDescriptorProto,
    EnumValueDescriptorProto,
    FieldDescriptorProto,
    FileDescriptorProto,
)

LABEL_OPTIONAL = FieldDescriptorProto.LABEL_OPTIONAL
LABEL_REQUIRED = FieldDescriptorProto.LABEL_REQUIRED
LABEL_REPEATED = FieldDescriptorProto.LABEL_REPEATED


def make_field(
    name: str,
    number: int,
    type: Optional[int] = FieldDescriptorProto.TYPE_INT32,
    label: int = LABEL_OPTIONAL,
    type_name: Optional[str] = None,
    default_value: Optional[str] = None,
) -> FieldDescriptorProto:
    proto_field = FieldDescriptorProto(name=name, number=number, label=label)
    if type is not None:
        proto_field.type = type
    if type_name is not None:
        proto_field.type_name = type_name
    if default_value is not None:
        proto_field.default_value = default_value
    return proto_field


def make_enum(name: str, *values: Tuple[str, int]) -> EnumDescriptorProto:
    return EnumDescriptorProto(
        name=name,
        value=[EnumValueDescriptorProto(name=n, number=v) for n, v in values],
    )


def make_message(
    name: str,
    fields: Sequence[FieldDescriptorProto] = (),
    nested: Sequence[DescriptorProto] = (),
    enums: Sequence[EnumDescriptorProto] = (),
) -> DescriptorProto:
    return DescriptorProto(
        name=name, field=fields, nested_type=nested, enum_type=enums
    )


def make_file(
    name: str,
    package: str = "",
    messages: Sequence[DescriptorProto] = (),
    enums: Sequence[EnumDescriptorProto] = (),
) -> FileDescriptorProto:
    proto_file = FileDescriptorProto(
        name=name, message_type=messages, enum_type=enums
    )
    if package:
        proto_file.package = package
    return proto_file


def make_request(
    files: Iterable[FileDescriptorProto],
    file_to_generate: Iterable[str] = (),
    parameter: Optional[str] = None,
) -> CodeGeneratorRequest:
    request = CodeGeneratorRequest(
        proto_file=list(files), file_to_generate=list(file_to_generate)
    )
    if parameter is not None:
        request.parameter = parameter
    return request
