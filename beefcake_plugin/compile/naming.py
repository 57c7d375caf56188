from typing import Dict

from google.protobuf.descriptor_pb2 import FieldDescriptorProto

from beefcake_plugin import casing

LABEL_TOKENS: Dict[int, str] = {
    FieldDescriptorProto.LABEL_OPTIONAL: "optional",  # 1
    FieldDescriptorProto.LABEL_REQUIRED: "required",  # 2
    FieldDescriptorProto.LABEL_REPEATED: "repeated",  # 3
}

TYPE_TOKENS: Dict[int, str] = {
    FieldDescriptorProto.TYPE_DOUBLE: "double",  # 1
    FieldDescriptorProto.TYPE_FLOAT: "float",  # 2
    FieldDescriptorProto.TYPE_INT64: "int64",  # 3
    FieldDescriptorProto.TYPE_UINT64: "uint64",  # 4
    FieldDescriptorProto.TYPE_INT32: "int32",  # 5
    FieldDescriptorProto.TYPE_FIXED64: "fixed64",  # 6
    FieldDescriptorProto.TYPE_FIXED32: "fixed32",  # 7
    FieldDescriptorProto.TYPE_BOOL: "bool",  # 8
    FieldDescriptorProto.TYPE_STRING: "string",  # 9
    FieldDescriptorProto.TYPE_GROUP: "group",  # 10
    FieldDescriptorProto.TYPE_MESSAGE: "message",  # 11
    FieldDescriptorProto.TYPE_BYTES: "bytes",  # 12
    FieldDescriptorProto.TYPE_UINT32: "uint32",  # 13
    FieldDescriptorProto.TYPE_ENUM: "enum",  # 14
    FieldDescriptorProto.TYPE_SFIXED32: "sfixed32",  # 15
    FieldDescriptorProto.TYPE_SFIXED64: "sfixed64",  # 16
    FieldDescriptorProto.TYPE_SINT32: "sint32",  # 17
    FieldDescriptorProto.TYPE_SINT64: "sint64",  # 18
}


def rubyize_class_name(name: str) -> str:
    return casing.camelize(name)


def rubyize_field_name(name: str) -> str:
    return f":{name}"


def rubyize_scalar_type(token: str) -> str:
    return f":{token}"


def rubyize_type_reference(type_name: str, rooted: bool = False) -> str:
    """
    Turn a proto type reference into a Ruby constant path.

        .foo.bar_baz.Msg => Foo::BarBaz::Msg
        Outer.Inner      => Outer::Inner

    When ``rooted`` is set, fully-qualified references are anchored at the
    top-level namespace (``::Foo::BarBaz::Msg``).
    """
    reference = casing.scope_path(type_name.lstrip(".").split("."))
    if rooted and type_name.startswith("."):
        return casing.SCOPE_SEPARATOR + reference
    return reference
