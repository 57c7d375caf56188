"""Fully-qualified names of every message and enum visible to a request.

protoc hands plugins every file a request depends on, so a table built from
``request.proto_file`` can resolve any ``type_name`` a field carries. Relative
names follow protobuf's C++-like scoping: the first component is searched from
the innermost enclosing scope outwards, and the remainder must exist under the
first match.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Optional

from google.protobuf.descriptor_pb2 import (
    DescriptorProto,
    EnumDescriptorProto,
    FileDescriptorProto,
)

from ..errors import UnresolvedReferenceError

KIND_PACKAGE = "package"
KIND_MESSAGE = "message"
KIND_ENUM = "enum"


@dataclass(frozen=True)
class Symbol:
    full_name: str
    kind: str
    values: FrozenSet[str] = frozenset()


def join_name(scope: str, name: str) -> str:
    return f"{scope}.{name}" if scope else name


def parent_scopes(scope: str) -> List[str]:
    """
    List the scopes searched for a relative name, innermost first.

        pkg.Outer.Inner => ["pkg.Outer.Inner", "pkg.Outer", "pkg", ""]
    """
    parts = scope.split(".") if scope else []
    return [".".join(parts[:i]) for i in range(len(parts), -1, -1)]


@dataclass
class SymbolTable:
    symbols: Dict[str, Symbol] = field(default_factory=dict)

    @classmethod
    def from_files(cls, proto_files: Iterable[FileDescriptorProto]) -> "SymbolTable":
        table = cls()
        for proto_file in proto_files:
            table.add_file(proto_file)
        return table

    def add_file(self, proto_file: FileDescriptorProto) -> None:
        package = proto_file.package
        for scope in parent_scopes(package)[:-1]:
            self.symbols.setdefault(scope, Symbol(scope, KIND_PACKAGE))
        for enum in proto_file.enum_type:
            self._add_enum(package, enum)
        for message in proto_file.message_type:
            self._add_message(package, message)

    def _add_enum(self, scope: str, enum: EnumDescriptorProto) -> None:
        full_name = join_name(scope, enum.name)
        values = frozenset(value.name for value in enum.value)
        self.symbols[full_name] = Symbol(full_name, KIND_ENUM, values)

    def _add_message(self, scope: str, message: DescriptorProto) -> None:
        full_name = join_name(scope, message.name)
        self.symbols[full_name] = Symbol(full_name, KIND_MESSAGE)
        for enum in message.enum_type:
            self._add_enum(full_name, enum)
        for nested in message.nested_type:
            self._add_message(full_name, nested)

    def lookup(self, full_name: str) -> Optional[Symbol]:
        return self.symbols.get(full_name)

    def resolve(self, type_name: str, scope: str = "") -> Symbol:
        """
        Find the message or enum a field's type_name refers to.

        ``scope`` is the fully-qualified name of the message declaring the
        field. Raises UnresolvedReferenceError when nothing matches.
        """
        if type_name.startswith("."):
            symbol = self.lookup(type_name[1:])
        else:
            symbol = self._resolve_relative(type_name, scope)

        if symbol is None or symbol.kind == KIND_PACKAGE:
            raise UnresolvedReferenceError(f"Unable to resolve type {type_name!r}")
        return symbol

    def _resolve_relative(self, type_name: str, scope: str) -> Optional[Symbol]:
        first, _, rest = type_name.partition(".")
        for candidate_scope in parent_scopes(scope):
            candidate = join_name(candidate_scope, first)
            if candidate not in self.symbols:
                continue
            # A single-part name only binds to a type; packages are skipped.
            if not rest and self.symbols[candidate].kind == KIND_PACKAGE:
                continue
            return self.lookup(join_name(candidate, rest) if rest else candidate)
        return None
