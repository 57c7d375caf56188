import os.path
from typing import Optional

import jinja2
from google.protobuf.descriptor_pb2 import FileDescriptorProto

from ..compile.symbols import SymbolTable
from ..errors import MissingDescriptorError
from .declarations import DeclarationCompiler
from .models import DEFAULT_SUFFIX, PluginOptions
from .writer import IndentedWriter

PROTO_SUFFIX = ".proto"

templates_folder = os.path.abspath(
    os.path.join(os.path.dirname(__file__), "..", "templates")
)

env = jinja2.Environment(
    trim_blocks=True,
    lstrip_blocks=True,
    loader=jinja2.FileSystemLoader(templates_folder),
    undefined=jinja2.StrictUndefined,
)


def output_file_name(proto_name: str, suffix: str = DEFAULT_SUFFIX) -> str:
    """
    foo/bar.proto => bar.pb.rb
    """
    base = os.path.basename(proto_name)
    if base.endswith(PROTO_SUFFIX):
        base = base[: -len(PROTO_SUFFIX)]
    return base + suffix


def outputfile_compiler(
    proto_file: FileDescriptorProto,
    symbols: Optional[SymbolTable] = None,
    options: Optional[PluginOptions] = None,
) -> str:
    if not proto_file.name:
        raise MissingDescriptorError("File descriptor has no name")
    if symbols is None:
        symbols = SymbolTable.from_files([proto_file])
    options = options or PluginOptions()

    writer = IndentedWriter()
    header = env.get_template("header.rb.j2").render(
        file_name=proto_file.name, package=proto_file.package
    )
    for line in header.splitlines():
        writer.emit(line)
    writer.emit()

    DeclarationCompiler(
        proto_file=proto_file, writer=writer, symbols=symbols, options=options
    ).compile()
    return writer.getvalue()
