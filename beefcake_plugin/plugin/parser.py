import sys
from typing import Optional

from google.protobuf.compiler.plugin_pb2 import (
    CodeGeneratorRequest,
    CodeGeneratorResponse,
)

from ..compile.symbols import SymbolTable
from ..errors import CompilerError
from .compiler import output_file_name, outputfile_compiler
from .models import Artifact, CompileFailure, CompileResult, PluginOptions


def compile_request(
    request: CodeGeneratorRequest, options: Optional[PluginOptions] = None
) -> CompileResult:
    """
    Compile each proto file of the request into one Ruby file.

    Every file protoc supplies is compiled, dependencies included, unless the
    ``requested_only`` option limits output to ``file_to_generate``. A file
    that fails to compile is reported and skipped; the others are unaffected.
    """
    options = options or PluginOptions()
    symbols = SymbolTable.from_files(request.proto_file)
    requested = set(request.file_to_generate)

    result = CompileResult()
    for proto_file in request.proto_file:
        if options.requested_only and proto_file.name not in requested:
            continue

        try:
            content = outputfile_compiler(proto_file, symbols, options)
        except CompilerError as err:
            file_name = proto_file.name or "<unnamed>"
            if not err.file_name:
                err.file_name = file_name
            result.failures.append(CompileFailure(file_name, err))
            continue

        name = output_file_name(proto_file.name, options.suffix)
        result.artifacts.append(Artifact(name=name, content=content))

    return result


def generate_code(request: CodeGeneratorRequest) -> CodeGeneratorResponse:
    response = CodeGeneratorResponse()
    response.supported_features = CodeGeneratorResponse.FEATURE_PROTO3_OPTIONAL

    options = PluginOptions.from_parameter(request.parameter)
    result = compile_request(request, options)

    for artifact in result.artifacts:
        response.file.add(name=artifact.name, content=artifact.content)
        print(f"Writing {artifact.name}", file=sys.stderr)

    for failure in result.failures:
        print(f"\033[31mFailed to compile {failure}\033[0m", file=sys.stderr)

    if result.failures:
        response.error = "\n".join(str(failure) for failure in result.failures)

    return response
