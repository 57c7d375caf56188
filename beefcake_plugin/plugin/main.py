#!/usr/bin/env python

import os
import sys

from google.protobuf.compiler.plugin_pb2 import CodeGeneratorRequest

from beefcake_plugin.plugin.parser import generate_code


def main() -> None:
    """The plugin's main entry point."""
    # Read request message from stdin
    data = sys.stdin.buffer.read()

    # Parse request
    request = CodeGeneratorRequest()
    request.ParseFromString(data)

    dump_file = os.getenv("BEEFCAKE_DUMP")
    if dump_file:
        dump_request(dump_file, request)

    # Generate code
    response = generate_code(request)

    # Serialise response message
    output = response.SerializeToString()

    # Write to stdout
    sys.stdout.buffer.write(output)


def dump_request(dump_file: str, request: CodeGeneratorRequest) -> None:
    """
    Save the serialized request so a failing protoc invocation can be replayed.

        BEEFCAKE_DUMP=request.bin protoc --beefcake_out=. foo.proto
        python -m beefcake_plugin < request.bin
    """
    print(f"\033[33mSaving protoc request to {dump_file}\033[0m", file=sys.stderr)
    with open(dump_file, "wb") as fh:
        fh.write(request.SerializeToString())


if __name__ == "__main__":
    main()
