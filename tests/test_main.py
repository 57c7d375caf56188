import io
import sys
from types import SimpleNamespace

import pytest
from google.protobuf.compiler.plugin_pb2 import (
    CodeGeneratorRequest,
    CodeGeneratorResponse,
)

from beefcake_plugin.plugin import import_exception_hook, main
from tests.util import make_field, make_file, make_message, make_request


@pytest.fixture
def request_bytes() -> bytes:
    hello = make_message("Hello", [make_field("n", 1)])
    proto_file = make_file("hello.proto", package="greet", messages=[hello])
    request = make_request([proto_file], file_to_generate=["hello.proto"])
    return request.SerializeToString()


def run_main(monkeypatch, data: bytes) -> CodeGeneratorResponse:
    stdout = io.BytesIO()
    monkeypatch.setattr(sys, "stdin", SimpleNamespace(buffer=io.BytesIO(data)))
    monkeypatch.setattr(sys, "stdout", SimpleNamespace(buffer=stdout))
    main()

    response = CodeGeneratorResponse()
    response.ParseFromString(stdout.getvalue())
    return response


def test_main_round_trips_through_protoc_streams(monkeypatch, request_bytes):
    monkeypatch.delenv("BEEFCAKE_DUMP", raising=False)
    response = run_main(monkeypatch, request_bytes)

    assert [file.name for file in response.file] == ["hello.pb.rb"]
    assert "module Greet\n" in response.file[0].content
    assert "    optional :n, :int32, 1\n" in response.file[0].content


def test_main_dumps_the_request(monkeypatch, tmp_path, request_bytes):
    dump_file = tmp_path / "request.bin"
    monkeypatch.setenv("BEEFCAKE_DUMP", str(dump_file))
    run_main(monkeypatch, request_bytes)

    dumped = CodeGeneratorRequest()
    dumped.ParseFromString(dump_file.read_bytes())
    assert list(dumped.file_to_generate) == ["hello.proto"]


def raised_in(module_name: str, exc: BaseException) -> BaseException:
    """Raise ``exc`` from a frame that belongs to ``module_name``."""
    namespace = {"__name__": module_name}
    exec("def fail(exc):\n    raise exc\n", namespace)
    try:
        namespace["fail"](exc)
    except BaseException as err:
        return err


@pytest.mark.parametrize(
    ["missing", "distribution"],
    [
        ("jinja2", "jinja2"),
        ("google.protobuf", "protobuf"),
    ],
)
def test_missing_dependency_prints_install_hint(capsys, missing, distribution):
    err = raised_in("beefcake_plugin.plugin.compiler", ImportError(name=missing))

    with pytest.raises(SystemExit) as exc_info:
        import_exception_hook(type(err), err, err.__traceback__)

    assert exc_info.value.code == 1
    stderr = capsys.readouterr().err
    assert stderr.startswith("\033[31m")
    assert f"could not import `{missing}`" in stderr
    assert f"Install the `{distribution}` package" in stderr


@pytest.mark.parametrize(
    ["module_name", "exc"],
    [
        pytest.param(
            "beefcake_plugin.plugin.compiler", ValueError("boom"), id="not-import"
        ),
        pytest.param("somewhere.else", ImportError(name="jinja2"), id="outside"),
        pytest.param(
            "beefcake_plugin.plugin.parser",
            ImportError(name="yaml"),
            id="unrelated-module",
        ),
    ],
)
def test_other_exceptions_go_to_default_hook(monkeypatch, module_name, exc):
    seen = []
    monkeypatch.setattr(sys, "__excepthook__", lambda *args: seen.append(args))
    err = raised_in(module_name, exc)

    import_exception_hook(type(err), err, err.__traceback__)

    assert seen == [(type(err), err, err.__traceback__)]
