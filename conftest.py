import pytest

from beefcake_plugin.compile.symbols import SymbolTable


@pytest.fixture
def symbols_for():
    """Build the symbol table a request with the given files would use."""

    def build(*proto_files):
        return SymbolTable.from_files(proto_files)

    return build
