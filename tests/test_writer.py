import pytest

from beefcake_plugin.plugin.writer import IndentedWriter


def test_emit_indents_by_depth():
    writer = IndentedWriter()
    writer.emit("module A")
    with writer.scoped():
        writer.emit("module B")
        with writer.scoped():
            writer.emit("X = 1")
        writer.emit("end")
    writer.emit("end")

    assert writer.getvalue() == "module A\n  module B\n    X = 1\n  end\nend\n"


def test_blank_lines_are_not_indented():
    writer = IndentedWriter()
    with writer.scoped():
        writer.emit()
        writer.emit("x")

    assert writer.getvalue() == "\n  x\n"


def test_scoped_restores_depth_on_error():
    writer = IndentedWriter()
    with pytest.raises(RuntimeError):
        with writer.scoped():
            with writer.scoped():
                assert writer.depth == 2
                raise RuntimeError("boom")

    assert writer.depth == 0
    writer.emit("end")
    assert writer.getvalue() == "end\n"


def test_empty_writer():
    assert IndentedWriter().getvalue() == ""
