from typing import Optional


class CompilerError(Exception):
    """The base class for all exceptions raised while compiling a file.

    Attributes
    ----------
    msg: :class:`str`
        What went wrong, e.g. "Unknown field type 42".
    file_name: Optional[:class:`str`]
        The proto file being compiled when the error occurred.
    element: Optional[:class:`str`]
        The fully qualified name of the offending descriptor, e.g. "pkg.Msg.field".
    """

    def __init__(
        self,
        msg: str,
        file_name: Optional[str] = None,
        element: Optional[str] = None,
    ):
        super().__init__(msg)
        self.msg = msg
        self.file_name = file_name
        self.element = element

    def __str__(self) -> str:
        location = [part for part in (self.file_name, self.element) if part]
        if not location:
            return self.msg
        return f"{': '.join(location)}: {self.msg}"


class UnmappedTypeError(CompilerError):
    """A field label or type constant has no Beefcake token."""


class UnresolvedReferenceError(CompilerError):
    """A field's type_name does not name a declared message or enum."""


class MalformedDefaultError(CompilerError):
    """A field's default_value is not a valid literal for its type."""


class MissingDescriptorError(CompilerError):
    """A descriptor is missing an attribute the generator cannot do without."""
