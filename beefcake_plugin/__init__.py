from .casing import camelize
from .errors import (
    CompilerError,
    MalformedDefaultError,
    MissingDescriptorError,
    UnmappedTypeError,
    UnresolvedReferenceError,
)
