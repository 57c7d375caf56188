import re
from typing import Iterable

# Ruby scope separator, also used for nested type references.
SCOPE_SEPARATOR = "::"

# Constant-style names such as FOO_BAR or HTTP_2 are left alone.
# language=PythonRegExp
SCREAMING_SNAKE = re.compile(r"[A-Z\d]+(?:_[A-Z\d]+)+")

# language=PythonRegExp
LEADING_WORD = re.compile(r"^[a-z\d]*")

# A word introduced by an underscore or a path separator.
# language=PythonRegExp
SEPARATED_WORD = re.compile(r"(?:_|(/))([a-z\d]*)", re.IGNORECASE)


def camelize(term: str) -> str:
    """
    Convert a snake or slash separated identifier into a Ruby constant name.

        foo_bar     => FooBar
        foo/bar_baz => Foo::BarBaz
        FOO_BAR     => FOO_BAR
    """
    value = str(term)
    if SCREAMING_SNAKE.fullmatch(value):
        return value

    value = LEADING_WORD.sub(lambda match: match.group(0).capitalize(), value, count=1)
    value = SEPARATED_WORD.sub(
        lambda match: (match.group(1) or "") + match.group(2).capitalize(), value
    )
    return value.replace("/", SCOPE_SEPARATOR)


def scope_path(segments: Iterable[str]) -> str:
    """Camelize each segment and join them into a scoped constant path."""
    return SCOPE_SEPARATOR.join(camelize(segment) for segment in segments)
