"""Ruby literals for proto default values.

protoc hands over defaults as text: numbers in their original representation,
booleans as "true"/"false", strings unescaped and bytes already C-escaped.
Every function raises ValueError when the text is not usable as-is.
"""

import re

from ..casing import SCOPE_SEPARATOR

# language=PythonRegExp
INTEGER = re.compile(r"-?(?:0[xX][0-9a-fA-F]+|\d+)")

# Ruby needs digits on both sides of the decimal point.
# language=PythonRegExp
FLOAT = re.compile(r"-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?")

# language=PythonRegExp
IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

SPECIAL_FLOATS = {
    "inf": "Float::INFINITY",
    "-inf": "-Float::INFINITY",
    "nan": "Float::NAN",
}

STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "#": "\\#",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def ruby_string(text: str) -> str:
    escaped = []
    for char in text:
        if char in STRING_ESCAPES:
            escaped.append(STRING_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            escaped.append(f"\\x{ord(char):02x}")
        else:
            escaped.append(char)
    return '"' + "".join(escaped) + '"'


def ruby_bytes(text: str) -> str:
    """Quote a C-escaped bytes default, keeping its escape sequences intact."""
    escaped = []
    backslash = False
    for char in text:
        if backslash:
            escaped.append(char)
            backslash = False
        elif char == "\\":
            escaped.append(char)
            backslash = True
        elif char in '"#':
            escaped.append("\\" + char)
        else:
            escaped.append(char)
    if backslash:
        raise ValueError(f"Dangling escape in bytes default {text!r}")
    return '"' + "".join(escaped) + '"'


def ruby_bool(text: str) -> str:
    if text not in ("true", "false"):
        raise ValueError(f"Expected true or false, got {text!r}")
    return text


def ruby_integer(text: str) -> str:
    if not INTEGER.fullmatch(text):
        raise ValueError(f"Expected an integer, got {text!r}")
    return text


def ruby_float(text: str) -> str:
    if text in SPECIAL_FLOATS:
        return SPECIAL_FLOATS[text]
    if not FLOAT.fullmatch(text):
        raise ValueError(f"Expected a number, got {text!r}")
    return text


def ruby_enum_value(type_token: str, text: str) -> str:
    if not IDENTIFIER.fullmatch(text):
        raise ValueError(f"Expected an enum value name, got {text!r}")
    return f"{type_token}{SCOPE_SEPARATOR}{text}"
