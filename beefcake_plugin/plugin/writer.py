from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

INDENT = "  "


@dataclass
class IndentedWriter:
    """Line-oriented output buffer that indents by the current nesting depth."""

    indent: str = INDENT
    depth: int = field(init=False, default=0)
    lines: List[str] = field(init=False, default_factory=list)

    def emit(self, line: Optional[str] = None) -> None:
        if line is None:
            self.lines.append("")
        else:
            self.lines.append(self.indent * self.depth + line)

    @contextmanager
    def scoped(self) -> Iterator["IndentedWriter"]:
        self.depth += 1
        try:
            yield self
        finally:
            self.depth -= 1

    def getvalue(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)
