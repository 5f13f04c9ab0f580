"""Error reporting: the reporter protocol and collected diagnostics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, TextIO


class ErrorReporter(Protocol):
    """Anything the scanner can hand a lexical error to."""

    def report(self, line: int, where: str, message: str) -> None: ...


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One reported error, with the 1-based line it was detected on."""

    line: int
    where: str
    message: str

    def format(self) -> str:
        return f"[line {self.line}] Error{self.where}: {self.message}"

    def format_context(self, source: str, filename: str = "<script>") -> str:
        """Render the error with the offending source line underneath."""
        lines = source.splitlines()
        line_idx = self.line - 1

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\r")
        else:
            source_line = ""

        line_num = str(self.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"
        underline = "^" * max(1, len(source_line))

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.line}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {underline}"
        )


@dataclass
class DiagnosticCollector:
    """Accumulate the reports of one run in place of a global error flag.

    When *stream* is set, each report is also printed to it as it arrives.
    """

    stream: TextIO | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def report(self, line: int, where: str, message: str) -> None:
        diag = Diagnostic(line, where, message)
        self.diagnostics.append(diag)
        if self.stream is not None:
            print(diag.format(), file=self.stream)

    @property
    def had_error(self) -> bool:
        return bool(self.diagnostics)
