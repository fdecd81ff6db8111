# src/treeyaml/loader/line_parser.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from treeyaml.core.exceptions import (
    TreeFormatError,
    YamlIndentationError,
    YamlSyntaxError,
)

LITERAL_INTRODUCER = "|"
FOLDED_INTRODUCER = ">"


class ValueKind(Enum):
    """How the value of a declaration is spread over physical lines."""

    SINGLE = "single"
    LITERAL = "literal"
    FOLDED = "folded"


@dataclass(frozen=True)
class Declaration:
    """
    A 'name: value' line.

    Attributes:
        name: Trimmed text before the first ':'.
        value: Trimmed (and unquoted) text after it; empty for block introducers.
        indent_delta: Levels opened (positive) or closed (negative) relative
            to the previous declaration.
        value_kind: SINGLE, or the block mode requested for following lines.
        lineno: 1-based physical line number.
    """

    name: str
    value: str
    indent_delta: int
    value_kind: ValueKind
    lineno: int = 0


@dataclass(frozen=True)
class Continuation:
    """A content line of the currently open multi-line block."""

    fragment: str
    value_kind: ValueKind
    lineno: int = 0


@dataclass(frozen=True)
class Skip:
    """Blank or comment line outside a block."""

    lineno: int = 0


@dataclass(frozen=True)
class ParseFailure:
    """A line that could not be parsed; the error is returned, not raised."""

    error: TreeFormatError
    lineno: int = 0


LineEvent = Union[Declaration, Continuation, Skip, ParseFailure]


def _count_leading(line: str, char: str = " ") -> int:
    return len(line) - len(line.lstrip(char))


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters but preserve all other whitespace."""
    return line.rstrip("\r\n")


def strip_quotes(value: str, quote_char: str) -> str:
    """Remove one matching pair of surrounding quote characters."""
    if (
        quote_char
        and len(value) >= 2 * len(quote_char)
        and value.startswith(quote_char)
        and value.endswith(quote_char)
    ):
        return value[len(quote_char): len(value) - len(quote_char)]
    return value


class LineParser:
    """
    Line-at-a-time state machine for the indented tree format.

    States are Idle, InLiteralBlock and InFoldedBlock. A declaration whose
    value is '|' or '>' opens a block on the following line; the block
    closes at the first non-blank line that is not indented deeper than
    that declaration.

    The whole session state lives on the instance. Call reset() (or use a
    fresh instance) before parsing another stream.
    """

    def __init__(self, quote_char: str = '"'):
        self.quote_char = quote_char
        self.indent_stack: List[int] = []
        self.prev_indent: int = 0
        self.pending_kind: ValueKind = ValueKind.SINGLE
        self.active_kind: ValueKind = ValueKind.SINGLE
        self.first_continuation_indent: Optional[int] = None
        self.lineno: int = 0

    def reset(self) -> None:
        self.indent_stack = []
        self.prev_indent = 0
        self.pending_kind = ValueKind.SINGLE
        self.active_kind = ValueKind.SINGLE
        self.first_continuation_indent = None
        self.lineno = 0

    @property
    def in_block(self) -> bool:
        return self.active_kind is not ValueKind.SINGLE

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def parse_line(self, raw_line: str) -> LineEvent:
        """
        Classify one physical line and return the resulting event.

        Syntax and indentation problems come back as ParseFailure. A failing
        line never changes the indent stack.
        """
        self.lineno += 1
        try:
            return self._parse(raw_line)
        except TreeFormatError as exc:
            return ParseFailure(error=exc, lineno=self.lineno)

    def parse_line_or_raise(self, raw_line: str) -> LineEvent:
        event = self.parse_line(raw_line)
        if isinstance(event, ParseFailure):
            raise event.error
        return event

    # ------------------------------------------------------------------ #
    # Internals
    # ------------------------------------------------------------------ #

    def _parse(self, raw_line: str) -> LineEvent:
        line = _strip_eol(raw_line)
        if self.lineno == 1 and line.startswith("\ufeff"):
            line = line.lstrip("\ufeff")

        # The kind requested by the previous declaration takes effect now.
        if self.pending_kind is not ValueKind.SINGLE:
            self.active_kind = self.pending_kind
            self.pending_kind = ValueKind.SINGLE

        if self.in_block:
            event = self._continue_block(line)
            if event is not None:
                return event

        # --- 1. Lexical checks ------------------------------------------
        if "\t" in line:
            raise YamlSyntaxError("tab not allowed", self.lineno, line)

        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            return Skip(lineno=self.lineno)

        colon = line.find(":")
        if colon < 0:
            raise YamlSyntaxError("missing ':'", self.lineno, line)

        # --- 2. Indentation ---------------------------------------------
        name_field = line[:colon]
        indent = _count_leading(name_field)
        delta = self._push_indent(indent, line)
        self.prev_indent = indent

        # --- 3. Name and value ------------------------------------------
        name = name_field.strip()
        value = line[colon + 1:].strip()

        if value == LITERAL_INTRODUCER:
            self.pending_kind = ValueKind.LITERAL
        elif value == FOLDED_INTRODUCER:
            self.pending_kind = ValueKind.FOLDED
        else:
            self.pending_kind = ValueKind.SINGLE

        if self.pending_kind is ValueKind.SINGLE:
            value = strip_quotes(value, self.quote_char)
        else:
            value = ""
            self.first_continuation_indent = None

        return Declaration(
            name=name,
            value=value,
            indent_delta=delta,
            value_kind=self.pending_kind,
            lineno=self.lineno,
        )

    def _continue_block(self, line: str) -> Optional[Continuation]:
        """Return a Continuation, or None once the block has ended."""
        if not line.strip():
            # Blank lines never end a block. A literal block keeps the spaces
            # past its baseline; otherwise the fragment is empty.
            baseline = self.first_continuation_indent
            fragment = ""
            if self.active_kind is ValueKind.LITERAL and baseline is not None:
                fragment = line[baseline:]
            return Continuation(fragment=fragment, value_kind=self.active_kind, lineno=self.lineno)

        indent = _count_leading(line)
        if self.first_continuation_indent is None:
            # Every line of the block loses exactly this many columns.
            self.first_continuation_indent = indent

        if indent > self.prev_indent:
            return Continuation(
                fragment=line[self.first_continuation_indent:],
                value_kind=self.active_kind,
                lineno=self.lineno,
            )

        self.active_kind = ValueKind.SINGLE
        self.first_continuation_indent = None
        return None

    def _push_indent(self, indent: int, line: str) -> int:
        """Update the indent stack and return the signed level delta."""
        stack = self.indent_stack
        prev_index = stack.index(self.prev_indent) if stack else 0

        if not stack or indent > stack[-1]:
            new_stack = stack + [indent]
        elif indent == stack[-1]:
            new_stack = stack
        elif indent in stack:
            # Dedent: every level deeper than this one is closed.
            new_stack = stack[: stack.index(indent) + 1]
        else:
            raise YamlIndentationError(
                f"indentation of {indent} does not match any open level {stack}",
                self.lineno,
                line,
            )

        self.indent_stack = new_stack
        return new_stack.index(indent) - prev_index
