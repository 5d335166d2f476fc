"""
Tokenizer for the command grammar written in a SYNOPSIS section.

    SYNTAX: prog [-v] [-o file]
            -x pattern
            file ...

The first token is the program name. The rest of the keyword line and
every following line are runs of options (leading ``-``), operands and
punctuation. Rendering is left to the dialect backends.
"""

from dataclasses import dataclass
from enum import Enum

SYNOPSIS_SECTION = "SYNOPSIS"
SYNOPSIS_KEYWORD = "SYNTAX:"

PUNCTUATION = "[]{}|"
ELLIPSIS = "..."


class TokenKind(Enum):
    OPTION = "option"
    OPERAND = "operand"
    PUNCTUATION = "punctuation"
    SPACE = "space"


@dataclass(frozen=True)
class SynopsisToken:
    kind: TokenKind
    text: str


@dataclass(frozen=True)
class Synopsis:
    """
    A program name and its argument runs, one run per source line.

    ``inline_first`` is set when the first run was written on the
    keyword line after the program name.
    """
    program: str
    runs: tuple[tuple[SynopsisToken, ...], ...] = ()
    inline_first: bool = False

    def lines(self) -> list[tuple[str, tuple[SynopsisToken, ...]]]:
        """Pair each output line's leading program name (or "") with its run."""
        runs = list(self.runs)
        if self.inline_first and runs:
            out = [(self.program, runs.pop(0))]
        else:
            out = [(self.program, ())]
        out.extend(("", run) for run in runs)
        return out


def run_text(run) -> str:
    return "".join(token.text for token in run)


def words(run) -> list[SynopsisToken]:
    """The run without its SPACE tokens."""
    return [token for token in run if token.kind is not TokenKind.SPACE]


def tokenize_run(text: str) -> tuple[SynopsisToken, ...]:
    """Split one line of the grammar into tokens."""
    tokens = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch.isspace():
            j = i
            while j < n and text[j].isspace():
                j += 1
            tokens.append(SynopsisToken(TokenKind.SPACE, " "))
            i = j
        elif ch in PUNCTUATION:
            tokens.append(SynopsisToken(TokenKind.PUNCTUATION, ch))
            i += 1
        elif text.startswith(ELLIPSIS, i):
            tokens.append(SynopsisToken(TokenKind.PUNCTUATION, ELLIPSIS))
            i += len(ELLIPSIS)
        else:
            j = i
            while (j < n and not text[j].isspace() and text[j] not in PUNCTUATION
                   and not text.startswith(ELLIPSIS, j)):
                j += 1
            word = text[i:j]
            kind = TokenKind.OPTION if word.startswith("-") else TokenKind.OPERAND
            tokens.append(SynopsisToken(kind, word))
            i = j
    return tuple(tokens)


def parse_synopsis(lines: list[str]) -> Synopsis:
    """
    Build a Synopsis from the keyword line's remainder and its
    continuation lines.

    A keyword alone on its line takes the program name from the first
    non-blank line after it.
    """
    rest = list(lines)
    while len(rest) > 1 and not rest[0].strip():
        rest.pop(0)
    head = rest[0].split(None, 1) if rest else []
    program = head[0] if head else ""
    runs = []
    inline_first = len(head) > 1
    if inline_first:
        runs.append(tokenize_run(head[1].strip()))
    for line in rest[1:]:
        line = line.strip()
        if line:
            runs.append(tokenize_run(line))
    return Synopsis(program=program, runs=tuple(runs), inline_first=inline_first)
