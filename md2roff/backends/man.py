"""
man(7) backend: Linux manual pages.
"""

from ..options import Dialect, SynopsisStyle
from ..state import ListKind
from ..synopsis import TokenKind, words
from .base import Backend, option_text, quote_arg


class ManBackend(Backend):
    """Renders events with the man macro package."""

    dialect = Dialect.MAN
    macro_file = "man.tmac"

    def title_lines(self, title) -> list[str]:
        if title.synthesized:
            return [f".TH {title.name} {title.section} {title.today.isoformat()} document"]
        line = f".TH {title.name} {title.section} {quote_arg(title.date)}"
        if title.extra:
            line += f" {title.extra}"
        return [line]

    def paragraph_break(self, event) -> str:
        return ".PP\n"

    def header(self, event) -> str:
        if event.level <= 2:
            return f".SH {event.title}".rstrip() + "\n"
        if event.level == 3:
            return f".SS {event.title}".rstrip() + "\n"
        # run-in term, the following text becomes its description
        return f".TP\n\\fB{event.title}\\fR\n"

    def list_open(self, event) -> str:
        return ".RS 4\n" if event.depth > 1 else ""

    def list_close(self, event) -> str:
        return ".RE\n" if event.depth > 1 else ""

    def item_open(self, event) -> str:
        if event.kind is ListKind.UNORDERED:
            return ".IP \\(bu 4\n"
        return f".IP {event.number}. 4\n"

    def code_block_open(self, event) -> str:
        return ".in +4n\n.EX\n"

    def code_block_close(self, event) -> str:
        return ".EE\n.in\n"

    def quote_open(self, event) -> str:
        return ".RS\n"

    def quote_close(self, event) -> str:
        return ".RE\n"

    def link(self, event) -> str:
        target = event.target
        mail = "@" in target
        if target.startswith("mailto:"):
            target = target[len("mailto:"):]
            mail = True
        start, end = (".MT", ".ME") if mail else (".UR", ".UE")

        lines = [f"{start} {target}"]
        if event.title and event.title != target:
            lines.append(event.title)
        lines.append(f"{end} {event.punctuation}" if event.punctuation else end)
        return "\n".join(lines) + "\n"

    def man_reference(self, event) -> str:
        if event.section:
            return f".BR {event.page} ({event.section}){event.punctuation}\n"
        if event.punctuation:
            return f".BR {event.page} {event.punctuation}\n"
        return f".B {event.page}\n"

    def synopsis(self, event) -> str:
        if event.style is not SynopsisStyle.SY:
            return super().synopsis(event)

        lines = [f".SY {event.synopsis.program}"]
        for _, run in event.synopsis.lines():
            if not run:
                continue
            option = _option_macro_args(run)
            if option:
                flag, arg = option
                lines.append(f".OP {flag} {quote_arg(arg)}" if arg else f".OP {flag}")
            else:
                lines.append(self.highlight_run(run))
        lines.append(".YS")
        return "\n".join(lines) + "\n"


def _option_macro_args(run):
    """
    Return (flag, argument) when the run is a single option such as
    ``[-o file]`` or ``-v``; None otherwise.
    """
    tokens = words(run)
    if len(tokens) >= 2 and tokens[0].text == "[" and tokens[-1].text == "]":
        tokens = tokens[1:-1]
    if not tokens or tokens[0].kind is not TokenKind.OPTION:
        return None
    rest = tokens[1:]
    if any(token.kind is not TokenKind.OPERAND for token in rest):
        return None
    return option_text(tokens[0].text), " ".join(token.text for token in rest)
