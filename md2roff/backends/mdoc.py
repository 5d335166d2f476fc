"""
mdoc(7) backend: BSD manual pages.
"""

from ..options import Dialect, SynopsisStyle
from ..state import ListKind
from ..synopsis import TokenKind, words
from .base import Backend, quote_arg

# Synopsis punctuation and the mdoc macros that replace it
_DELIMITERS = {
    "[": "Oo",
    "]": "Oc",
    "{": "Bro",
    "}": "Brc",
}


class MdocBackend(Backend):
    """Renders events with the mdoc macro package."""

    dialect = Dialect.MDOC
    macro_file = "mdoc.tmac"
    quotes_close_with_items = True

    def title_lines(self, title) -> list[str]:
        return [
            f".Dd $Mdocdate: {title.date} $",
            f".Dt {title.name} {title.section}",
            ".Os",
        ]

    def paragraph_break(self, event) -> str:
        return ".Pp\n"

    def header(self, event) -> str:
        if event.level <= 2:
            return f".Sh {event.title}".rstrip() + "\n"
        if event.level == 3:
            return f".Ss {event.title}".rstrip() + "\n"
        return f".Pp\n.Sy {event.title}\n"

    def list_open(self, event) -> str:
        if event.kind is ListKind.ORDERED:
            return ".Bl -tag -width Ds -offset indent\n"
        style = "bullet" if event.depth % 2 else "dash"
        return f".Bl -{style} -offset indent\n"

    def list_close(self, event) -> str:
        return ".El\n"

    def item_open(self, event) -> str:
        if event.kind is ListKind.ORDERED:
            return f".It {event.number}.\n"
        return ".It\n"

    def code_block_open(self, event) -> str:
        return ".Bd -literal -offset indent\n"

    def code_block_close(self, event) -> str:
        return ".Ed\n"

    def quote_open(self, event) -> str:
        return ".Bd -ragged -offset indent\n"

    def quote_close(self, event) -> str:
        return ".Ed\n"

    def link(self, event) -> str:
        target = event.target
        mail = "@" in target
        if target.startswith("mailto:"):
            target = target[len("mailto:"):]
            mail = True
        punctuation = f" {event.punctuation}" if event.punctuation else ""

        if mail:
            if event.title and event.title != target:
                return f".An {event.title} Aq Mt {target}{punctuation}\n"
            return f".Mt {target}{punctuation}\n"
        if event.title and event.title != target:
            return f".Lk {target} {quote_arg(event.title)}{punctuation}\n"
        return f".Lk {target}{punctuation}\n"

    def man_reference(self, event) -> str:
        parts = [".Xr", event.page]
        if event.section:
            parts.append(event.section)
        if event.punctuation:
            parts.append(event.punctuation)
        return " ".join(parts) + "\n"

    def synopsis(self, event) -> str:
        if event.style is not SynopsisStyle.NM:
            return super().synopsis(event)

        lines = [f".Nm {event.synopsis.program}"]
        for _, run in event.synopsis.lines():
            tokens = words(run)
            if not tokens:
                continue
            optional = (
                len(tokens) >= 2 and tokens[0].text == "[" and tokens[-1].text == "]"
            )
            if optional:
                tokens = tokens[1:-1]
            parts = _mdoc_words(tokens)
            if optional:
                lines.append(" ".join([".Op"] + parts))
            elif parts and parts[0] in ("Fl", "Ar", "Oo", "Bro"):
                lines.append("." + " ".join(parts))
            else:
                lines.append(" ".join([".No"] + parts))
        return "\n".join(lines) + "\n"


def _mdoc_words(tokens) -> list[str]:
    parts = []
    for token in tokens:
        if token.kind is TokenKind.OPTION:
            parts.append("Fl")
            if token.text[1:]:
                parts.append(token.text[1:])
        elif token.kind is TokenKind.OPERAND:
            parts.extend(["Ar", token.text])
        else:
            parts.append(_DELIMITERS.get(token.text, token.text))
    return parts
