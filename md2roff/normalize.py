"""
Whitespace normalization for accumulated text runs.
"""

# A whitespace run after one of these keeps a single space
_SPACE_AFTER = ",;.)}]"


def normalize_line(text: str) -> str:
    """
    Trim a text run and squeeze its interior whitespace.

    A whitespace run becomes one space when the character before it is
    alphanumeric or in ``, ; . ) } ]``, or when the next non-blank
    character is alphanumeric. Any other run is dropped, so no stray
    blanks end up around font escapes such as ``\\fB``.
    """
    text = text.strip()
    out = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if not ch.isspace():
            out.append(ch)
            i += 1
            continue

        j = i
        while j < n and text[j].isspace():
            j += 1
        prev = text[i - 1]
        if prev.isalnum() or prev in _SPACE_AFTER or text[j].isalnum():
            out.append(" ")
        i = j

    return "".join(out)
