"""
Misused-term dictionary applied in official (man-pages) style.

Terms are matched as whole words and replaced with the spelling the
Linux man-pages project prefers.
"""

import re

MISUSED_WORDS = {
    "bitmask": "bit mask",
    "builtin": "built-in",  # man-pages(7) spelling, not "build-in"
    "epoch": "Epoch",
    "file name": "filename",
    "file system": "filesystem",
    "host name": "hostname",
    "i-node": "inode",
    "i-nodes": "inodes",
    "lower case": "lowercase",
    "lower-case": "lowercase",
    "upper case": "uppercase",
    "upper-case": "uppercase",
    "path name": "pathname",
    "pseudo-terminal": "pseudoterminal",
    "real time": "real-time",
    "realtime": "real-time",
    "runtime": "run time",
    "super user": "superuser",
    "super-user": "superuser",
    "super block": "superblock",
    "super-block": "superblock",
    "time stamp": "timestamp",
    "time zone": "timezone",
    "userspace": "user space",
    "user name": "username",
    "x86_64": "x86-64",
    "zeroes": "zeros",
    "32bit": "32-bit",
    "Unices": "Unix systems",
    "Unixes": "Unix systems",
}

# Longest first, so "i-nodes" wins over "i-node"
_PATTERN = re.compile(
    r"\b(" + "|".join(re.escape(w) for w in sorted(MISUSED_WORDS, key=len, reverse=True)) + r")\b"
)


def correct_misused_words(text: str) -> str:
    """Replace every misused term in ``text``."""
    return _PATTERN.sub(lambda m: MISUSED_WORDS[m.group(1)], text)
