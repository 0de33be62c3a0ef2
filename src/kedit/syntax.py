from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .constants import (
    C_HL_EXTENSIONS,
    C_HL_KEYWORDS,
    C_HL_TYPES,
    HL_COMMENT,
    HL_HIGHLIGHT_NUMBERS,
    HL_HIGHLIGHT_STRINGS,
    HL_KEYWORD1,
    HL_KEYWORD2,
    HL_MATCH,
    HL_MLCOMMENT,
    HL_NORMAL,
    HL_NUMBER,
    HL_STRING,
    PY_HL_EXTENSIONS,
    PY_HL_KEYWORDS,
    PY_HL_TYPES,
    SEPARATORS,
    WHITESPACE,
)
from .models import Keyword, KeywordClass, Row, Syntax

if TYPE_CHECKING:
    from .document import Document

logger = logging.getLogger(__name__)


def _keywords(primary: tuple[str, ...], secondary: tuple[str, ...]) -> tuple[Keyword, ...]:
    return tuple(Keyword(kw) for kw in primary) + tuple(
        Keyword(kw, KeywordClass.SECONDARY) for kw in secondary
    )


HLDB: tuple[Syntax, ...] = (
    Syntax(
        filetype="c",
        filematch=C_HL_EXTENSIONS,
        keywords=_keywords(C_HL_KEYWORDS, C_HL_TYPES),
        singleline_comment_start="//",
        multiline_comment_start="/*",
        multiline_comment_end="*/",
        flags=HL_HIGHLIGHT_STRINGS | HL_HIGHLIGHT_NUMBERS,
    ),
    Syntax(
        filetype="python",
        filematch=PY_HL_EXTENSIONS,
        keywords=_keywords(PY_HL_KEYWORDS, PY_HL_TYPES),
        singleline_comment_start="#",
        multiline_comment_start="",
        multiline_comment_end="",
        flags=HL_HIGHLIGHT_STRINGS | HL_HIGHLIGHT_NUMBERS,
    ),
)


def is_separator(c: str) -> bool:
    return not c or c in WHITESPACE or c == "\0" or c in SEPARATORS


def syntax_to_color(hl: int) -> int:
    if hl in (HL_COMMENT, HL_MLCOMMENT):
        return 36
    if hl == HL_KEYWORD1:
        return 33
    if hl == HL_KEYWORD2:
        return 32
    if hl == HL_STRING:
        return 35
    if hl == HL_NUMBER:
        return 31
    if hl == HL_MATCH:
        return 34
    return 37


def match_syntax(filename: str | None) -> Syntax | None:
    if not filename:
        return None
    for syntax in HLDB:
        for pattern in syntax.filematch:
            if pattern.startswith("."):
                if filename.endswith(pattern):
                    return syntax
            elif pattern in filename:
                return syntax
    return None


def highlight_row(row: Row, syntax: Syntax | None, in_comment: bool) -> bool:
    """Recompute ``row.hl`` and return whether the row ends inside a multi-line comment.

    ``in_comment`` is the state inherited from the previous row.
    """
    row.hl = [HL_NORMAL] * row.rsize
    if syntax is None:
        return False

    scs = syntax.singleline_comment_start
    mcs = syntax.multiline_comment_start
    mce = syntax.multiline_comment_end
    hl = row.hl
    p = row.render

    prev_sep = True
    in_string = ""
    i = 0
    while i < len(p):
        ch = p[i]
        prev_hl = hl[i - 1] if i > 0 else HL_NORMAL

        if scs and not in_string and not in_comment and p.startswith(scs, i):
            hl[i:] = [HL_COMMENT] * (len(p) - i)
            break

        if mcs and mce and not in_string:
            if in_comment:
                hl[i] = HL_MLCOMMENT
                if p.startswith(mce, i):
                    hl[i : i + len(mce)] = [HL_MLCOMMENT] * len(mce)
                    i += len(mce)
                    in_comment = False
                    prev_sep = True
                    continue
                i += 1
                continue
            if p.startswith(mcs, i):
                hl[i : i + len(mcs)] = [HL_MLCOMMENT] * len(mcs)
                i += len(mcs)
                in_comment = True
                continue

        if syntax.flags & HL_HIGHLIGHT_STRINGS:
            if in_string:
                hl[i] = HL_STRING
                if ch == "\\" and i + 1 < len(p):
                    hl[i + 1] = HL_STRING
                    i += 2
                    prev_sep = False
                    continue
                if ch == in_string:
                    in_string = ""
                i += 1
                prev_sep = False
                continue
            if ch in ('"', "'"):
                in_string = ch
                hl[i] = HL_STRING
                i += 1
                prev_sep = False
                continue

        if syntax.flags & HL_HIGHLIGHT_NUMBERS:
            if ("0" <= ch <= "9" and (prev_sep or prev_hl == HL_NUMBER)) or (
                ch == "." and prev_hl == HL_NUMBER
            ):
                hl[i] = HL_NUMBER
                i += 1
                prev_sep = False
                continue

        if prev_sep:
            for kw in syntax.keywords:
                klen = len(kw.text)
                tail = p[i + klen] if i + klen < len(p) else ""
                if p.startswith(kw.text, i) and is_separator(tail):
                    hl[i : i + klen] = [int(kw.kind)] * klen
                    i += klen
                    break
            else:
                prev_sep = is_separator(ch)
                i += 1
                continue
            prev_sep = False
            continue

        prev_sep = is_separator(ch)
        i += 1

    return in_comment


def update_syntax(doc: Document, idx: int) -> int:
    """Highlight row ``idx`` and every following row whose inherited comment state changed.

    Returns the number of rows scanned.
    """
    scanned = 0
    while idx < doc.numrows:
        row = doc.rows[idx]
        in_comment = idx > 0 and doc.rows[idx - 1].hl_open_comment
        open_comment = highlight_row(row, doc.syntax, in_comment)
        scanned += 1
        changed = row.hl_open_comment != open_comment
        row.hl_open_comment = open_comment
        if not changed:
            break
        idx += 1
    if scanned > 1:
        logger.debug("comment state cascaded across %d rows", scanned)
    return scanned
