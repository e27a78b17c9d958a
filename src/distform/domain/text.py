"""Whitespace handling shared by the form helpers."""

from __future__ import annotations

from typing import Final

# Characters a browser's String.prototype.trim removes: Unicode space separators,
# line terminators and the byte-order mark. str.strip() alone keeps U+FEFF.
WHITESPACE: Final[str] = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def trim(value: str) -> str:
    return value.strip(WHITESPACE)


def is_blank(value: str) -> bool:
    return not trim(value)
