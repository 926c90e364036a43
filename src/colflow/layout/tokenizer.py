#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from ..core.models import Token, TokenKind

__all__ = ["join_tokens", "normalize_newlines", "tokenize"]

_CHUNK_RE = re.compile(r"\n|\s+|\S+")


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n")


def _iter_tokens(text: str) -> Iterator[Token]:
    for match in _CHUNK_RE.finditer(text):
        chunk = match.group(0)
        if chunk == "\n":
            yield Token(TokenKind.NEWLINE, chunk)
        elif chunk.isspace():
            for char in chunk:
                kind = TokenKind.NEWLINE if char == "\n" else TokenKind.SPACE
                yield Token(kind, char)
        else:
            yield Token(TokenKind.WORD, chunk)


def tokenize(text: str) -> list[Token]:
    """Split text into newline, single-whitespace and word tokens.

    ``\\r\\n`` is normalized to ``\\n`` first. Whitespace runs are emitted one
    character per token so the flow engine can break between any two of them.
    Joining the token values gives back the normalized text.
    """
    return list(_iter_tokens(normalize_newlines(text)))


def join_tokens(tokens: Iterable[Token]) -> str:
    return "".join(token.value for token in tokens)
