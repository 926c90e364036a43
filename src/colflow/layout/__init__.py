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

"""Text flow and pagination engine."""

from .assembler import assemble_pages, empty_page, pad_page
from .flow import FlowBuilder, flow
from .metrics import column_offsets, resolve_metrics
from .service import (
    compute_layout,
    describe_layout,
    layout_document,
    lines_per_column,
    metrics_for_request,
)
from .tokenizer import join_tokens, normalize_newlines, tokenize

__all__ = [
    "FlowBuilder",
    "assemble_pages",
    "column_offsets",
    "compute_layout",
    "describe_layout",
    "empty_page",
    "flow",
    "join_tokens",
    "layout_document",
    "lines_per_column",
    "metrics_for_request",
    "normalize_newlines",
    "pad_page",
    "resolve_metrics",
    "tokenize",
]
