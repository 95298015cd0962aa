from __future__ import annotations

from .corpus import generate_doc_comments, generate_modules, generate_spans

__all__ = [
    "generate_doc_comments",
    "generate_modules",
    "generate_spans",
]
