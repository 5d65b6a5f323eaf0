# epub_preview/src/epub_preview/core/epub/__init__.py
"""
Module EPUB - Lecture structurelle des fichiers EPUB.

Ce module fournit les fonctions pour localiser le document de package,
le parser, résoudre le premier chapitre et produire l'aperçu.
"""

from .container import locate_package_document
from .package import parse_package_document
from .reader import extract_epub, safe_open_epub
from .resolver import resolve_first_chapter, resolve_href

__all__ = [
    "extract_epub",
    "locate_package_document",
    "parse_package_document",
    "resolve_first_chapter",
    "resolve_href",
    "safe_open_epub",
]
