# epub_preview/src/epub_preview/core/epub/resolver.py
"""
Module de résolution des références EPUB.

Responsabilité unique: résoudre la première entrée du spine vers un item du
manifeste, puis vers une entrée de l'archive.

Les href du manifeste sont relatifs au dossier du document de package, pas
à la racine de l'archive.
"""

import logging
import posixpath
from typing import Container

from ..models import PackageDocument, ResolutionStatus, ResolvedReference

logger = logging.getLogger(__name__)


def resolve_href(package_path: str, href: str) -> str:
    """
    Joint un href au dossier du document de package.

    Args:
        package_path: Chemin interne du document de package (ex: 'OEBPS/content.opf')
        href: Chemin relatif lu dans le manifeste (ex: 'text/ch1.xhtml')

    Returns:
        Chemin interne normalisé avec des '/' (ex: 'OEBPS/text/ch1.xhtml')
    """
    base = posixpath.dirname(package_path.replace("\\", "/"))
    # Un href commençant par "/" reste relatif au dossier du package
    joined = posixpath.join(base, href.replace("\\", "/").lstrip("/"))
    return posixpath.normpath(joined)


def resolve_first_chapter(
    package: PackageDocument, entries: Container[str]
) -> ResolvedReference:
    """
    Résout le premier chapitre (ordre de lecture) du document de package.

    Args:
        package: Document de package parsé
        entries: Noms des entrées présentes dans l'archive

    Returns:
        ResolvedReference FOUND avec le chemin, sinon NO_CHAPTERS ou TEXT_NOT_FOUND
    """
    itemref = package.first_itemref()
    if itemref is None or not itemref.idref:
        logger.info("No spine itemref in %s", package.path)
        return ResolvedReference(ResolutionStatus.NO_CHAPTERS)

    item = package.find_manifest_item(itemref.idref)
    if item is None:
        logger.info("Spine idref %r has no manifest item in %s", itemref.idref, package.path)
        return ResolvedReference(ResolutionStatus.NO_CHAPTERS)

    if not item.href:
        logger.info("Manifest item %r has no href in %s", item.id, package.path)
        return ResolvedReference(ResolutionStatus.TEXT_NOT_FOUND)

    path = resolve_href(package.path, item.href)
    if path not in entries:
        logger.info("Resolved chapter %s is not in the archive", path)
        return ResolvedReference(ResolutionStatus.TEXT_NOT_FOUND)

    return ResolvedReference(ResolutionStatus.FOUND, path)
