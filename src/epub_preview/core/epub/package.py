# epub_preview/src/epub_preview/core/epub/package.py
"""
Module de lecture du document de package (OPF).

Responsabilité unique: construire, en une seule passe de parsing, les trois
vues du document de package: métadonnées, manifeste et spine.
"""

import logging
from typing import Dict, List, Optional, Union

from lxml import etree

from ...config import (
    CREATOR_TAG,
    LANGUAGE_TAG,
    MANIFEST_ITEM_TAG,
    MANIFEST_TAG,
    SPINE_ITEMREF_TAG,
    SPINE_TAG,
    TITLE_TAG,
    UNKNOWN_AUTHOR,
    UNKNOWN_LANGUAGE,
    UNKNOWN_TITLE,
)
from ..models import (
    ManifestItem,
    PackageDocument,
    PackageDocumentError,
    PackageMetadata,
    SpineItemRef,
)
from .xml_utils import find_first, iter_by_name, parse_xml, text_content

logger = logging.getLogger(__name__)


# --- Extracteurs par section ---


def _get_metadata_field(root: etree._Element, name: str) -> Optional[str]:
    """
    Helper générique pour extraire un champ Dublin Core.

    Args:
        root: Racine du document de package
        name: Nom qualifié du champ (ex: 'dc:title')

    Returns:
        Texte du premier élément trouvé, ou None s'il est absent ou vide
    """
    element = find_first(root, name)
    if element is None:
        return None
    return text_content(element) or None


def _get_metadata(root: etree._Element) -> PackageMetadata:
    return PackageMetadata(
        title=_get_metadata_field(root, TITLE_TAG),
        creator=_get_metadata_field(root, CREATOR_TAG),
        language=_get_metadata_field(root, LANGUAGE_TAG),
    )


def _get_manifest(root: etree._Element) -> List[ManifestItem]:
    """Items du manifeste dans l'ordre du document (liste vide sans <manifest>)."""
    manifest = find_first(root, MANIFEST_TAG)
    if manifest is None:
        return []
    return [
        ManifestItem(id=item.get("id"), href=item.get("href"))
        for item in iter_by_name(manifest, MANIFEST_ITEM_TAG)
    ]


def _get_spine(root: etree._Element) -> List[SpineItemRef]:
    """Itemrefs du spine dans l'ordre de lecture (liste vide sans <spine>)."""
    spine = find_first(root, SPINE_TAG)
    if spine is None:
        return []
    return [
        SpineItemRef(idref=itemref.get("idref"))
        for itemref in iter_by_name(spine, SPINE_ITEMREF_TAG)
    ]


# --- Fonction principale ---


def parse_package_document(opf_xml: Union[bytes, str], path: str) -> PackageDocument:
    """
    Parse le document de package.

    Args:
        opf_xml: Contenu brut du document de package
        path: Chemin interne du document dans l'archive (base de résolution)

    Returns:
        PackageDocument avec métadonnées, manifeste et spine

    Raises:
        PackageDocumentError: si le XML est mal formé
    """
    try:
        root = parse_xml(opf_xml)
    except (etree.XMLSyntaxError, ValueError) as e:
        raise PackageDocumentError(f"Malformed package document {path}: {e}") from e

    package = PackageDocument(
        path=path,
        metadata=_get_metadata(root),
        manifest=_get_manifest(root),
        spine=_get_spine(root),
    )
    logger.debug(
        "Parsed package document %s: %d manifest item(s), %d spine itemref(s)",
        path,
        len(package.manifest),
        len(package.spine),
    )
    return package


def metadata_record_fields(metadata: PackageMetadata) -> Dict[str, str]:
    """
    Substitue les valeurs par défaut aux champs absents, indépendamment par champ.

    Returns:
        Dictionnaire avec les clés title, author, language
    """
    return {
        "title": metadata.title if metadata.title is not None else UNKNOWN_TITLE,
        "author": metadata.creator if metadata.creator is not None else UNKNOWN_AUTHOR,
        "language": metadata.language if metadata.language is not None else UNKNOWN_LANGUAGE,
    }
