# epub_preview/src/epub_preview/core/epub/container.py
"""
Module de localisation du document de package.

Responsabilité unique: lire META-INF/container.xml et retourner le chemin
interne du document de package (content.opf).
"""

import logging
from typing import Optional, Union

from lxml import etree

from ...config import ROOTFILE_PATH_ATTR, ROOTFILE_TAG
from .xml_utils import find_first, parse_xml

logger = logging.getLogger(__name__)


def locate_package_document(container_xml: Union[bytes, str]) -> Optional[str]:
    """
    Trouve le chemin du document de package dans le descripteur de conteneur.

    Seul le premier <rootfile> est pris en compte (pas de rendus alternatifs).

    Args:
        container_xml: Contenu de META-INF/container.xml

    Returns:
        Chemin interne à l'archive (ex: 'OEBPS/content.opf') ou None
    """
    try:
        root = parse_xml(container_xml)
    except (etree.XMLSyntaxError, ValueError) as e:
        logger.warning("Malformed container descriptor: %s", e)
        return None

    rootfile = find_first(root, ROOTFILE_TAG)
    if rootfile is None:
        logger.warning("No <%s> element in container descriptor", ROOTFILE_TAG)
        return None

    full_path = rootfile.get(ROOTFILE_PATH_ATTR)
    if not full_path:
        logger.warning("<%s> has no %s attribute", ROOTFILE_TAG, ROOTFILE_PATH_ATTR)
        return None

    return full_path
