# epub_preview/src/epub_preview/core/epub/xml_utils.py
"""
Utilitaires XML partagés par le localisateur de conteneur et le parseur OPF.

Les éléments sont comparés par nom qualifié tel qu'écrit dans le document
("dc:title", "rootfile"), sans résolution dynamique des namespaces.
"""

from typing import Iterator, Optional, Union

from lxml import etree


def parse_xml(data: Union[bytes, str]) -> etree._Element:
    """
    Parse un document XML sans résolution d'entités ni accès réseau.

    Args:
        data: Contenu brut (bytes) ou texte du document

    Returns:
        Élément racine

    Raises:
        etree.XMLSyntaxError: si le document est mal formé
    """
    if isinstance(data, str):
        # lxml refuse les chaînes unicode portant une déclaration d'encodage
        data = data.encode("utf-8")
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    return etree.fromstring(data, parser)


def qualified_name(element: etree._Element) -> str:
    """Retourne "prefixe:nom" ou "nom" pour un élément."""
    local = etree.QName(element).localname
    return f"{element.prefix}:{local}" if element.prefix else local


def iter_by_name(root: etree._Element, name: str) -> Iterator[etree._Element]:
    """Itère (ordre du document) sur les éléments portant ce nom qualifié, racine comprise."""
    for element in root.iter(tag=etree.Element):
        if qualified_name(element) == name:
            yield element


def find_first(root: etree._Element, name: str) -> Optional[etree._Element]:
    """Premier élément portant ce nom qualifié, ou None."""
    return next(iter_by_name(root, name), None)


def text_content(element: etree._Element) -> str:
    """Texte complet d'un élément, descendants compris."""
    return "".join(element.itertext())
