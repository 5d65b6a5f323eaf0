# tests/conftest.py
"""
Configuration globale pour pytest.

Fournit des fixtures réutilisables pour tous les tests: construction de
documents OPF et d'archives EPUB dans un répertoire temporaire.
"""

import zipfile
from typing import Dict, List, Optional, Sequence, Tuple, Union

import pytest

CONTAINER_XML = """<?xml version="1.0" encoding="UTF-8"?>
<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">
  <rootfiles>
    <rootfile full-path="{path}" media-type="application/oebps-package+xml"/>
  </rootfiles>
</container>
"""

CHAPTER_XHTML = """<?xml version="1.0" encoding="utf-8"?>
<html xmlns="http://www.w3.org/1999/xhtml">
<head><title>Chapter 1</title></head>
<body><h1>Chapter 1</h1><p>It was a bright cold day in April.</p></body>
</html>
"""


def _build_opf(
    title: Optional[str] = "Test Book",
    creator: Optional[str] = "Test Author",
    language: Optional[str] = "en",
    manifest: Sequence[Tuple[Optional[str], Optional[str]]] = (("ch1", "text/ch1.xhtml"),),
    spine: Sequence[Optional[str]] = ("ch1",),
) -> str:
    meta = []
    if title is not None:
        meta.append(f"<dc:title>{title}</dc:title>")
    if creator is not None:
        meta.append(f"<dc:creator>{creator}</dc:creator>")
    if language is not None:
        meta.append(f"<dc:language>{language}</dc:language>")

    items = []
    for item_id, href in manifest:
        attrs = ""
        if item_id is not None:
            attrs += f' id="{item_id}"'
        if href is not None:
            attrs += f' href="{href}"'
        items.append(f'<item{attrs} media-type="application/xhtml+xml"/>')

    itemrefs = [f'<itemref idref="{i}"/>' if i is not None else "<itemref/>" for i in spine]

    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<package xmlns="http://www.idpf.org/2007/opf" version="3.0" unique-identifier="uid">\n'
        '  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/">'
        + "".join(meta)
        + "</metadata>\n"
        "  <manifest>" + "".join(items) + "</manifest>\n"
        "  <spine>" + "".join(itemrefs) + "</spine>\n"
        "</package>\n"
    )


@pytest.fixture
def build_opf():
    """Retourne une fabrique de documents OPF."""
    return _build_opf


@pytest.fixture
def container_xml():
    """Retourne une fabrique de descripteurs de conteneur."""

    def _container(path: str = "OEBPS/content.opf") -> str:
        return CONTAINER_XML.format(path=path)

    return _container


@pytest.fixture
def make_epub(tmp_path):
    """
    Retourne une fabrique d'archives EPUB.

    La fabrique prend un dictionnaire {nom d'entrée: contenu} et retourne le
    chemin du fichier créé.
    """

    def _make(files: Dict[str, Union[str, bytes]], name: str = "book.epub") -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as zf:
            zf.writestr("mimetype", "application/epub+zip", compress_type=zipfile.ZIP_STORED)
            for entry, content in files.items():
                zf.writestr(entry, content)
        return str(path)

    return _make


@pytest.fixture
def sample_epub(make_epub, build_opf, container_xml):
    """Un EPUB complet et valide avec le document de package dans OEBPS/."""
    return make_epub(
        {
            "META-INF/container.xml": container_xml(),
            "OEBPS/content.opf": build_opf(),
            "OEBPS/text/ch1.xhtml": CHAPTER_XHTML,
        }
    )


@pytest.fixture
def chapter_xhtml() -> str:
    return CHAPTER_XHTML


@pytest.fixture
def manifest_entries() -> List[Tuple[str, str]]:
    """Manifeste d'exemple avec deux chapitres et une feuille de style."""
    return [
        ("css", "styles/main.css"),
        ("ch1", "text/ch1.xhtml"),
        ("ch2", "text/ch2.xhtml"),
    ]
