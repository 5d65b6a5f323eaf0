# epub_preview/src/epub_preview/core/epub/reader.py
"""
Module de lecture EPUB.

Responsabilité unique: ouvrir l'archive et enchaîner localisation du
document de package, parsing, résolution du premier chapitre et aperçu.
"""

import logging
import zipfile
from typing import Optional

from ...config import CONTAINER_PATH, NO_CHAPTERS_MESSAGE, TEXT_NOT_FOUND_MESSAGE
from ..models import MetadataRecord, PackageDocumentError, ResolutionStatus, ResolvedReference
from ..text_utils import make_preview
from .container import locate_package_document
from .metadata_extractors import detect_language_from_text
from .package import metadata_record_fields, parse_package_document
from .resolver import resolve_first_chapter

logger = logging.getLogger(__name__)


def safe_open_epub(epub_path: str) -> Optional[zipfile.ZipFile]:
    """
    Ouvre un fichier EPUB de manière sécurisée.

    Args:
        epub_path: Chemin vers le fichier EPUB

    Returns:
        Archive zip ouverte si succès, None sinon
    """
    try:
        return zipfile.ZipFile(epub_path)
    except (OSError, zipfile.BadZipFile) as e:
        logger.exception("Failed to open archive %s: %s", epub_path, e)
        return None


def read_entry(archive: zipfile.ZipFile, name: str) -> Optional[bytes]:
    """Contenu brut d'une entrée, ou None si elle n'existe pas."""
    try:
        return archive.read(name)
    except KeyError:
        return None


def read_entry_text(archive: zipfile.ZipFile, name: str) -> Optional[str]:
    """Contenu d'une entrée décodé en UTF-8 (octets invalides ignorés)."""
    data = read_entry(archive, name)
    if data is None:
        return None
    return data.decode("utf-8", errors="ignore")


def _preview_text(archive: zipfile.ZipFile, resolved: ResolvedReference) -> str:
    if resolved.status is ResolutionStatus.NO_CHAPTERS:
        return NO_CHAPTERS_MESSAGE
    if resolved.status is ResolutionStatus.TEXT_NOT_FOUND:
        return TEXT_NOT_FOUND_MESSAGE

    raw_html = read_entry_text(archive, resolved.path)
    if raw_html is None:
        return TEXT_NOT_FOUND_MESSAGE
    return make_preview(raw_html)


def _extract_from_archive(
    archive: zipfile.ZipFile, epub_path: str, detect_language: bool
) -> Optional[MetadataRecord]:
    container_xml = read_entry(archive, CONTAINER_PATH)
    if container_xml is None:
        logger.error("%s not found in %s", CONTAINER_PATH, epub_path)
        return None

    opf_path = locate_package_document(container_xml)
    if not opf_path:
        logger.error("content.opf not found in %s", epub_path)
        return None

    opf_xml = read_entry(archive, opf_path)
    if opf_xml is None:
        logger.error("Package document %s missing from %s", opf_path, epub_path)
        return None

    package = parse_package_document(opf_xml, opf_path)

    # Métadonnées et résolution sont indépendantes
    fields = metadata_record_fields(package.metadata)
    resolved = resolve_first_chapter(package, set(archive.namelist()))
    preview = _preview_text(archive, resolved)

    if detect_language and package.metadata.language is None and resolved.found:
        detected = detect_language_from_text(preview)
        if detected:
            fields["language"] = detected

    return MetadataRecord(preview_text=preview, **fields)


# --- Fonction principale d'extraction ---


def extract_epub(epub_path: str, detect_language: bool = False) -> Optional[MetadataRecord]:
    """
    Extrait les métadonnées et l'aperçu du premier chapitre d'un fichier EPUB.

    Aucune exception ne sort de cette fonction: les échecs sont journalisés
    et se traduisent par None (archive illisible, conteneur ou document de
    package absent) ou par un message de repli dans l'aperçu (chapitre
    introuvable).

    Args:
        epub_path: Chemin vers le fichier EPUB
        detect_language: Si True, détecte la langue depuis le texte quand
            dc:language est absent

    Returns:
        MetadataRecord, ou None en cas d'échec structurel
    """
    archive = safe_open_epub(epub_path)
    if archive is None:
        logger.warning("Could not read EPUB file: %s", epub_path)
        return None

    try:
        with archive:
            record = _extract_from_archive(archive, epub_path, detect_language)
    except PackageDocumentError as e:
        logger.error("%s", e)
        return None
    except Exception:
        logger.exception("Error extracting EPUB %s", epub_path)
        return None

    if record is not None:
        logger.info("Extracted metadata for %s", epub_path)
    return record
