# epub_preview/src/epub_preview/core/preview_service.py
"""
Service d'aperçu EPUB.

Service réutilisable qui applique l'extraction à un fichier ou à un dossier
entier. Utilisé par le mode CLI.
"""

import logging
import os
from typing import List, Optional, Tuple

from .epub import extract_epub
from .file_utils import find_epubs_in_folder
from .models import MetadataRecord

logger = logging.getLogger(__name__)


class PreviewService:
    """
    Service d'aperçu EPUB.

    Fournit les opérations de haut niveau:
    - Extraction des métadonnées et de l'aperçu d'un fichier
    - Traitement de tous les EPUBs d'un dossier
    """

    def __init__(self, detect_language: bool = False):
        """
        Initialise le service.

        Args:
            detect_language: Détecter la langue depuis le texte si dc:language manque
        """
        self.detect_language = detect_language
        logger.debug("PreviewService initialized (detect_language=%s)", detect_language)

    def process_epub(self, epub_path: str) -> Optional[MetadataRecord]:
        """
        Traite un fichier EPUB.

        Returns:
            MetadataRecord ou None en cas d'échec
        """
        logger.info("Processing EPUB: %s", epub_path)
        return extract_epub(epub_path, detect_language=self.detect_language)

    def process_folder(self, folder: str) -> List[Tuple[str, Optional[MetadataRecord]]]:
        """
        Traite tous les EPUBs d'un dossier (récursivement).

        Returns:
            Liste de couples (chemin, record ou None), triée par chemin
        """
        results = [(path, self.process_epub(path)) for path in find_epubs_in_folder(folder)]
        failed = sum(1 for _, record in results if record is None)
        logger.info("Processed %d file(s), %d failure(s)", len(results), failed)
        return results

    def process_path(self, path: str) -> List[Tuple[str, Optional[MetadataRecord]]]:
        """Traite un fichier unique ou un dossier."""
        if os.path.isdir(path):
            return self.process_folder(path)
        return [(path, self.process_epub(path))]
