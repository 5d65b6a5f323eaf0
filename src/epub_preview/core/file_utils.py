# epub_preview/src/epub_preview/core/file_utils.py
"""
Logique pour les opérations sur le système de fichiers (trouver les EPUBs).
"""

import logging
import os
from typing import List

from ..config import SUPPORTED_EXT

logger = logging.getLogger(__name__)


def find_epubs_in_folder(folder: str) -> List[str]:
    """Trouve tous les fichiers EPUB dans un dossier et ses sous-dossiers, triés."""
    files = []
    for root, _, filenames in os.walk(folder):
        for f in filenames:
            if f.lower().endswith(SUPPORTED_EXT):
                files.append(os.path.join(root, f))
    files.sort()
    logger.info("Found %d epub(s) in folder %s", len(files), folder)
    return files


def is_epub_file(path: str) -> bool:
    """Vrai si le chemin désigne un fichier avec une extension supportée."""
    return os.path.isfile(path) and path.lower().endswith(SUPPORTED_EXT)
