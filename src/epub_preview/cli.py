# epub_preview/src/epub_preview/cli.py
"""
Logique pour le mode ligne de commande.

Utilise PreviewService pour réutiliser la logique d'extraction.
"""

import json
import logging
from typing import List, Optional, Tuple

from .config import CLI_PREVIEW_CHARS
from .core.models import MetadataRecord
from .core.preview_service import PreviewService

logger = logging.getLogger(__name__)

Results = List[Tuple[str, Optional[MetadataRecord]]]


def cli_process_path(path: str, detect_language: bool = False) -> Results:
    """
    Traite un fichier EPUB ou un dossier entier en mode CLI.

    Args:
        path: Chemin vers un EPUB ou un dossier contenant des EPUBs
        detect_language: Détecter la langue depuis le texte si absente

    Returns:
        Liste de couples (chemin, record ou None)
    """
    logger.info(f"CLI mode - processing: {path}")

    service = PreviewService(detect_language=detect_language)
    results = service.process_path(path)

    logger.info(f"CLI mode - processed {len(results)} files")
    return results


def print_records_summary(results: Results):
    """Affiche un résumé des métadonnées extraites."""
    print("\n=== Résumé de l'extraction ===")
    print(f"Fichiers traités: {len(results)}")

    failures = sum(1 for _, record in results if record is None)
    print(f"Échecs: {failures}")

    for path, record in results:
        print(f"\n{path}:")
        if record is None:
            print("  Impossible de lire ce fichier (voir le journal)")
            continue

        print(f"  Titre: {record.title}")
        print(f"  Auteur: {record.author}")
        print(f"  Langue: {record.language}")

        preview = record.preview_text[:CLI_PREVIEW_CHARS].strip()
        if len(record.preview_text) > CLI_PREVIEW_CHARS:
            preview += "..."
        print(f"  Aperçu: {preview}")


def print_records_json(results: Results):
    """Affiche les résultats au format JSON."""
    payload = [
        {"path": path, "record": record.to_dict() if record is not None else None}
        for path, record in results
    ]
    print(json.dumps(payload, ensure_ascii=False, indent=2))
