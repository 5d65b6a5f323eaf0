# epub_preview/src/epub_preview/core/epub/metadata_extractors.py
"""
Module d'extracteurs de métadonnées avancés.

Responsabilité unique: fournir des extracteurs de secours pour les
métadonnées absentes du document de package (langue depuis le texte).
"""

import logging
from typing import Optional

from langdetect import DetectorFactory, detect
from langdetect.lang_detect_exception import LangDetectException

logger = logging.getLogger(__name__)

LANGUAGE_SAMPLE_LENGTH = 3000

# Détection déterministe d'un appel à l'autre
DetectorFactory.seed = 0


def detect_language_from_text(text: str) -> Optional[str]:
    """
    Détecte la langue du livre depuis l'aperçu textuel.

    Fallback utilisé quand dc:language est absent et que la détection a été
    demandée. Analyse les 3000 premiers caractères.

    Args:
        text: Texte déjà débarrassé de ses balises

    Returns:
        Code de langue (ex: 'fr', 'en') ou None si échec
    """
    sample = (text or "")[:LANGUAGE_SAMPLE_LENGTH]
    if not sample.strip():
        return None

    try:
        detected_lang = detect(sample)
    except LangDetectException:
        logger.info("Language detection failed.", exc_info=True)
        return None

    logger.info("Language detected from text: %s", detected_lang)
    return detected_lang
