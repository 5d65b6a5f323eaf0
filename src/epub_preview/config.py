# epub_preview/src/epub_preview/config.py
"""
Configuration et constantes pour EPUB Preview
"""

import os
import re

# ---------- Structure EPUB ----------
CONTAINER_PATH = "META-INF/container.xml"
ROOTFILE_TAG = "rootfile"
ROOTFILE_PATH_ATTR = "full-path"

MANIFEST_TAG = "manifest"
MANIFEST_ITEM_TAG = "item"
SPINE_TAG = "spine"
SPINE_ITEMREF_TAG = "itemref"

# Noms qualifiés (le préfixe "dc" est supposé, pas résolu)
TITLE_TAG = "dc:title"
CREATOR_TAG = "dc:creator"
LANGUAGE_TAG = "dc:language"

# ---------- Valeurs par défaut ----------
UNKNOWN_TITLE = "Unknown Title"
UNKNOWN_AUTHOR = "Unknown Author"
UNKNOWN_LANGUAGE = "Unknown Language"

NO_CHAPTERS_MESSAGE = "No valid chapters found."
TEXT_NOT_FOUND_MESSAGE = "Text file not found in EPUB."

# ---------- Aperçu ----------
PREVIEW_LENGTH = 5000
TAG_RE = re.compile(r"<[^>]+>")

# ---------- Extensions supportées ----------
SUPPORTED_EXT = (".epub",)

# ---------- Configuration logging ----------
LOG_DIR_ENV_VAR = "EPUB_PREVIEW_LOG_DIR"
LOG_DIR = os.getenv(LOG_DIR_ENV_VAR, "logs")
LOG_FILENAME = "epub_preview.log"
LOG_MAX_BYTES = 5 * 1024 * 1024  # 5MB
LOG_BACKUP_COUNT = 5
LOG_ENCODING = "utf-8"

# ---------- Affichage CLI ----------
CLI_PREVIEW_CHARS = 200


# ---------- Initialisation des dossiers ----------
def ensure_directories():
    """Crée les dossiers nécessaires s'ils n'existent pas."""
    os.makedirs(LOG_DIR, exist_ok=True)
