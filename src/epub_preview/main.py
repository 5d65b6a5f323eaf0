# epub_preview/src/epub_preview/main.py
"""
Point d'entrée principal pour EPUB Preview
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from .config import (
    LOG_BACKUP_COUNT,
    LOG_DIR,
    LOG_ENCODING,
    LOG_FILENAME,
    LOG_MAX_BYTES,
    ensure_directories,
)
from .core.file_utils import is_epub_file

USAGE = """Usage: python -m epub_preview <epub_or_folder> [--json] [--detect-language]
  epub_or_folder: Fichier EPUB ou dossier contenant des fichiers EPUB
  --json: Affiche les résultats au format JSON
  --detect-language: Détecte la langue depuis le texte si dc:language est absent"""


def setup_logging():
    """Configure le système de logging."""
    ensure_directories()
    logger = logging.getLogger("epub_preview")
    logger.setLevel(logging.DEBUG)

    # Évite les doublons si appelé plusieurs fois
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Handler pour fichier avec rotation
    logfile = os.path.join(LOG_DIR, LOG_FILENAME)
    handler = RotatingFileHandler(
        logfile, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding=LOG_ENCODING
    )
    formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Handler pour console (stderr, pour ne pas polluer la sortie JSON)
    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console)

    return logger


def run_cli(argv=None) -> int:
    """Lance le mode ligne de commande."""
    logger = logging.getLogger("epub_preview")
    args = list(sys.argv[1:] if argv is None else argv)

    flags = {a for a in args if a.startswith("--")}
    positional = [a for a in args if not a.startswith("--")]
    unknown = flags - {"--json", "--detect-language"}

    if len(positional) != 1 or unknown:
        print(USAGE)
        return 1

    path = positional[0]
    if not (os.path.isdir(path) or is_epub_file(path)):
        print(f"Error: {path} is not an EPUB file or a directory")
        return 1

    try:
        from .cli import cli_process_path, print_records_json, print_records_summary

        results = cli_process_path(path, detect_language="--detect-language" in flags)
        if "--json" in flags:
            print_records_json(results)
        else:
            print_records_summary(results)
    except Exception as e:
        logger.exception("Error in CLI mode")
        print(f"Error: {e}")
        return 1

    # Un fichier unique illisible est un échec
    if results and all(record is None for _, record in results):
        return 1
    return 0


def main(argv=None) -> int:
    """Point d'entrée principal."""
    setup_logging()
    return run_cli(argv)


if __name__ == "__main__":
    raise SystemExit(main())
