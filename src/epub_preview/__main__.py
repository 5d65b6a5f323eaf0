# epub_preview/src/epub_preview/__main__.py
"""
Point d'entrée `python -m epub_preview` et script `epub-preview`.

Convertit le résultat de main() en code de sortie entier: 0 en cas de
succès, 1 pour une erreur d'usage, une archive illisible ou une erreur
inattendue.
"""

from __future__ import annotations

import sys


def cli() -> int:
    """Lance le CLI et retourne toujours un code de sortie entier."""
    try:
        from .main import main
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Failed to import epub_preview.main: {exc}\n")
        return 1

    try:
        code = main()
    except SystemExit as se:
        return se.code if isinstance(se.code, int) else 1
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Unhandled error: {exc}\n")
        return 1

    return 0 if code is None else int(code)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(cli())
