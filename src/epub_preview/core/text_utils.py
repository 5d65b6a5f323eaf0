# epub_preview/src/epub_preview/core/text_utils.py
"""
Utilitaires pour le nettoyage du texte des chapitres.
"""

from ..config import PREVIEW_LENGTH, TAG_RE


def strip_tags(html_content: str) -> str:
    """Supprime les balises <...>, sans décoder les entités ni toucher aux espaces."""
    if not html_content:
        return ""
    return TAG_RE.sub("", html_content)


def make_preview(html_content: str, limit: int = PREVIEW_LENGTH) -> str:
    """Retourne au plus `limit` caractères du texte débarrassé de ses balises."""
    return strip_tags(html_content)[:limit]
