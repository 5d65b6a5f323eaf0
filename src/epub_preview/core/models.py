# epub_preview/src/epub_preview/core/models.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class EpubPreviewError(Exception):
    """Erreur de base pour l'extraction d'aperçu EPUB."""


class PackageDocumentError(EpubPreviewError):
    """Le document de package (content.opf) n'est pas un XML valide."""


@dataclass
class ManifestItem:
    """Entrée <item> du manifeste: identifiant et chemin relatif au document de package."""

    id: Optional[str] = None
    href: Optional[str] = None


@dataclass
class SpineItemRef:
    """Entrée <itemref> du spine: référence vers un identifiant du manifeste."""

    idref: Optional[str] = None


@dataclass
class PackageMetadata:
    """Métadonnées Dublin Core lues telles quelles (None si absentes ou vides)."""

    title: Optional[str] = None
    creator: Optional[str] = None
    language: Optional[str] = None


@dataclass
class PackageDocument:
    """Modèle de données du document de package, construit en une seule passe."""

    path: str
    metadata: PackageMetadata = field(default_factory=PackageMetadata)
    manifest: List[ManifestItem] = field(default_factory=list)
    spine: List[SpineItemRef] = field(default_factory=list)

    def first_itemref(self) -> Optional[SpineItemRef]:
        """Retourne la première entrée du spine (ordre de lecture) ou None."""
        return self.spine[0] if self.spine else None

    def find_manifest_item(self, item_id: str) -> Optional[ManifestItem]:
        """
        Cherche un item du manifeste par identifiant.

        Le premier item trouvé dans l'ordre du document l'emporte; les
        identifiants dupliqués ne sont pas signalés.
        """
        for item in self.manifest:
            if item.id == item_id:
                return item
        return None


class ResolutionStatus(Enum):
    FOUND = "found"
    NO_CHAPTERS = "no_chapters"
    TEXT_NOT_FOUND = "text_not_found"


@dataclass(frozen=True)
class ResolvedReference:
    """Résultat de la résolution spine -> manifeste -> entrée de l'archive."""

    status: ResolutionStatus
    path: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status is ResolutionStatus.FOUND


@dataclass(frozen=True)
class MetadataRecord:
    """Résultat final de l'extraction: métadonnées et aperçu textuel."""

    title: str
    author: str
    language: str
    preview_text: str

    def to_dict(self) -> Dict[str, str]:
        """Sérialise le record avec les noms de champs externes."""
        return {
            "title": self.title,
            "author": self.author,
            "language": self.language,
            "previewText": self.preview_text,
        }
