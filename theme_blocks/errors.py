"""
Erreurs du résolveur de blocs.

Absence de controller / model / config / clé → pas une erreur (fallback ou None).
"""
from pathlib import Path


class ThemeBlockError(Exception):
    """Erreur de base du package theme_blocks."""


class ConfigLoadError(ThemeBlockError):
    """Le fichier de config du bloc existe mais est illisible ou mal formé."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Config de bloc invalide ({self.path}) : {reason}")


class MissingViewError(ThemeBlockError, FileNotFoundError):
    """Ni view.<ext> ni view.html n'existe pour ce bloc."""

    def __init__(self, slug: str, path: Path):
        self.slug = slug
        self.path = Path(path)
        super().__init__(f"Vue introuvable pour le bloc {slug!r} : {self.path}")
