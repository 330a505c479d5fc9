"""
Collaborateurs externes du résolveur : le thème (dossier racine) et la
résolution d'URL des assets publics du thème.
"""
from pathlib import Path
from typing import Optional, Protocol, Union, runtime_checkable

from pydantic import BaseModel

from .settings import BlockSettings


@runtime_checkable
class ThemeContract(Protocol):
    def root_folder(self) -> Union[str, Path]: ...


@runtime_checkable
class AssetResolver(Protocol):
    def resolve_public_asset_url(self, relative_path: str) -> str: ...


class Theme(BaseModel):
    """Thème minimal : un slug + un dossier racine sur disque."""
    slug: str
    folder: Path

    def root_folder(self) -> Path:
        return self.folder


class ThemeAssetResolver:
    """
    Construit l'URL publique d'un asset du thème.

    "block-thumbs/ab/cd.jpg" → "/themes/demo/block-thumbs/ab/cd.jpg"
    """

    def __init__(self, theme: Theme, base_url: Optional[str] = None):
        self.theme = theme
        if base_url is None:
            base_url = BlockSettings.from_env().assets_base_url
        self.base_url = base_url.rstrip("/")

    def resolve_public_asset_url(self, relative_path: str) -> str:
        return f"{self.base_url}/{self.theme.slug}/{relative_path.lstrip('/')}"
