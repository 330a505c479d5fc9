"""
ThemeBlock — résolution d'un bloc dans un thème.

Pour un couple (thème, slug) :
  - dossier du bloc         <root>/blocks/<slug>
  - controller / model      fichier du bloc, sinon défaut intégré
  - vue                     view.<ext> (bloc dynamique) sinon view.html (bloc statique)
  - config                  config.json|yaml chargée une fois à la construction
  - miniature               clé de cache adressée par contenu : md5(slug)/md5(vue).jpg

Aucun état mutable hormis la config : chaque appel relit le disque.
"""
import copy
import hashlib
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, NamedTuple, Optional, Tuple

from .config_loader import load_block_config
from .errors import MissingViewError, ThemeBlockError
from .settings import BlockSettings
from .theme import AssetResolver, ThemeContract

log = logging.getLogger(__name__)

THUMBS_DIR = "block-thumbs"


class BlockKind(str, Enum):
    DYNAMIC = "dynamic"
    STATIC  = "static"


class BlockView(NamedTuple):
    kind: BlockKind
    path: Path


def sanitize_slug(slug: str) -> str:
    """
    Ne garde que le dernier segment du slug ("../../etc" → "etc").

    Raises:
        ValueError: slug vide ou réduit à "." / ".."
    """
    name = slug.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]
    if name in ("", ".", ".."):
        raise ValueError(f"Slug de bloc invalide : {slug!r}")
    return name


def classify(block_folder: Path, code_extension: str) -> BlockView:
    """Bloc dynamique si view.<ext> existe, statique sinon (view.html)."""
    dynamic_view = Path(block_folder) / f"view.{code_extension}"
    if dynamic_view.is_file():
        return BlockView(BlockKind.DYNAMIC, dynamic_view)
    return BlockView(BlockKind.STATIC, Path(block_folder) / "view.html")


def _md5(data: bytes) -> str:
    return hashlib.md5(data).hexdigest()


class ThemeBlock:
    """
    Un bloc d'un thème.

    Usage:
        >>> block = ThemeBlock(theme, "hero")
        >>> block.get("title.default")
        'Hi'
        >>> block.get_thumb_path()
        PosixPath('/themes/demo/public/block-thumbs/<md5(hero)>/<md5(vue)>.jpg')
    """

    def __init__(
        self,
        theme: ThemeContract,
        slug: str,
        settings: Optional[BlockSettings] = None,
        asset_resolver: Optional[AssetResolver] = None,
    ):
        """
        Args:
            theme: thème propriétaire (seul root_folder() est lu)
            slug: identifiant du type de bloc
            settings: réglages (défaut : BlockSettings.from_env())
            asset_resolver: résolution d'URL publique, requis pour get_thumb_url()

        Raises:
            ValueError: slug invalide
            ConfigLoadError: config présente mais illisible / mal formée
        """
        self._slug = slug
        self._folder_name = sanitize_slug(slug)
        self.theme = theme
        self.settings = settings or BlockSettings.from_env()
        self.asset_resolver = asset_resolver
        self._config: Dict[str, Any] = load_block_config(self.get_folder(), self.settings.config_filenames)

    # ── Identité ────────────────────────────────────────────────────────────

    @property
    def slug(self) -> str:
        return self._slug

    def get_slug(self) -> str:
        return self._slug

    @property
    def config(self) -> Dict[str, Any]:
        """Copie de la config chargée (la config interne n'est jamais exposée)."""
        return copy.deepcopy(self._config)

    def get_folder(self) -> Path:
        return Path(self.theme.root_folder()) / "blocks" / self._folder_name

    # ── Fichiers ────────────────────────────────────────────────────────────

    def _own_or_default(self, name: str, default: Path) -> Path:
        own = self.get_folder() / f"{name}.{self.settings.code_extension}"
        if own.is_file():
            return own
        log.debug("Bloc %s : pas de %s propre, défaut %s", self._slug, name, default)
        return Path(default)

    def get_controller_file(self) -> Path:
        return self._own_or_default("controller", self.settings.default_controller_file)

    def get_model_file(self) -> Path:
        return self._own_or_default("model", self.settings.default_model_file)

    def get_view(self) -> BlockView:
        return classify(self.get_folder(), self.settings.code_extension)

    def get_view_file(self) -> Path:
        """Vue active. Pas de fallback intégré : le fichier retourné peut ne pas exister."""
        return self.get_view().path

    def is_dynamic_block(self) -> bool:
        return self.get_view().kind is BlockKind.DYNAMIC

    def is_static_block(self) -> bool:
        return not self.is_dynamic_block()

    # Noms historiques (thèmes PHP)
    is_php_block = is_dynamic_block
    is_html_block = is_static_block

    def read_view_source(self) -> bytes:
        """
        Contenu brut de la vue active.

        Raises:
            MissingViewError: ni view.<ext> ni view.html
        """
        path = self.get_view_file()
        if not path.is_file():
            raise MissingViewError(self._slug, path)
        try:
            return path.read_bytes()
        except FileNotFoundError as e:
            raise MissingViewError(self._slug, path) from e

    # ── Miniature ───────────────────────────────────────────────────────────

    def get_thumb_key(self) -> Tuple[str, str]:
        """(md5(slug), md5(contenu de la vue)) : toute édition de la vue change la 2e partie."""
        return _md5(self._slug.encode("utf-8")), _md5(self.read_view_source())

    def _thumb_relative_path(self) -> str:
        block_hash, content_hash = self.get_thumb_key()
        return f"{THUMBS_DIR}/{block_hash}/{content_hash}.jpg"

    def get_thumb_path(self) -> Path:
        return Path(self.theme.root_folder()) / "public" / self._thumb_relative_path()

    def get_thumb_url(self) -> str:
        if self.asset_resolver is None:
            raise ThemeBlockError(f"Bloc {self._slug!r} : aucun asset_resolver pour construire l'URL")
        return self.asset_resolver.resolve_public_asset_url(self._thumb_relative_path())

    # ── Config ──────────────────────────────────────────────────────────────

    def get(self, key: str) -> Any:
        """
        Valeur de config par clé pointée : "a.b.c" → config["a"]["b"]["c"].
        Segment absent ou intermédiaire non-mapping → None (jamais d'exception).
        """
        if "." not in key:
            node = self._config.get(key)
        else:
            node = self._config
            for part in key.split("."):
                if isinstance(node, dict) and part in node:
                    node = node[part]
                else:
                    return None
        if isinstance(node, (dict, list)):
            return copy.deepcopy(node)
        return node

    def __repr__(self) -> str:
        return f"ThemeBlock(slug={self._slug!r}, folder={str(self.get_folder())!r})"
