"""
theme_blocks — résolution des blocs d'un thème de page builder.

Usage:
    >>> from theme_blocks import Theme, ThemeBlock, ThemeAssetResolver
    >>> theme = Theme(slug="demo", folder="/themes/demo")
    >>> block = ThemeBlock(theme, "hero", asset_resolver=ThemeAssetResolver(theme))
    >>> block.get_view_file(), block.get("title.default"), block.get_thumb_url()
"""
from .block import ThemeBlock, BlockKind, BlockView, classify, sanitize_slug
from .config_loader import load_block_config, load_config_file
from .errors import ThemeBlockError, ConfigLoadError, MissingViewError
from .settings import BlockSettings
from .theme import Theme, ThemeContract, AssetResolver, ThemeAssetResolver

__version__ = "0.1.0"

__all__ = [
    "ThemeBlock", "BlockKind", "BlockView", "classify", "sanitize_slug",
    "load_block_config", "load_config_file",
    "ThemeBlockError", "ConfigLoadError", "MissingViewError",
    "BlockSettings",
    "Theme", "ThemeContract", "AssetResolver", "ThemeAssetResolver",
]
