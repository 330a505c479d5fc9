"""
Réglages du résolveur — lus depuis l'environnement.

THEME_BLOCKS_CODE_EXT            extension des fichiers code (controller, model, vue dynamique)
THEME_BLOCKS_DEFAULT_CONTROLLER  controller utilisé quand le bloc n'en fournit pas
THEME_BLOCKS_DEFAULT_MODEL       model utilisé quand le bloc n'en fournit pas
THEME_ASSETS_URL                 URL publique sous laquelle les thèmes sont servis
"""
import os
from pathlib import Path
from typing import List

from pydantic import BaseModel, Field, field_validator

DEFAULTS_DIR = Path(__file__).parent / "defaults"

DEFAULT_CONTROLLER_FILE = DEFAULTS_DIR / "base_controller.py"
DEFAULT_MODEL_FILE      = DEFAULTS_DIR / "base_model.py"


class BlockSettings(BaseModel):
    code_extension: str = "py"
    default_controller_file: Path = DEFAULT_CONTROLLER_FILE
    default_model_file: Path = DEFAULT_MODEL_FILE
    assets_base_url: str = "/themes"
    # Ordre = priorité : le premier fichier trouvé gagne
    config_filenames: List[str] = Field(
        default_factory=lambda: ["config.json", "config.yaml", "config.yml"]
    )

    @field_validator("code_extension")
    @classmethod
    def _strip_dot(cls, v: str) -> str:
        v = v.strip().lstrip(".")
        if not v:
            raise ValueError("code_extension vide")
        return v

    @classmethod
    def from_env(cls) -> "BlockSettings":
        """Construit les réglages depuis les variables d'environnement (défauts sinon)."""
        return cls(
            code_extension=os.getenv("THEME_BLOCKS_CODE_EXT", "py"),
            default_controller_file=Path(os.getenv("THEME_BLOCKS_DEFAULT_CONTROLLER", str(DEFAULT_CONTROLLER_FILE))),
            default_model_file=Path(os.getenv("THEME_BLOCKS_DEFAULT_MODEL", str(DEFAULT_MODEL_FILE))),
            assets_base_url=os.getenv("THEME_ASSETS_URL", "/themes"),
        )
