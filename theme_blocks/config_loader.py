"""
Chargement de la config déclarative d'un bloc.

Formats : config.json (json) ou config.yaml / config.yml (PyYAML, safe_load).
La config est opaque : seule contrainte, la racine doit être un mapping.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import yaml

from .errors import ConfigLoadError

log = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


def _key_to_str(key: Any) -> str:
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def _stringify_keys(obj: Any) -> Any:
    """Parcourt récursivement dict/list : toutes les clés de mapping deviennent des str (YAML `1:` → "1")."""
    if isinstance(obj, dict):
        return {_key_to_str(k): _stringify_keys(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_stringify_keys(v) for v in obj]
    return obj


def find_config_file(folder: Path, filenames: Iterable[str]) -> Optional[Path]:
    """Retourne le premier fichier de config existant (ordre = priorité), sinon None."""
    found = [folder / name for name in filenames if (folder / name).is_file()]
    if not found:
        return None
    if len(found) > 1:
        log.warning("Plusieurs configs pour %s, %s utilisé (ignorés : %s)",
                    folder, found[0].name, ", ".join(p.name for p in found[1:]))
    return found[0]


def load_config_file(path: Path) -> Dict[str, Any]:
    """
    Lit et parse un fichier de config.

    Raises:
        ConfigLoadError: fichier illisible, syntaxe invalide ou racine non-mapping
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        log.error("Lecture impossible de %s : %s", path, e)
        raise ConfigLoadError(path, f"lecture impossible ({e})") from e

    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        log.error("Syntaxe invalide dans %s : %s", path, e)
        raise ConfigLoadError(path, f"syntaxe invalide ({e})") from e

    # YAML vide → None
    if data is None:
        return {}
    if not isinstance(data, dict):
        log.error("Racine de %s non-mapping (%s)", path, type(data).__name__)
        raise ConfigLoadError(path, f"la racine doit être un mapping, pas {type(data).__name__}")
    return _stringify_keys(data)


def load_block_config(folder: Path, filenames: Iterable[str]) -> Dict[str, Any]:
    """Config du bloc situé dans `folder` ({} si aucun fichier de config)."""
    path = find_config_file(Path(folder), filenames)
    if path is None:
        return {}
    log.debug("Chargement config bloc %s", path)
    return load_config_file(path)
