"""Model par défaut d'un bloc : expose la config du bloc en lecture."""
from typing import Any


class BlockModel:
    def __init__(self, block):
        self.block = block

    def get(self, key: str, default: Any = None) -> Any:
        value = self.block.get(key)
        return default if value is None else value
