"""Controller par défaut d'un bloc : aucun traitement de requête."""
from typing import Any, Optional


class BaseController:
    def __init__(self, block, model):
        self.block = block
        self.model = model

    def handle_request(self, request: Optional[Any] = None) -> None:
        return None
