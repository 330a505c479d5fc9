"""Controller et model intégrés, utilisés quand un bloc ne fournit pas les siens."""
