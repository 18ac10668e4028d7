"""Two-tier translation cache: in-process map over a durable store."""

import logging
from typing import Optional

from app.utils.text import persistent_key

logger = logging.getLogger(__name__)


class TranslationCache:
    """
    Write-through cache for translated strings.
    
    The memory tier lives for the process and is only emptied by
    clear_memory(). The durable tier is keyed by the namespaced version of
    the same key and survives restarts. A durable hit is promoted into
    memory on read.
    """
    
    def __init__(self, store):
        self.store = store
        self._memory: dict[str, str] = {}
    
    def lookup(self, key: str) -> Optional[str]:
        """Return the cached translation for key, or None on a miss in both tiers."""
        if key in self._memory:
            return self._memory[key]
        
        try:
            value = self.store.get(persistent_key(key))
        except Exception as e:
            logger.debug(f"Durable cache read error: {e}")
            return None
        
        if value:
            self._memory[key] = value
            return value
        return None
    
    def populate(self, key: str, value: str) -> None:
        """Cache value in memory, then best-effort in the durable store."""
        self._memory[key] = value
        try:
            self.store.set(persistent_key(key), value)
        except Exception as e:
            logger.debug(f"Durable cache write error: {e}")
    
    def clear_memory(self) -> None:
        """Empty the memory tier. Durable entries are kept."""
        self._memory.clear()
    
    def __contains__(self, key):
        return key in self._memory
    
    def __len__(self):
        return len(self._memory)
