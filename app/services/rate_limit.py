"""Global rate-limit breaker for the translation provider.

One 429 from the provider suspends every outbound translation call for a
fixed cooldown. The deadline is persisted so it survives restarts and is
shared by every worker using the same store.
"""

import logging
import time

logger = logging.getLogger(__name__)

RATE_LIMIT_KEY = 'translation_rate_limited_until'
DEFAULT_COOLDOWN_SECONDS = 30 * 60


class RateLimitBreaker:
    """Open while the current time is before the stored deadline."""
    
    def __init__(self, store, cooldown_seconds=DEFAULT_COOLDOWN_SECONDS, clock=time.time):
        self.store = store
        self.cooldown_seconds = cooldown_seconds
        self.clock = clock
        # In-process copy of the deadline, kept when the store cannot be written
        self._limited_until = 0
    
    def _now_ms(self) -> int:
        return int(self.clock() * 1000)
    
    @property
    def limited_until(self) -> int:
        """Deadline in epoch milliseconds, 0 when unset or unreadable."""
        return max(self._limited_until, self._stored_until())
    
    def _stored_until(self) -> int:
        try:
            raw = self.store.get(RATE_LIMIT_KEY)
            return int(raw or 0)
        except (TypeError, ValueError):
            return 0
        except Exception as e:
            logger.debug(f"Rate-limit state read error: {e}")
            return 0
    
    def is_open(self) -> bool:
        return self._now_ms() < self.limited_until
    
    def trip(self) -> int:
        """Open the breaker for the cooldown window. Returns the new deadline."""
        until = self._now_ms() + int(self.cooldown_seconds * 1000)
        self._limited_until = until
        try:
            self.store.set(RATE_LIMIT_KEY, str(until))
        except Exception as e:
            logger.debug(f"Rate-limit state write error: {e}")
        logger.warning(
            f"Translation provider rate-limited (429). "
            f"Disabling live translation for {self.cooldown_seconds}s."
        )
        return until
    
    def reset(self) -> None:
        """Close the breaker."""
        self._limited_until = 0
        try:
            self.store.delete(RATE_LIMIT_KEY)
        except Exception as e:
            logger.debug(f"Rate-limit state reset error: {e}")
        logger.info("Translation rate-limit breaker reset")
