"""Single-flight request queue for outbound translation calls.

A FIFO semaphore: at most max_concurrent callers run at once, everyone
else blocks and is admitted strictly in arrival order. There is no
cancellation and no timeout on the wait itself.
"""

import threading
from collections import deque


class SingleFlightQueue:
    """Serialize calls across all request threads in the process."""
    
    def __init__(self, max_concurrent=1):
        if max_concurrent < 1:
            raise ValueError('max_concurrent must be at least 1')
        self.max_concurrent = max_concurrent
        self._active = 0
        self._waiters = deque()
        self._cond = threading.Condition()
    
    @property
    def active(self) -> int:
        with self._cond:
            return self._active
    
    @property
    def waiting(self) -> int:
        with self._cond:
            return len(self._waiters)
    
    def _acquire(self):
        with self._cond:
            if self._active < self.max_concurrent and not self._waiters:
                self._active += 1
                return
            
            ticket = object()
            self._waiters.append(ticket)
            # Admitted only when first in line and a slot is free
            while self._waiters[0] is not ticket or self._active >= self.max_concurrent:
                self._cond.wait()
            self._waiters.popleft()
            self._active += 1
            # The next waiter may also fit when max_concurrent > 1
            self._cond.notify_all()
    
    def _release(self):
        with self._cond:
            self._active -= 1
            self._cond.notify_all()
    
    def run_exclusive(self, fn, *args, **kwargs):
        """Run fn once a slot is free and return its result."""
        self._acquire()
        try:
            return fn(*args, **kwargs)
        finally:
            self._release()
