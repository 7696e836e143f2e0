# portfolio/services/circuit_breaker.py
import time
import logging

logger = logging.getLogger(__name__)

CLOSED = "closed"
OPEN = "open"
HALF_OPEN = "half_open"


class CircuitBreaker:
    """
    Gate in front of a remote dependency that may become rate limited.

    ``trip()`` opens the breaker. With ``retry_after=None`` it stays open for
    the life of the object; otherwise, once ``retry_after`` seconds have
    passed, a single trial request is let through (half-open) and its outcome
    closes or re-opens the breaker.
    """

    def __init__(self, retry_after=None, clock=time.monotonic):
        self.retry_after = retry_after
        self.clock = clock
        self.state = CLOSED
        self.opened_at = None
        self.trip_count = 0

    def allow_request(self) -> bool:
        if self.state == CLOSED:
            return True
        if self.state == OPEN:
            if self.retry_after is None:
                return False
            if self.clock() - self.opened_at < self.retry_after:
                return False
            self.state = HALF_OPEN
            logger.info("🔁 Circuit half-open, allowing a trial request")
        return True

    def record_success(self):
        if self.state != CLOSED:
            logger.info("✅ Circuit closed after a successful trial request")
        self.state = CLOSED
        self.opened_at = None

    def trip(self):
        self.state = OPEN
        self.opened_at = self.clock()
        self.trip_count += 1
        logger.warning("⛔ Circuit opened, remote calls disabled")

    def reset(self):
        self.state = CLOSED
        self.opened_at = None
        self.trip_count = 0

    @property
    def is_open(self) -> bool:
        return self.state == OPEN
