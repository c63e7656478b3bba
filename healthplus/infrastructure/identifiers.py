"""
Clock and identifier source.

Supplies timestamps and pseudo-random values (entity ids, tracking codes,
one-time codes). Workflows only use it to generate values, so tests can pin
both the clock and the random generator.
"""

import random
import string
import threading
from collections.abc import Callable
from datetime import datetime


class IdentifierSource:
    """
    Timestamp-based id generator with an injectable clock and RNG.

    Ids look like ``<prefix>_<epoch millis>``. Two ids requested within the
    same millisecond get consecutive numbers, so ids stay unique.

    Example:
        ```python
        ids = IdentifierSource(clock=lambda: datetime(2024, 1, 20, 10, 0), rng=random.Random(7))
        first = ids.new_id("apt")   # "apt_<millis>"
        second = ids.new_id("apt")  # "apt_<millis + 1>"
        ids.tracking_id()           # "TRK" + 9 uppercase alphanumerics
        ```
    """

    TRACKING_ALPHABET = string.ascii_uppercase + string.digits

    def __init__(self, clock: Callable[[], datetime] | None = None, rng: random.Random | None = None):
        self._clock = clock or datetime.now
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._last_millis = 0

    def now(self) -> datetime:
        return self._clock()

    def new_id(self, prefix: str) -> str:
        """Return a unique ``<prefix>_<millis>`` identifier."""
        with self._lock:
            millis = max(int(self._clock().timestamp() * 1000), self._last_millis + 1)
            self._last_millis = millis
        return f"{prefix}_{millis}"

    def otp(self) -> str:
        """Six-digit one-time code between 100000 and 999999."""
        return str(self._rng.randint(100000, 999999))

    def tracking_id(self) -> str:
        return "TRK" + "".join(self._rng.choice(self.TRACKING_ALPHABET) for _ in range(9))

    def token(self, prefix: str = "mock_jwt_token") -> str:
        return f"{prefix}_{int(self._clock().timestamp() * 1000)}"
