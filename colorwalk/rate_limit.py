# colorwalk/rate_limit.py
# RPM + daily limiter for the hosted classifier. Short waits sleep; anything
# longer than max_sleep is refused so callers can fall back right away.
import logging
import time
from collections import deque

logger = logging.getLogger(__name__)

DAY_SECONDS = 86400


class RateLimitExceeded(ValueError):
    pass


class RateLimiter:
    def __init__(self, rpm=10, daily_limit=None, max_sleep=5.0, clock=time.time, sleep=time.sleep):
        self.rpm = max(1, rpm)
        self.window = 60.0
        self.events = deque()
        self.daily_limit = daily_limit
        self.daily_count = 0
        self.max_sleep = max_sleep
        self._clock = clock
        self._sleep = sleep
        self.last_reset = clock()

    def _drop_old(self, now):
        while self.events and now - self.events[0] > self.window:
            self.events.popleft()

    def wait(self) -> float:
        """
        Block until a request is allowed and record it. Returns seconds slept.
        Raises RateLimitExceeded when the daily quota is used up or the RPM
        window would need a wait longer than max_sleep.
        """
        now = self._clock()
        slept = 0.0

        if now - self.last_reset >= DAY_SECONDS:
            self.daily_count = 0
            self.last_reset = now

        if self.daily_limit and self.daily_count >= self.daily_limit:
            logger.warning("Daily limit %s reached", self.daily_limit)
            raise RateLimitExceeded(f"daily limit {self.daily_limit} reached")

        self._drop_old(now)

        if len(self.events) >= self.rpm:
            sleep_for = self.window - (now - self.events[0]) + 0.05
            if sleep_for > self.max_sleep:
                logger.warning("RPM cap hit (%s/min); next slot in %.1f sec", self.rpm, sleep_for)
                raise RateLimitExceeded(f"rpm cap {self.rpm}/min reached")
            if sleep_for > 0:
                logger.info("RPM cap hit (%s/min). Sleeping %.1f sec", self.rpm, sleep_for)
                self._sleep(sleep_for)
                slept += sleep_for
                now = self._clock()
                self._drop_old(now)

        self.events.append(now)
        self.daily_count += 1
        return slept
