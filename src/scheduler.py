# src/scheduler.py
"""
Taustalla pyörivä ajastin päivityssykleille.

- nimetty toistuva ajo rekisteröidään vain kerran (uusi rekisteröinti = no-op)
- kertaluontoinen ajo heti (pinta lisätty, teema vaihtui)
- korkeintaan yksi sykli kerrallaan
- RETRYABLE → uusi yritys viiveellä base_delay_s * 2**attempt, max_retries kertaa
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from src.config import RETRY_BASE_DELAY_S, RETRY_MAX_ATTEMPTS
from src.models import CycleResult

logger = logging.getLogger("weatherwidget")

Job = Callable[[], CycleResult]


class RefreshScheduler:
    def __init__(
        self,
        base_delay_s: float = RETRY_BASE_DELAY_S,
        max_retries: int = RETRY_MAX_ATTEMPTS,
    ) -> None:
        self.base_delay_s = base_delay_s
        self.max_retries = max_retries
        self._stop = threading.Event()
        self._run_lock = threading.Lock()
        self._schedules_lock = threading.Lock()
        self._schedules: dict[str, threading.Thread] = {}
        self._oneshots: set[threading.Thread] = set()

    @property
    def scheduled_names(self) -> list[str]:
        with self._schedules_lock:
            return list(self._schedules)

    def schedule_periodic(self, name: str, interval_s: float, job: Job) -> bool:
        """Rekisteröi toistuvan ajon. Palauttaa False, jos nimi on jo käytössä."""
        with self._schedules_lock:
            if name in self._schedules:
                logger.debug("Schedule %s already registered, keeping existing", name)
                return False
            thread = threading.Thread(
                target=self._periodic_loop,
                args=(name, interval_s, job),
                name=f"schedule-{name}",
                daemon=True,
            )
            self._schedules[name] = thread
        logger.info("Schedule %s registered every %s s", name, interval_s)
        thread.start()
        return True

    def trigger_now(self, job: Job) -> threading.Thread:
        thread = threading.Thread(target=self._run_once, args=(job,), name="refresh-once", daemon=True)
        with self._schedules_lock:
            self._oneshots.add(thread)
        thread.start()
        return thread

    def _run_once(self, job: Job) -> None:
        try:
            self.run_job(job)
        finally:
            with self._schedules_lock:
                self._oneshots.discard(threading.current_thread())

    def run_job(self, job: Job) -> CycleResult | None:
        """Ajaa syklin; yrittää uudelleen RETRYABLE-tuloksella. None = pysäytetty."""
        attempt = 0
        while not self._stop.is_set():
            with self._run_lock:
                try:
                    result = job()
                except Exception:
                    logger.exception("Refresh job crashed")
                    result = CycleResult.RETRYABLE

            if result is not CycleResult.RETRYABLE:
                if result is CycleResult.FATAL:
                    logger.error("Refresh cycle failed permanently, not retrying")
                return result

            if attempt >= self.max_retries:
                logger.warning("Giving up after %s retries", attempt)
                return result

            delay = self.base_delay_s * (2**attempt)
            attempt += 1
            logger.warning("Cycle retryable, retry %s/%s in %.1f s", attempt, self.max_retries, delay)
            if self._stop.wait(delay):
                break
        return None

    def _periodic_loop(self, name: str, interval_s: float, job: Job) -> None:
        while not self._stop.is_set():
            self.run_job(job)
            if self._stop.wait(interval_s):
                break
        logger.info("Schedule %s stopped", name)

    def stop(self, timeout: float | None = 5.0) -> None:
        self._stop.set()
        with self._schedules_lock:
            threads = [*self._schedules.values(), *self._oneshots]
        for thread in threads:
            if thread is not threading.current_thread():
                thread.join(timeout)
