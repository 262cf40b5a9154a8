"""Concurrent prime factorization of integer lists with streamed output."""

from __future__ import annotations

import math
import os
import queue
import threading
from dataclasses import dataclass
from typing import IO, Iterable, List, Optional

_POLL_INTERVAL = 0.01
_EXHAUSTED = object()


class FactorizationError(Exception):
    """Base class for errors raised by a factorization run."""


class FactorizationCancelled(FactorizationError):
    """Raised when a run is cancelled through its ``done`` event."""

    def __init__(self, message: str = "cancelled") -> None:
        super().__init__(message)


class WriterInteractionError(FactorizationError):
    """Raised when writing a result fails; the original error is the cause."""


class InvalidConfigError(FactorizationError, ValueError):
    """Raised when a worker count in the configuration is not positive."""


@dataclass(frozen=True)
class Config:
    """Number of factorization and write workers for a run."""

    factorization_workers: int
    write_workers: int

    @classmethod
    def default(cls) -> "Config":
        """Use one worker of each kind per available CPU."""
        workers = os.cpu_count() or 1
        return cls(factorization_workers=workers, write_workers=workers)

    def validate(self) -> None:
        """Raise InvalidConfigError unless both worker counts are positive."""
        if self.factorization_workers <= 0:
            raise InvalidConfigError("invalid config factorization_workers")
        if self.write_workers <= 0:
            raise InvalidConfigError("invalid config write_workers")


def factorize(n: int) -> List[int]:
    """Return the prime factors of ``n`` in ascending order.

    Negative numbers start with ``-1``; ``0`` and ``1`` factor as themselves.
    """
    if n in (0, 1):
        return [n]
    factors: List[int] = []
    if n < 0:
        factors.append(-1)
        n = -n
    divisor = 2
    while divisor * divisor <= n:
        while n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        divisor += 1
    if n != 1:
        factors.append(n)
    return factors


def format_factorization(factors: Iterable[int]) -> str:
    """Render factors as ``"<product> = f1 * f2 * ..."``."""
    factors = list(factors)
    if not factors:
        raise ValueError("at least one factor is required")
    product = math.prod(factors)
    return f"{product} = {' * '.join(str(f) for f in factors)}"


class _Pipeline:
    """One run: a shared number source, factorizing threads and writing threads."""

    def __init__(
        self,
        done: threading.Event,
        numbers: List[int],
        writer: IO[str],
        capacity: int,
    ) -> None:
        self._done = done
        self._writer = writer
        self._numbers = iter(numbers)
        self._numbers_lock = threading.Lock()
        self._results: "queue.Queue[List[int]]" = queue.Queue(maxsize=capacity)
        self._produced = threading.Event()
        self._stop = threading.Event()
        self._error_lock = threading.Lock()
        self.error: Optional[BaseException] = None

    def _halted(self) -> bool:
        return self._done.is_set() or self._stop.is_set()

    def _next_number(self):
        with self._numbers_lock:
            return next(self._numbers, _EXHAUSTED)

    def _fail(self, exc: BaseException) -> None:
        with self._error_lock:
            if self.error is None:
                self.error = exc
        self._stop.set()

    def _factor_worker(self) -> None:
        while not self._halted():
            number = self._next_number()
            if number is _EXHAUSTED:
                return
            factors = factorize(number)
            while True:
                if self._halted():
                    return
                try:
                    self._results.put(factors, timeout=_POLL_INTERVAL)
                    break
                except queue.Full:
                    continue

    def _write_worker(self) -> None:
        while not self._halted():
            try:
                factors = self._results.get(timeout=_POLL_INTERVAL)
            except queue.Empty:
                if self._produced.is_set() and self._results.empty():
                    return
                continue
            try:
                self._writer.write(format_factorization(factors) + "\n")
            except Exception as exc:  # any writer failure ends the run
                self._fail(exc)
                return

    def run(self, factor_workers: int, write_workers: int) -> None:
        factorers = [
            threading.Thread(target=self._factor_worker, name=f"factor-{i}")
            for i in range(factor_workers)
        ]
        writers = [
            threading.Thread(target=self._write_worker, name=f"write-{i}")
            for i in range(write_workers)
        ]
        for thread in (*factorers, *writers):
            thread.start()
        for thread in factorers:
            thread.join()
        self._produced.set()
        for thread in writers:
            thread.join()


class Factorization:
    """Factorizes lists of integers concurrently, one output line per number.

    The writer must tolerate concurrent ``write`` calls; each line is written
    with a single call and ends with ``"\\n"``. Line order is not guaranteed.
    """

    def do(
        self,
        done: Optional[threading.Event],
        numbers: Iterable[int],
        writer: IO[str],
        config: Optional[Config] = None,
    ) -> None:
        """Factorize ``numbers`` and write one line per number to ``writer``.

        Raises FactorizationCancelled if ``done`` is set by the end of the run,
        WriterInteractionError if a write fails, and InvalidConfigError for a
        bad configuration.
        """
        cfg = config if config is not None else Config.default()
        cfg.validate()
        numbers = list(numbers)
        done = done if done is not None else threading.Event()

        pipeline = _Pipeline(done, numbers, writer, cfg.factorization_workers)
        pipeline.run(
            min(cfg.factorization_workers, len(numbers)),
            min(cfg.write_workers, len(numbers)),
        )

        if done.is_set():
            raise FactorizationCancelled()
        if pipeline.error is not None:
            raise WriterInteractionError(
                f"writer interaction: {pipeline.error}"
            ) from pipeline.error