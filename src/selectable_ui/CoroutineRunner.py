"""Cooperative, tick driven coroutines for widgets."""
import logging
from typing import Any, Generator, List, Optional

CoroutineGenerator = Generator[None, None, None]


class Coroutine:
    def __init__(self, runner: "CoroutineRunner", owner: Any, generator: CoroutineGenerator) -> None:
        self.runner = runner
        self.owner = owner
        self.generator = generator
        self.running = True

    def stop(self) -> None:
        self.runner.stop(self)

    def _close(self) -> None:
        self.running = False
        self.generator.close()


class CoroutineRunner:
    """
    Resumes generator based coroutines once per host tick.

    Every coroutine runs on the thread calling `start()` and `tick()`; a
    `yield` hands control back to the host until the next tick. Coroutines
    belong to an owner so a widget can stop everything it started. Owners
    that report `destroyed` have their coroutines dropped without being
    resumed again.
    """

    def __init__(self) -> None:
        self._coroutines: List[Coroutine] = []
        self._executing: List[Coroutine] = []

    def start(self, owner: Any, generator: CoroutineGenerator) -> Coroutine:
        """Run `generator` up to its first yield and keep it for later ticks."""
        coroutine = Coroutine(self, owner, generator)

        if self._step(coroutine):
            self._coroutines.append(coroutine)

        return coroutine

    def tick(self) -> int:
        """Resume every running coroutine once, return how many were resumed."""
        resumed = 0

        for coroutine in list(self._coroutines):
            if not coroutine.running:
                continue

            if getattr(coroutine.owner, "destroyed", False):
                logging.debug(f"Dropping coroutine of destroyed owner {coroutine.owner!r}")
                self._remove(coroutine)
                coroutine._close()
                continue

            resumed += 1
            if not self._step(coroutine):
                self._remove(coroutine)

        return resumed

    def stop(self, coroutine: Coroutine) -> None:
        if not coroutine.running:
            return

        self._remove(coroutine)

        # A generator cannot be closed from inside itself, _step drops it instead
        if coroutine in self._executing:
            coroutine.running = False
            return

        coroutine._close()

    def stop_all(self, owner: Any) -> None:
        for coroutine in [c for c in self._coroutines if c.owner is owner]:
            self.stop(coroutine)

    def count(self, owner: Optional[Any] = None) -> int:
        if owner is None:
            return len(self._coroutines)

        return sum(1 for c in self._coroutines if c.owner is owner)

    def _step(self, coroutine: Coroutine) -> bool:
        """Advance to the next yield. False once the coroutine is finished."""
        self._executing.append(coroutine)
        try:
            next(coroutine.generator)

        except StopIteration:
            coroutine.running = False
            return False

        except Exception:
            coroutine.running = False
            self._remove(coroutine)
            raise

        finally:
            self._executing.pop()

        if not coroutine.running:
            coroutine.generator.close()
            return False

        return True

    def _remove(self, coroutine: Coroutine) -> None:
        if coroutine in self._coroutines:
            self._coroutines.remove(coroutine)
