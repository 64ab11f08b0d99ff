from __future__ import annotations

import threading
from typing import Callable


class Lazy[T]:

    def __init__(self, factory: Callable[[], T]) -> None:
        self.factory = factory
        self.lock = threading.Lock()
        self._value: T | None = None
        self._loaded = False

    def __repr__(self) -> str:
        state = "loaded" if self._loaded else "pending"
        return f"<lazy {getattr(self.factory, '__name__', self.factory)} ({state})>"

    @property
    def loaded(self) -> bool:
        return self._loaded

    def get(self) -> T:
        # _loaded is only set after _value is assigned, so a reader that sees it never sees a partial value.
        if self._loaded:
            return self._value  # type: ignore[return-value]
        with self.lock:
            if not self._loaded:
                self._value = self.factory()
                self._loaded = True
        return self._value  # type: ignore[return-value]
