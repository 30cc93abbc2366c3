"""Reusable key-combo registry primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..intents import Intent


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single intent."""

    combos: tuple[str, ...]
    intent: Intent


class KeyComboRegistry:
    """Small key-to-intent table with optional key normalization strategy."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        """Initialize empty registry with optional token normalizer."""
        self._normalize = normalize if normalize is not None else self._identity
        self._intents: dict[str, Intent] = {}

    @staticmethod
    def _identity(key: str) -> str:
        """Return key unchanged for exact-match dispatch registries."""
        return key

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing intents for same combos."""
        for combo in binding.combos:
            self._intents[self._normalize(combo)] = binding.intent
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def lookup(self, key: str) -> Intent | None:
        """Return the intent bound to ``key``, or ``None`` when unbound."""
        return self._intents.get(self._normalize(key))
