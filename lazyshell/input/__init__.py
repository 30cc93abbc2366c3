"""Input-layer public API for key decoding and mode dispatch.

Exports are split between low-level terminal decoding (`read_key`)
and the pure key-to-intent tables used by the runtime loop.
"""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key
from .keys import INSERT_BINDINGS, NORMAL_BINDINGS, dispatch_key, is_printable_key
from .key_registry import KeyComboBinding, KeyComboRegistry

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "INSERT_BINDINGS",
    "NORMAL_BINDINGS",
    "dispatch_key",
    "is_printable_key",
]
