"""Hash functions: Keccak-256."""

from .keccak import hash_message, keccak256

__all__: tuple[str, ...] = ("hash_message", "keccak256")
