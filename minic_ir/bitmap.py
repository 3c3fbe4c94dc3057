"""A fixed-capacity bit map."""

from __future__ import annotations


class BitMap:
    """Bit map holding at least ``capacity`` bits, stored ``capacity // 8 + 1`` bytes wide."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._bits = bytearray(capacity // 8 + 1)

    def __len__(self) -> int:
        return len(self._bits) * 8

    def _locate(self, index: int) -> tuple[int, int]:
        if not 0 <= index < len(self):
            raise IndexError(f"bit index {index} out of range")
        return divmod(index, 8)

    def set(self, index: int) -> None:
        """Set the bit at ``index`` to 1."""
        byte, bit = self._locate(index)
        self._bits[byte] |= 1 << bit

    def reset(self, index: int) -> None:
        """Set the bit at ``index`` to 0."""
        byte, bit = self._locate(index)
        self._bits[byte] &= ~(1 << bit) & 0xFF

    def test(self, index: int) -> bool:
        """Whether the bit at ``index`` is 1."""
        byte, bit = self._locate(index)
        return bool(self._bits[byte] & (1 << bit))