from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional


MASK64 = 0xFFFFFFFFFFFFFFFF


@dataclass(frozen=True, order=True)
class BitBoard:
    """Set of squares packed into a 64-bit integer.

    Bit ``i`` is set when square ``i`` is a member (a1=0 .. h8=63,
    rank-major). Instances are immutable values: ``set`` and the in-place
    operators (``|=``, ``^=``, ...) produce a new BitBoard and rebind the
    name, so two variables never share mutable state.
    """

    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value & MASK64)

    # --- construction ---
    @classmethod
    def from_int(cls, value: int) -> "BitBoard":
        return cls(value & MASK64)

    @classmethod
    def from_square(cls, square: int) -> "BitBoard":
        return cls(1 << int(square))

    @classmethod
    def from_squares(cls, squares: Iterable[int]) -> "BitBoard":
        value = 0
        for sq in squares:
            value |= 1 << int(sq)
        return cls(value)

    @classmethod
    def from_str(cls, text: str) -> "BitBoard":
        """Build a set from 64 ``0``/``1`` symbols, rank 8 first.

        Within each rank the first symbol is file a. Every character other
        than ``0`` and ``1`` (spaces, line breaks, labels) is ignored.

        Raises:
            ValueError: If the text does not hold exactly 64 symbols.
        """
        bits = [c for c in text if c in "01"]
        if len(bits) != 64:
            raise ValueError(f"expected 64 bit symbols, got {len(bits)}")
        value = 0
        for i, bit in enumerate(bits):
            if bit == "1":
                rank_idx = 7 - i // 8
                file_idx = i % 8
                value |= 1 << (rank_idx * 8 + file_idx)
        return cls(value)

    # --- membership ---
    def is_set(self, square: int) -> bool:
        return (self.value >> int(square)) & 1 == 1

    def set(self, square: int) -> "BitBoard":
        """Return this set with ``square`` added."""
        return BitBoard(self.value | (1 << int(square)))

    def is_empty(self) -> bool:
        return self.value == 0

    def contains(self, other: "BitBoard") -> bool:
        """True when ``other`` shares at least one square with this set."""
        return self.value & other.value != 0

    def count(self) -> int:
        return bin(self.value).count("1")

    # --- lowest set bit ---
    def lsb(self) -> "BitBoard":
        """Lowest member as a singleton set (empty for an empty set)."""
        return BitBoard(self.value & -self.value)

    def reset_lsb(self) -> "BitBoard":
        """This set without its lowest member (empty stays empty)."""
        return BitBoard(self.value & (self.value - 1))

    def lsb_index(self) -> Optional[int]:
        """Index of the lowest member, or ``None`` for an empty set."""
        if self.value == 0:
            return None
        return (self.value & -self.value).bit_length() - 1

    def msb_index(self) -> Optional[int]:
        if self.value == 0:
            return None
        return self.value.bit_length() - 1

    def squares(self) -> Iterator[int]:
        """Yield member square indices in ascending order."""
        bb = self.value
        while bb:
            lsb = bb & -bb
            yield lsb.bit_length() - 1
            bb ^= lsb

    # --- algebra ---
    def __and__(self, other: "BitBoard") -> "BitBoard":
        return BitBoard(self.value & other.value)

    def __or__(self, other: "BitBoard") -> "BitBoard":
        return BitBoard(self.value | other.value)

    def __xor__(self, other: "BitBoard") -> "BitBoard":
        return BitBoard(self.value ^ other.value)

    def __invert__(self) -> "BitBoard":
        return BitBoard(~self.value & MASK64)

    def __lshift__(self, n: int) -> "BitBoard":
        return BitBoard((self.value << n) & MASK64)

    def __rshift__(self, n: int) -> "BitBoard":
        return BitBoard(self.value >> n)

    def __bool__(self) -> bool:
        return self.value != 0

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[int]:
        return self.squares()

    def __int__(self) -> int:
        return self.value

    # --- diagnostics ---
    def render(self) -> str:
        """8x8 grid (rank 8 on top) followed by the raw 64-bit pattern."""
        lines: List[str] = []
        for rank_idx in range(7, -1, -1):
            row = " ".join(
                "1" if self.is_set(rank_idx * 8 + file_idx) else "0" for file_idx in range(8)
            )
            lines.append(f"  {rank_idx + 1}  {row}")
        lines.append("     a b c d e f g h")
        lines.append(f"{self.value:064b}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()


EMPTY = BitBoard(0)
FULL = BitBoard(MASK64)

FILE_A = BitBoard(0x0101010101010101)
FILE_B = FILE_A << 1
FILE_G = FILE_A << 6
FILE_H = FILE_A << 7
NOT_FILE_A = ~FILE_A
NOT_FILE_H = ~FILE_H
NOT_FILE_AB = ~(FILE_A | FILE_B)
NOT_FILE_GH = ~(FILE_G | FILE_H)

RANK_1 = BitBoard(0xFF)
RANK_2 = RANK_1 << 8
RANK_3 = RANK_1 << 16
RANK_4 = RANK_1 << 24
RANK_5 = RANK_1 << 32
RANK_6 = RANK_1 << 40
RANK_7 = RANK_1 << 48
RANK_8 = RANK_1 << 56
