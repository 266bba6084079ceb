"""
Shared data structures for the neural genetics system.

DataSize declares the logical shape of a tensor.
DataPiece is a flat numeric buffer carrying that shape.
DataItem pairs an input with its expected output; a Dataset is a list of them.
"""

import numpy as np
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, List, Optional, Sequence


class DataSizeKind(IntEnum):
    ONE_D = 1
    TWO_D = 2
    THREE_D = 3


@dataclass(frozen=True)
class DataSize:
    """Logical 1D/2D/3D shape. The kind decides which extents are present."""

    kind: DataSizeKind
    width: int
    height: Optional[int] = None
    depth: Optional[int] = None

    def __post_init__(self):
        # Frozen: normalise a plain int kind through object.__setattr__.
        object.__setattr__(self, "kind", DataSizeKind(self.kind))
        expected = {
            DataSizeKind.ONE_D: (False, False),
            DataSizeKind.TWO_D: (True, False),
            DataSizeKind.THREE_D: (True, True),
        }[self.kind]
        present = (self.height is not None, self.depth is not None)
        if present != expected:
            raise ValueError(
                f"{self.kind.name} size expects height={expected[0]}, "
                f"depth={expected[1]}"
            )
        for extent in (self.width, self.height, self.depth):
            if extent is not None and extent <= 0:
                raise ValueError("DataSize extents must be positive.")

    @classmethod
    def one_d(cls, width: int) -> "DataSize":
        return cls(DataSizeKind.ONE_D, width)

    @classmethod
    def two_d(cls, width: int, height: int) -> "DataSize":
        return cls(DataSizeKind.TWO_D, width, height)

    @classmethod
    def three_d(cls, width: int, height: int, depth: int) -> "DataSize":
        return cls(DataSizeKind.THREE_D, width, height, depth)

    @property
    def flat_size(self) -> int:
        """Product of the present extents."""
        flat = self.width
        if self.height is not None:
            flat *= self.height
        if self.depth is not None:
            flat *= self.depth
        return flat


@dataclass(eq=False)
class DataPiece:
    """A flat float buffer with a declared shape.

    Construction fails when the body length disagrees with the shape:
    every index computation below relies on the fixed strides.
    """

    size: DataSize
    body: np.ndarray

    def __post_init__(self):
        # Own the buffer: later edits to the caller's array must not leak in.
        self.body = np.array(self.body, dtype=float).reshape(-1)
        if self.body.shape[0] != self.size.flat_size:
            raise ValueError("DataPiece body does not conform to DataSize.")

    @classmethod
    def vector(cls, values: Sequence[float]) -> "DataPiece":
        """Shortcut for a 1D piece sized to its values."""
        body = np.array(values, dtype=float).reshape(-1)
        return cls(DataSize.one_d(body.shape[0]), body)

    def get(self, x: int, y: Optional[int] = None, z: Optional[int] = None) -> float:
        # No bounds checks: callers index inside the declared shape.
        if y is None:
            return float(self.body[x])
        if z is None:
            return float(self.body[x + y * self.size.width])
        return float(self.body[z + (x + y * self.size.width) * self.size.depth])

    def __len__(self) -> int:
        return self.body.shape[0]

    def __eq__(self, other) -> bool:
        # Structural on the body only; the shape is not compared.
        if not isinstance(other, DataPiece):
            return NotImplemented
        return bool(np.array_equal(self.body, other.body))

    __hash__ = None


@dataclass(frozen=True)
class DataItem:
    """One supervised example: input and expected output."""

    input: DataPiece
    output: DataPiece

    @classmethod
    def from_values(
        cls,
        input: Sequence[float],
        input_size: DataSize,
        output: Sequence[float],
        output_size: DataSize,
    ) -> "DataItem":
        return cls(DataPiece(input_size, input), DataPiece(output_size, output))


@dataclass
class Dataset:
    """Ordered, mutable collection of training examples."""

    items: List[DataItem] = field(default_factory=list)

    def append(self, item: DataItem) -> None:
        self.items.append(item)

    def shuffled(self, rng: np.random.Generator) -> List[DataItem]:
        """A shuffled working copy; the dataset itself keeps its order."""
        order = rng.permutation(len(self.items))
        return [self.items[i] for i in order]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[DataItem]:
        return iter(self.items)

    def __getitem__(self, index: int) -> DataItem:
        return self.items[index]


def classifier_output(classes: int, correct: int) -> DataPiece:
    """One-hot target vector with a 1.0 at the correct class."""
    if correct >= classes or correct < 0:
        raise ValueError("Correct class must be less than classes number.")
    output = np.zeros(classes)
    output[correct] = 1.0
    return DataPiece(DataSize.one_d(classes), output)
