from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type

from .config import settings
from .errors import BackendError

logger = logging.getLogger(__name__)

Rows = Sequence[Sequence[float]]


class MatrixBackend(ABC):
    """
    The four matrix primitives the weighted models need. Every backend
    works on its own native matrix type; ``to_list`` converts back to
    nested Python lists.
    """

    name = "base"

    @abstractmethod
    def matrix(self, rows: Rows, shape: Tuple[int, int]) -> Any:
        """Build a matrix from row lists; ``shape`` covers the case of zero rows."""
        raise NotImplementedError()

    @abstractmethod
    def transpose(self, m: Any) -> Any:
        raise NotImplementedError()

    @abstractmethod
    def multiply(self, a: Any, b: Any) -> Any:
        raise NotImplementedError()

    @abstractmethod
    def normalize_columns(self, m: Any) -> Any:
        """Scale each column to unit Euclidean length; zero columns stay zero."""
        raise NotImplementedError()

    @abstractmethod
    def to_list(self, m: Any) -> List[List[float]]:
        raise NotImplementedError()


class ListMatrix:
    """Row lists plus an explicit column count, so a matrix with no rows keeps its width."""

    def __init__(self, rows: List[List[float]], n_cols: int):
        self.rows = rows
        self.n_cols = n_cols

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self.rows), self.n_cols

    def columns(self) -> List[List[float]]:
        return [[row[j] for row in self.rows] for j in range(self.n_cols)]

    def __getitem__(self, i: int) -> List[float]:
        return self.rows[i]

    def __len__(self) -> int:
        return len(self.rows)


class PythonBackend(MatrixBackend):
    name = "python"

    def matrix(self, rows: Rows, shape: Tuple[int, int]) -> ListMatrix:
        return ListMatrix([[float(x) for x in row] for row in rows], shape[1])

    def transpose(self, m: ListMatrix) -> ListMatrix:
        return ListMatrix(m.columns(), len(m.rows))

    def multiply(self, a: ListMatrix, b: ListMatrix) -> ListMatrix:
        cols = b.columns()
        rows = [[sum(x * y for x, y in zip(row, col)) for col in cols] for row in a.rows]
        return ListMatrix(rows, b.n_cols)

    def normalize_columns(self, m: ListMatrix) -> ListMatrix:
        norms = [math.sqrt(sum(x * x for x in col)) for col in m.columns()]
        rows = [[x / n if n > 0 else 0.0 for x, n in zip(row, norms)] for row in m.rows]
        return ListMatrix(rows, m.n_cols)

    def to_list(self, m: ListMatrix) -> List[List[float]]:
        return [list(row) for row in m.rows]


class NumpyBackend(MatrixBackend):
    name = "numpy"

    def __init__(self):
        try:
            import numpy
        except ImportError as e:
            raise BackendError("the numpy backend requires numpy") from e
        self.np = numpy

    def matrix(self, rows: Rows, shape: Tuple[int, int]):
        if not rows:
            return self.np.zeros(shape, dtype=float)
        return self.np.asarray(rows, dtype=float).reshape(shape)

    def transpose(self, m):
        return m.T

    def multiply(self, a, b):
        return a @ b

    def normalize_columns(self, m):
        norms = self.np.linalg.norm(m, axis=0)
        safe = self.np.where(norms > 0, norms, 1.0)
        return m / safe

    def to_list(self, m) -> List[List[float]]:
        return self.np.asarray(m, dtype=float).tolist()


class ScipyBackend(MatrixBackend):
    name = "scipy"

    def __init__(self):
        try:
            import numpy
            from scipy import sparse
        except ImportError as e:
            raise BackendError("the scipy backend requires scipy") from e
        self.np = numpy
        self.sparse = sparse

    def matrix(self, rows: Rows, shape: Tuple[int, int]):
        if not rows:
            return self.sparse.csc_matrix(shape, dtype=float)
        return self.sparse.csc_matrix(self.np.asarray(rows, dtype=float).reshape(shape))

    def transpose(self, m):
        return m.T.tocsc()

    def multiply(self, a, b):
        return (a @ b).tocsc()

    def normalize_columns(self, m):
        if m.shape[1] == 0:
            return m
        norms = self.np.sqrt(self.np.asarray(m.multiply(m).sum(axis=0)).ravel())
        scale = self.np.divide(1.0, norms, out=self.np.zeros_like(norms), where=norms > 0)
        return (m @ self.sparse.diags(scale)).tocsc()

    def to_list(self, m) -> List[List[float]]:
        return m.toarray().tolist()


BACKENDS: Dict[str, Type[MatrixBackend]] = {
    NumpyBackend.name: NumpyBackend,
    ScipyBackend.name: ScipyBackend,
    PythonBackend.name: PythonBackend,
}


def get_backend(name: Optional[str] = None) -> MatrixBackend:
    key = (name or settings.backend).lower()
    cls = BACKENDS.get(key)
    if cls is None:
        raise BackendError(f"unknown matrix backend {key!r}; expected one of {sorted(BACKENDS)}")
    try:
        backend = cls()
    except TypeError as e:
        # abstract primitives left unimplemented
        raise BackendError(f"matrix backend {key!r} is incomplete: {e}") from e
    logger.debug("Using %s matrix backend", backend.name)
    return backend
