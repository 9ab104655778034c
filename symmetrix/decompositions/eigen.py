"""Symmetric Eigendecomposition Engine.

A real symmetric matrix A is diagonalized in two stages:

1. Householder reduction to tridiagonal form T = Qᵗ A Q, accumulating the
   product of reflections into Q.
2. Implicit-shift QL iteration on T, driving the off-diagonal entries below
   the tolerance of an :class:`EvaluationSettings`, while the plane rotations
   are accumulated into V (initialized to Q).

The resulting diagonal holds the eigenvalues in deflation order, which carries
no guarantee of being sorted by value or magnitude. Call
:meth:`RealEigenpairCollection.sort` to impose an order explicitly.
"""

import dataclasses
import logging
import math
from collections.abc import Sequence
from enum import Enum

import numpy as np

from ..core.errors import ConvergenceError
from ..core.settings import DEFAULT_SETTINGS, EvaluationSettings
from ..core.type_system import DenseArray, VectorArray
from ..matrices.dense import ColumnVector, SquareMatrix
from ..matrices.symmetric import SymmetricMatrix

logger = logging.getLogger(__name__)


class OrderBy(Enum):
    """Sort policies for a :class:`RealEigenpairCollection`."""

    VALUE_ASCENDING = "value_ascending"
    VALUE_DESCENDING = "value_descending"
    MAGNITUDE_ASCENDING = "magnitude_ascending"
    MAGNITUDE_DESCENDING = "magnitude_descending"


@dataclasses.dataclass(frozen=True)
class RealEigenpair:
    """An eigenvalue together with its unit-norm eigenvector.

    Attributes:
        eigenvalue: The eigenvalue λ.
        eigenvector: A column vector v with A v = λ v. Each access to a
            collection yields a fresh copy, so mutating it does not affect the
            decomposition.
    """

    eigenvalue: float
    eigenvector: ColumnVector


class RealEigenpairCollection(Sequence):
    """Re-orderable sequence of eigenpairs.

    The collection keeps a permutation of the pair indices. Sorting rearranges
    the permutation only; eigenvalues and eigenvectors are never recomputed, so
    the pairing of each eigenvalue with its eigenvector survives any sequence
    of sorts.
    """

    def __init__(self, eigenvalues: VectorArray, eigenvectors: DenseArray) -> None:
        self._eigenvalues = eigenvalues.copy()
        self._eigenvectors = eigenvectors.copy()
        self._order = list(range(len(eigenvalues)))

    def __len__(self) -> int:
        return len(self._order)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self._pair(k) for k in self._order[index]]
        return self._pair(self._order[index])

    def _pair(self, k: int) -> RealEigenpair:
        return RealEigenpair(
            eigenvalue=float(self._eigenvalues[k]),
            eigenvector=ColumnVector._from_array(self._eigenvectors[:, k].copy()),
        )

    def sort(self, order: OrderBy) -> None:
        """Reorder the pairs in place; descending orders reverse the stable ascending order.

        Args:
            order: The sort policy.

        Raises:
            TypeError: If ``order`` is not an :class:`OrderBy` member.
        """
        if not isinstance(order, OrderBy):
            raise TypeError(f"order must be an OrderBy member, got {order!r}")
        values = self._eigenvalues
        if order in (OrderBy.VALUE_ASCENDING, OrderBy.VALUE_DESCENDING):
            key = lambda k: values[k]  # noqa: E731
        else:
            key = lambda k: abs(values[k])  # noqa: E731
        # Descending orders are the exact reverse of the stable ascending order,
        # ties included.
        self._order.sort(key=key)
        if order in (OrderBy.VALUE_DESCENDING, OrderBy.MAGNITUDE_DESCENDING):
            self._order.reverse()

    def __repr__(self) -> str:
        return f"RealEigenpairCollection({[float(self._eigenvalues[k]) for k in self._order]!r})"


def _tridiagonalize(values: DenseArray) -> tuple[VectorArray, VectorArray, DenseArray]:
    """Reduce a symmetric array to tridiagonal form by Householder reflections.

    Returns:
        Tuple (d, e, q) where d is the diagonal, e[i] the entry coupling rows i
        and i + 1 (with e[n - 1] = 0), and q the accumulated orthogonal matrix
        such that qᵗ A q is the tridiagonal matrix.
    """
    a = values.copy()
    n = a.shape[0]
    q = np.eye(n, dtype=np.float64)
    reflections = 0
    for k in range(n - 2):
        # Scale the column so that squaring its entries cannot underflow.
        scale = float(np.sum(np.abs(a[k + 1 :, k])))
        if scale == 0.0:
            continue
        v = a[k + 1 :, k] / scale
        v[0] += math.copysign(float(np.linalg.norm(v)), v[0])
        v /= np.linalg.norm(v)
        a[k + 1 :, k:] -= 2.0 * np.outer(v, v @ a[k + 1 :, k:])
        a[k:, k + 1 :] -= 2.0 * np.outer(a[k:, k + 1 :] @ v, v)
        q[:, k + 1 :] -= 2.0 * np.outer(q[:, k + 1 :] @ v, v)
        reflections += 1
    d = np.diag(a).copy()
    e = np.zeros(n, dtype=np.float64)
    e[: n - 1] = np.diag(a, -1)
    logger.debug(f"Tridiagonalized {n} x {n} matrix with {reflections} reflections")
    return d, e, q


def _diagonalize(d: VectorArray, e: VectorArray, v: DenseArray, settings: EvaluationSettings) -> int:
    """Diagonalize a symmetric tridiagonal matrix by implicit-shift QL iteration.

    ``d`` is overwritten with the eigenvalues, ``e`` with zeros, and the plane
    rotations are accumulated into the columns of ``v``.

    Returns:
        Total number of QL sweeps performed.

    Raises:
        ConvergenceError: If an eigenvalue is not isolated within
            ``settings.max_iterations`` sweeps.
    """
    n = d.shape[0]
    shift = 0.0
    tst1 = 0.0
    total = 0
    for l in range(n):  # noqa: E741
        tst1 = max(tst1, abs(d[l]) + abs(e[l]))
        # Find the first negligible off-diagonal entry; e[n - 1] == 0 stops the scan.
        m = l
        while m < n - 1 and abs(e[m]) > settings.tolerance(tst1):
            m += 1

        sweeps = 0
        while m > l:
            sweeps += 1
            if sweeps > settings.max_iterations:
                raise ConvergenceError(
                    f"QL iteration did not isolate eigenvalue {l} in {settings.max_iterations} sweeps",
                    max_iterations=settings.max_iterations,
                    final_error=float(abs(e[l])),
                    tolerance=settings.tolerance(tst1),
                )

            # Wilkinson-style shift from the leading 2 x 2 block.
            g = d[l]
            p = (d[l + 1] - g) / (2.0 * e[l])
            r = math.hypot(p, 1.0)
            if p < 0:
                r = -r
            d[l] = e[l] / (p + r)
            d[l + 1] = e[l] * (p + r)
            dl1 = d[l + 1]
            h = g - d[l]
            d[l + 2 :] -= h
            shift += h

            # Implicit QL sweep from m - 1 down to l.
            p = d[m]
            c = c2 = c3 = 1.0
            el1 = e[l + 1]
            s = s2 = 0.0
            for i in range(m - 1, l - 1, -1):
                c3 = c2
                c2 = c
                s2 = s
                g = c * e[i]
                h = c * p
                r = math.hypot(p, e[i])
                e[i + 1] = s * r
                s = e[i] / r
                c = p / r
                p = c * d[i] - s * g
                d[i + 1] = h + s * (c * g + s * d[i])
                right = v[:, i + 1].copy()
                v[:, i + 1] = s * v[:, i] + c * right
                v[:, i] = c * v[:, i] - s * right
            p = -s * s2 * c3 * el1 * e[l] / dl1
            e[l] = s * p
            d[l] = c * p

            if abs(e[l]) <= settings.tolerance(tst1):
                break

        d[l] += shift
        e[l] = 0.0
        total += sweeps
    logger.debug(f"QL iteration diagonalized {n} x {n} tridiagonal matrix in {total} sweeps")
    return total


class RealEigendecomposition:
    """Eigendecomposition A = V D Vᵗ of a real symmetric matrix.

    V (the transform matrix) is orthogonal; its columns are the unit-norm
    eigenvectors. D (the diagonalized matrix) carries the eigenvalues on its
    diagonal, in the order produced by the iteration.

    Examples:
        >>> S = SymmetricMatrix.from_array([[2.0, 1.0], [1.0, 2.0]])
        >>> E = RealEigendecomposition(S)
        >>> sorted(round(x, 12) for x in E.eigenvalues())
        [1.0, 3.0]
    """

    def __init__(self, matrix: SymmetricMatrix, settings: EvaluationSettings | None = None) -> None:
        """Diagonalize ``matrix``.

        Args:
            matrix: Symmetric matrix to diagonalize. Only read; a snapshot is taken.
            settings: Convergence tolerance and per-eigenvalue sweep budget.
                Defaults to machine precision relative to the tridiagonal norm.

        Raises:
            TypeError: If ``matrix`` is not a SymmetricMatrix.
            ValueError: If ``matrix`` has dimension zero.
            ConvergenceError: If the iteration budget is exhausted.
        """
        if not isinstance(matrix, SymmetricMatrix):
            raise TypeError(f"Eigendecomposition requires a SymmetricMatrix, got {type(matrix).__name__}")
        if matrix.dimension < 1:
            raise ValueError("Eigendecomposition requires a matrix of dimension at least 1")
        self._settings = settings if settings is not None else DEFAULT_SETTINGS

        d, e, v = _tridiagonalize(matrix.to_array())
        self._iterations = _diagonalize(d, e, v, self._settings)
        self._eigenvalues = d
        self._eigenvectors = v

    @property
    def dimension(self) -> int:
        return int(self._eigenvalues.shape[0])

    @property
    def iterations(self) -> int:
        """Total number of QL sweeps used."""
        return self._iterations

    @property
    def settings(self) -> EvaluationSettings:
        return self._settings

    @property
    def eigenpairs(self) -> RealEigenpairCollection:
        """A fresh collection of the eigenpairs, in iteration order."""
        return RealEigenpairCollection(self._eigenvalues, self._eigenvectors)

    def eigenvalues(self) -> list[float]:
        """Eigenvalues in iteration order."""
        return [float(x) for x in self._eigenvalues]

    @property
    def diagonalized_matrix(self) -> SquareMatrix:
        """D, the diagonal matrix of eigenvalues."""
        return SquareMatrix._from_array(np.diag(self._eigenvalues))

    @property
    def transform_matrix(self) -> SquareMatrix:
        """V, the orthogonal matrix whose columns are the eigenvectors."""
        return SquareMatrix._from_array(self._eigenvectors.copy())
