#!/usr/bin/env python3
"""
Covariance Analysis with Cholesky and Eigendecomposition
========================================================

This example estimates the covariance matrix of correlated multivariate data
and then uses the two symmetrix factorizations the way a statistics layer
would:

- Cholesky: the log-determinant of the covariance (for the Gaussian
  log-likelihood), Mahalanobis distances via ``solve``, and an ordinary
  least-squares fit through the normal equations.
- Eigendecomposition: principal components, sorted by descending variance,
  and a check that the component variances add up to the total variance.

Mathematical Background:
For a sample covariance S = L Lᵗ, the squared Mahalanobis distance of a
centered sample x is xᵗ S⁻¹ x, computed as the dot product of x with the
solution of S y = x. The eigenvalues of S are the variances along the
principal axes, and their sum equals trace(S).
"""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

import symmetrix as sx


def generate_correlated_data(seed=123, n_samples=500):
    """Draw samples from a zero-mean Gaussian with a known covariance."""
    rng = np.random.default_rng(seed)
    true_cov = np.array([
        [1.0, 0.6, 0.2, 0.1],
        [0.6, 1.5, 0.3, 0.0],
        [0.2, 0.3, 0.8, 0.4],
        [0.1, 0.0, 0.4, 1.2],
    ])
    data = rng.multivariate_normal(np.zeros(4), true_cov, size=n_samples)
    return data, true_cov


def sample_covariance(data):
    """Unbiased sample covariance as a SymmetricMatrix."""
    centered = data - data.mean(axis=0)
    n_samples, n_features = data.shape
    return sx.SymmetricMatrix.from_generator(
        n_features, lambda r, c: float(centered[:, r] @ centered[:, c]) / (n_samples - 1)
    )


def mahalanobis_distances(cholesky, data):
    """Squared Mahalanobis distance of every centered sample."""
    centered = data - data.mean(axis=0)
    distances = []
    for x in centered:
        y = cholesky.solve(x)
        distances.append(sx.RowVector(x) @ y)
    return np.array(distances)


def least_squares_fit(features, targets):
    """Solve the normal equations (Xᵗ X) β = Xᵗ y by Cholesky."""
    design = np.column_stack([np.ones(features.shape[0]), features])
    gram = sx.SymmetricMatrix.from_generator(design.shape[1], lambda r, c: float(design[:, r] @ design[:, c]))
    return gram.cholesky_decomposition().solve(design.T @ targets)


def demonstrate_covariance_analysis():
    """Main demonstration."""
    print("=" * 70)
    print("Covariance Analysis with symmetrix")
    print("=" * 70)

    data, true_cov = generate_correlated_data()
    S = sample_covariance(data)
    print(f"Dataset: {data.shape[0]} samples, {data.shape[1]} features")
    print(f"Sample covariance:\n{S.to_array()}")
    print()

    # Cholesky: determinant and Mahalanobis distances
    CD = S.cholesky_decomposition()
    print(f"log det(S) = {CD.log_determinant():.6f} (true: {np.log(np.linalg.det(true_cov)):.6f})")
    d2 = mahalanobis_distances(CD, data)
    print(f"Mean squared Mahalanobis distance: {d2.mean():.4f} (expected about {S.dimension})")
    print()

    # Least squares: predict feature 0 from the others
    beta = least_squares_fit(data[:, 1:], data[:, 0])
    print(f"OLS coefficients for feature 0: {list(beta)}")
    print()

    # Eigendecomposition: principal components
    E = S.eigendecomposition()
    pairs = E.eigenpairs
    pairs.sort(sx.OrderBy.VALUE_DESCENDING)
    variances = np.array([pair.eigenvalue for pair in pairs])
    explained = variances / S.trace()
    print("Principal components (descending variance):")
    for i, pair in enumerate(pairs):
        print(f"  PC{i + 1}: variance {pair.eigenvalue:.4f}, direction {np.round(list(pair.eigenvector), 3)}")
    print(f"Sum of variances {variances.sum():.6f} vs trace {S.trace():.6f}")
    print(f"QL sweeps used: {E.iterations}")
    print()

    create_covariance_plots(explained, d2, S.dimension)


def create_covariance_plots(explained, d2, dimension):
    """Plot explained variance and the Mahalanobis distance distribution."""
    output_dir = Path("examples/output")
    output_dir.mkdir(parents=True, exist_ok=True)

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))

    labels = [f"PC{i + 1}" for i in range(len(explained))]
    ax1.bar(labels, explained, alpha=0.7)
    ax1.plot(labels, np.cumsum(explained), "o-", color="tab:red", label="cumulative")
    ax1.set_title("Explained Variance")
    ax1.set_ylabel("Fraction of total variance")
    ax1.legend()
    ax1.grid(True, alpha=0.3)

    ax2.hist(d2, bins=40, density=True, alpha=0.7)
    ax2.axvline(dimension, color="tab:red", linestyle="--", label=f"mean of chi-squared({dimension})")
    ax2.set_title("Squared Mahalanobis Distances")
    ax2.set_xlabel("d²")
    ax2.legend()
    ax2.grid(True, alpha=0.3)

    plt.tight_layout()
    output_path = output_dir / "covariance_analysis.png"
    plt.savefig(output_path, dpi=150, bbox_inches="tight")
    print(f"Visualization saved to: {output_path}")
    plt.show()


if __name__ == "__main__":
    demonstrate_covariance_analysis()
