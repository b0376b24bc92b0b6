"""
Applying a candidate 4x4 transform to target positions before scoring.
"""
import numpy as np


def validate_transform(T) -> np.ndarray:
    """
    Returns T as a float64 4x4 array.

    Raises:
        ValueError: if T is not 4x4 or holds non-finite values
    """
    matrix = np.asarray(T, dtype=np.float64)
    if matrix.shape != (4, 4):
        raise ValueError(f"Transform must be 4x4, got shape {matrix.shape}")
    if not np.all(np.isfinite(matrix)):
        raise ValueError("Transform contains non-finite values")
    return matrix


def transform_positions(positions: np.ndarray, T: np.ndarray) -> np.ndarray:
    """
    Moves (N, 3+) positions by a 4x4 homogeneous transform.

    Each position p is lifted to (x, y, z, 1) and multiplied by T; the first
    three coordinates of T @ p are the result. The bottom row of T does not
    affect them. Columns past the third are ignored.

    Args:
        positions: (N, 3+) array, left untouched
        T: 4x4 transformation matrix

    Returns:
        New (N, 3) float64 array
    """
    xyz = np.asarray(positions, dtype=np.float64)[:, :3]
    homogeneous = np.hstack([xyz, np.ones((len(xyz), 1))])
    return homogeneous @ T[:3, :].T
