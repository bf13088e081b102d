"""
coords/utils.py

WGS84 geodetic <-> earth-centered earth-fixed conversions.
"""

import numpy as np

NDARRAY_F64 = np.ndarray[tuple[int], np.dtype[np.float64]]
NDARRAY_2D_F64 = np.ndarray[tuple[int, int], np.dtype[np.float64]]

WGS84_rf = 298.257223563  # Reciprocal flattening (1/f)
WGS84_a = 6378137.0  # Earth semi-major axis (m)
WGS84_b = WGS84_a - WGS84_a / WGS84_rf  # Earth semi-minor axis derived from f = (a - b) / a


def make_3_tuple_array(arr: np.ndarray | list | tuple) -> NDARRAY_2D_F64:
    """
    Reshapes ndarray so that it has dimensions (N,3)
    """
    arr = np.asarray(arr, dtype=np.float64)
    if arr.ndim > 2 or arr.size < 3:
        raise ValueError(f"Expected (N,3) or (3,) coordinates, got shape {arr.shape}")
    if arr.shape[0] == 3:
        arr = arr.reshape((1, 3)) if arr.ndim == 1 else arr.T
    if arr.shape[1] != 3:
        raise ValueError(f"Expected (N,3) or (3,) coordinates, got shape {arr.shape}")
    return arr


def ecf2geo(
    x_ref: NDARRAY_2D_F64 | np.ndarray | list | tuple,
    max_iterations: int = 10,
    a: float = WGS84_a,
    b: float = WGS84_b,
    tolerance: float = 1e-10,
) -> NDARRAY_2D_F64:
    """Converts ecf coordinates to geodetic coordinates.

    Parameters
    ----------
    x_ref : an ndarray of N ecf coordinates with shape (N,3).
    max_iterations : the maximum number of iterations to use in the iterative solution

    Returns
    -------
    output : (N,3) ndarray
        geodetic coordinates in degrees and meters (lon, lat, alt)
    """
    x_ref = make_3_tuple_array(x_ref)

    x = x_ref[:, 0]
    y = x_ref[:, 1]
    z = x_ref[:, 2]
    p = np.sqrt(x**2 + y**2)

    # We must iteratively derive N
    lat = np.arctan2(z, p)
    h = np.zeros(len(lat))
    for i in range(max_iterations):
        N = a**2 / (np.sqrt(a**2 * np.cos(lat) ** 2 + b**2 * np.sin(lat) ** 2))
        N1 = N * (b / a) ** 2

        temp_h = p / np.cos(lat) - N
        temp_lat = np.arctan2(z / (N1 + temp_h), p / (N + temp_h))
        d_h = np.max(np.absolute(h - temp_h))
        d_lat = np.max(np.absolute(lat - temp_lat))

        h = temp_h
        lat = temp_lat
        if (d_h < tolerance) and (d_lat < tolerance):
            break

    lon = np.degrees(np.arctan2(y, x))
    lat = np.degrees(lat)

    return np.column_stack((lon, lat, h))


def geo2ecf(geo: np.ndarray | list | tuple, a: float = WGS84_a, b: float = WGS84_b) -> NDARRAY_2D_F64:
    """Converts geodetic coordinates to ecf coordinates

    Parameters
    ----------
    geo : ndarray of shape (N,3)
        geodetic coordinates (lon, lat, alt) in degrees and meters above WGS84 ellipsoid

    Returns
    -------
    output : ndarray of shape(N,3)
        ecf coordinates
    """
    geo = make_3_tuple_array(geo)
    lon = np.radians(geo[:, 0])
    lat = np.radians(geo[:, 1])
    h = geo[:, 2]

    N = a**2 / np.sqrt(a**2 * np.cos(lat) ** 2 + b**2 * np.sin(lat) ** 2)
    N1 = N * (b / a) ** 2

    x = (N + h) * np.cos(lat) * np.cos(lon)
    y = (N + h) * np.cos(lat) * np.sin(lon)
    z = (N1 + h) * np.sin(lat)

    return np.column_stack((x, y, z))
