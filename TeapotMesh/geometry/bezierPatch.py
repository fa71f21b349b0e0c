# -- Bicubic Bezier Patch Evaluator -- #

'''
Evaluates a single bicubic Bezier patch on a uniform parameter grid.

For a patch with control points P[a][b] (a = row along v, b = column
along u), the surface and its partial derivatives are

    S(u, v)     = sum_a sum_b  B_a(v)  B_b(u)  P[a][b]
    dS/dv       = sum_a sum_b  B'_a(v) B_b(u)  P[a][b]
    dS/du       = sum_a sum_b  B_a(v)  B'_b(u) P[a][b]

with the cubic Bernstein basis

    B(t)  = [(1-t)^3, 3(1-t)^2 t, 3(1-t) t^2, t^3]
    B'(t) = [-3(1-t)^2, 3(1 - 4t + 3t^2), 3(2t - 3t^2), 3t^2]

Both tangents are normalized and the vertex normal is
normalize(cross(dS/du, dS/dv)). That orientation agrees with the
triangle winding produced by triangulateGrid(), whose first triangle in
each cell runs +u then +v.

All sampling is vectorized: the basis rows for every v and every u are
built once and contracted against the control grid with einsum.

Sean Bowman [10/19/2026]
'''

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from TeapotMesh import constants as const
from TeapotMesh.geometry.resolution import validateResolution


######################################################################
# -- Tessellated Patch -- #
######################################################################

@dataclass
class TessellatedPatch:
    '''
    Geometry for one patch at one resolution.

    All arrays are flat and use local (per-patch) vertex numbering:
    vertex (r, c) lives at slot r * cols + c.
    '''

    rows: int
    cols: int

    # Vertex positions, length rows * cols * 3
    vertices: np.ndarray

    # Unit vertex normals, same length and order as vertices
    normals: np.ndarray

    # Triangle indices, length 6 * (rows - 1) * (cols - 1)
    indices: np.ndarray

    @property
    def numVertices(self) -> int:
        return self.rows * self.cols

    @property
    def numTriangles(self) -> int:
        return len(self.indices) // 3

    @property
    def positions(self) -> np.ndarray:
        '''Vertex positions as an (N, 3) view.'''
        return self.vertices.reshape(-1, const.numComponents)

    @property
    def vertexNormals(self) -> np.ndarray:
        '''Vertex normals as an (N, 3) view.'''
        return self.normals.reshape(-1, const.numComponents)

    @property
    def triangles(self) -> np.ndarray:
        '''Triangle indices as an (F, 3) view.'''
        return self.indices.reshape(-1, 3)


######################################################################
# -- Bernstein Basis -- #
######################################################################

def bernsteinBasis(t) -> np.ndarray:
    '''
    Cubic Bernstein basis values.

    Parameters:
    -----------
    t : float or array-like
        Parameter value(s) in [0, 1]

    Returns:
    --------
    np.ndarray : Shape (len(t), 4), one basis row per parameter
    '''
    t = np.atleast_1d(np.asarray(t, dtype=np.float64))
    mt = 1.0 - t
    return np.stack([mt * mt * mt, 3.0 * mt * mt * t, 3.0 * mt * t * t, t * t * t], axis=-1)


def bernsteinDerivative(t) -> np.ndarray:
    '''
    First derivatives of the cubic Bernstein basis.

    Parameters:
    -----------
    t : float or array-like
        Parameter value(s) in [0, 1]

    Returns:
    --------
    np.ndarray : Shape (len(t), 4), one derivative row per parameter
    '''
    t = np.atleast_1d(np.asarray(t, dtype=np.float64))
    t2 = t * t
    return np.stack([
        -3.0 + 6.0 * t - 3.0 * t2,
        3.0 * (1.0 - 4.0 * t + 3.0 * t2),
        3.0 * (2.0 * t - 3.0 * t2),
        3.0 * t2,
    ], axis=-1)


######################################################################
# -- Surface Evaluation -- #
######################################################################

def _asControlGrid(controlPoints) -> np.ndarray:
    grid = np.asarray(controlPoints, dtype=np.float64)
    expected = (const.patchOrder, const.patchOrder, const.numComponents)
    if grid.shape != expected:
        raise ValueError(
            f'Patch control points have shape {grid.shape}, expected {expected}'
        )
    return grid


def _evaluateGrid(
    grid: np.ndarray, u: np.ndarray, v: np.ndarray
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    '''
    Surface points and raw tangents on the tensor grid v x u.

    Parameters:
    -----------
    grid : np.ndarray
        Control points, shape (4, 4, 3)
    u : np.ndarray
        Column parameters, shape (nc,)
    v : np.ndarray
        Row parameters, shape (nr,)

    Returns:
    --------
    tuple[np.ndarray, np.ndarray, np.ndarray] :
        (points, dS/dv, dS/du), each shape (nr, nc, 3)
    '''
    basisV = bernsteinBasis(v)
    basisU = bernsteinBasis(u)
    derivV = bernsteinDerivative(v)
    derivU = bernsteinDerivative(u)

    points = np.einsum('ra,cb,abk->rck', basisV, basisU, grid)
    alongV = np.einsum('ra,cb,abk->rck', derivV, basisU, grid)
    alongU = np.einsum('ra,cb,abk->rck', basisV, derivU, grid)
    return points, alongV, alongU


def _normalize(vectors: np.ndarray, minLength: float) -> np.ndarray:
    '''Normalize along the last axis; vectors shorter than minLength become zero.'''
    lengths = np.linalg.norm(vectors, axis=-1, keepdims=True)
    out = np.zeros_like(vectors)
    np.divide(vectors, lengths, out=out, where=lengths > minLength)
    return out


def _normalsFromTangents(
    alongV: np.ndarray, alongU: np.ndarray, minLength: float
) -> np.ndarray:
    t1 = _normalize(alongV, minLength)
    t2 = _normalize(alongU, minLength)
    return _normalize(np.cross(t2, t1), const.degenerateLength)


def _nudgedNormal(grid: np.ndarray, u: float, v: float, minLength: float) -> np.ndarray:
    '''
    Normal just inside the patch from (u, v).

    Used where the tangents vanish, e.g. on a row of control points that
    collapses to a single pole. The step keeps the sample on the patch.
    '''
    step = const.degenerateNudge
    uIn = u + step if u < 0.5 else u - step
    vIn = v + step if v < 0.5 else v - step
    _, alongV, alongU = _evaluateGrid(grid, np.array([uIn]), np.array([vIn]))
    normal = _normalsFromTangents(alongV, alongU, minLength)[0, 0]
    if not np.any(normal):
        return np.array([0.0, 0.0, 1.0])
    return normal


def evaluateSurfacePoint(controlPoints, u: float, v: float) -> np.ndarray:
    '''
    Evaluate a single point on a patch.

    Parameters:
    -----------
    controlPoints : array-like
        4x4 grid of 3D control points, indexed [row][col]
    u : float
        Column parameter in [0, 1]
    v : float
        Row parameter in [0, 1]

    Returns:
    --------
    np.ndarray : Surface point, shape (3,)
    '''
    grid = _asControlGrid(controlPoints)
    points, _, _ = _evaluateGrid(grid, np.array([u]), np.array([v]))
    return points[0, 0]


######################################################################
# -- Triangulation -- #
######################################################################

def triangulateGrid(rows: int, cols: int) -> np.ndarray:
    '''
    Triangle indices for a rows x cols vertex grid.

    Each cell (r, c) emits two triangles, in row-major cell order:
        (r*cols+c, r*cols+c+1, (r+1)*cols+c+1)
        (r*cols+c, (r+1)*cols+c+1, (r+1)*cols+c)

    Parameters:
    -----------
    rows : int
        Vertex rows (>= 2)
    cols : int
        Vertex columns (>= 2)

    Returns:
    --------
    np.ndarray : Flat int64 array of length 6 * (rows-1) * (cols-1)
    '''
    validateResolution(rows, cols)

    r, c = np.meshgrid(np.arange(rows - 1), np.arange(cols - 1), indexing='ij')
    corner = (r * cols + c).ravel()
    right = corner + 1
    diagonal = corner + cols + 1
    below = corner + cols

    cells = np.stack([corner, right, diagonal, corner, diagonal, below], axis=1)
    return cells.ravel().astype(np.int64)


######################################################################
# -- Patch Tessellation -- #
######################################################################

def evaluatePatch(controlPoints, rows: int, cols: int) -> TessellatedPatch:
    '''
    Tessellate one bicubic Bezier patch.

    Samples v = r/(rows-1) for each row and u = c/(cols-1) for each
    column, evaluates the surface point and unit normal at every sample,
    and stitches the grid into triangles.

    Parameters:
    -----------
    controlPoints : array-like
        4x4 grid of 3D control points, indexed [row][col]
    rows : int
        Samples along v (>= 2)
    cols : int
        Samples along u (>= 2)

    Returns:
    --------
    TessellatedPatch : Flat vertices, normals, and local triangle indices

    Raises:
    -------
    InvalidResolutionError : If rows or cols is not an integer >= 2
    '''
    validateResolution(rows, cols)
    grid = _asControlGrid(controlPoints)

    v = np.arange(rows, dtype=np.float64) / (rows - 1)
    u = np.arange(cols, dtype=np.float64) / (cols - 1)

    points, alongV, alongU = _evaluateGrid(grid, u, v)

    # Tangent lengths below this are numerical noise on a collapsed edge
    minLength = const.degenerateLength * max(1.0, float(np.abs(grid).max()))
    normals = _normalsFromTangents(alongV, alongU, minLength)

    # Poles and other degenerate samples come back as zero vectors
    degenerate = ~np.any(normals, axis=-1)
    for r, c in np.argwhere(degenerate):
        normals[r, c] = _nudgedNormal(grid, float(u[c]), float(v[r]), minLength)

    return TessellatedPatch(
        rows=rows,
        cols=cols,
        vertices=points.reshape(-1),
        normals=normals.reshape(-1),
        indices=triangulateGrid(rows, cols),
    )
