# -- Teapot Mesh Aggregator -- #

'''
Tessellates every catalog patch at one shared resolution and concatenates
the results into single vertex, normal, and index buffers.

Patch i contributes rows*cols vertices starting at vertex i*rows*cols, so
its local triangle indices are offset by that amount before they are
appended. The resulting buffers are what a renderer uploads directly:

    numVertices  = 32 * rows * cols
    numTriangles = 32 * 2 * (rows - 1) * (cols - 1)

Nothing here is cached; every call recomputes from the constant catalog.

Sean Bowman [10/19/2026]
'''

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from TeapotMesh import constants as const
from TeapotMesh.geometry.bezierPatch import evaluatePatch
from TeapotMesh.geometry.controlPoints import getControlPoints
from TeapotMesh.geometry.resolution import Resolution, validateResolution


######################################################################
# -- Mesh Buffers -- #
######################################################################

@dataclass
class TeapotGeometry:
    '''
    Combined geometry buffers for a set of tessellated patches.

    Flat arrays in renderer layout; the (N, 3) properties are views
    onto the same memory.
    '''

    rows: int
    cols: int
    numPatches: int

    # Vertex positions, 3 reals per vertex
    vertices: np.ndarray

    # Unit vertex normals, 3 reals per vertex
    normals: np.ndarray

    # Triangle indices into the combined vertex buffer, 3 per triangle
    indices: np.ndarray

    @property
    def numComponents(self) -> int:
        return const.numComponents

    @property
    def numVertices(self) -> int:
        return len(self.vertices) // const.numComponents

    @property
    def numTriangles(self) -> int:
        return len(self.indices) // 3

    @property
    def resolution(self) -> Resolution:
        return Resolution(self.rows, self.cols)

    @property
    def positions(self) -> np.ndarray:
        return self.vertices.reshape(-1, const.numComponents)

    @property
    def vertexNormals(self) -> np.ndarray:
        return self.normals.reshape(-1, const.numComponents)

    @property
    def triangles(self) -> np.ndarray:
        return self.indices.reshape(-1, 3)

    def bounds(self) -> tuple[np.ndarray, np.ndarray]:
        '''
        Axis-aligned bounds of the vertex positions.

        Returns:
        --------
        tuple[np.ndarray, np.ndarray] : (mins, maxs), each shape (3,)
        '''
        return self.positions.min(axis=0), self.positions.max(axis=0)

    def toDict(self) -> dict:
        '''
        Plain-Python view of the buffers and counts.

        Returns:
        --------
        dict : Keys vertices, normals, indices (lists), numComponents,
            numVertices, numTriangles, rows, cols
        '''
        return {
            'rows': self.rows,
            'cols': self.cols,
            'numComponents': self.numComponents,
            'numVertices': self.numVertices,
            'numTriangles': self.numTriangles,
            'vertices': self.vertices.tolist(),
            'normals': self.normals.tolist(),
            'indices': self.indices.tolist(),
        }


######################################################################
# -- Aggregation -- #
######################################################################

def tessellatePatches(patches, rows: int, cols: int) -> TeapotGeometry:
    '''
    Tessellate a sequence of patches into one set of buffers.

    Parameters:
    -----------
    patches : array-like
        Control-point grids, shape (nPatches, 4, 4, 3)
    rows : int
        Samples along v per patch (>= 2)
    cols : int
        Samples along u per patch (>= 2)

    Returns:
    --------
    TeapotGeometry : Concatenated buffers with globally valid indices

    Raises:
    -------
    InvalidResolutionError : If rows or cols is not an integer >= 2
    '''
    validateResolution(rows, cols)

    nPatches = len(patches)
    vertsPerPatch = rows * cols
    indicesPerPatch = 6 * (rows - 1) * (cols - 1)
    floatsPerPatch = vertsPerPatch * const.numComponents

    vertices = np.empty(nPatches * floatsPerPatch, dtype=np.float64)
    normals = np.empty(nPatches * floatsPerPatch, dtype=np.float64)
    indices = np.empty(nPatches * indicesPerPatch, dtype=np.int64)

    for i, patch in enumerate(patches):
        tessellated = evaluatePatch(patch, rows, cols)

        floatStart = i * floatsPerPatch
        vertices[floatStart:floatStart + floatsPerPatch] = tessellated.vertices
        normals[floatStart:floatStart + floatsPerPatch] = tessellated.normals

        # Shift local vertex numbers past every earlier patch's vertices
        indexStart = i * indicesPerPatch
        indices[indexStart:indexStart + indicesPerPatch] = (
            tessellated.indices + i * vertsPerPatch
        )

    return TeapotGeometry(
        rows=rows,
        cols=cols,
        numPatches=nPatches,
        vertices=vertices,
        normals=normals,
        indices=indices,
    )


def generateTeapot(rows: int, cols: int) -> TeapotGeometry:
    '''
    Tessellate all 32 teapot patches at the given resolution.

    Parameters:
    -----------
    rows : int
        Samples along v per patch (>= 2)
    cols : int
        Samples along u per patch (>= 2)

    Returns:
    --------
    TeapotGeometry : Buffers for the whole teapot, patch 0 first
    '''
    return tessellatePatches(getControlPoints(), rows, cols)


def getGeometry(resolution: Optional[Resolution] = None) -> TeapotGeometry:
    '''
    Teapot geometry at the displayed-model resolution.

    Parameters:
    -----------
    resolution : Resolution, optional
        Override for the default 10 x 13 sampling

    Returns:
    --------
    TeapotGeometry : Buffers plus numComponents, numVertices, numTriangles
    '''
    if resolution is None:
        resolution = Resolution.production()
    return generateTeapot(resolution.rows, resolution.cols)
