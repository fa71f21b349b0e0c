# -- Bezier Patch Evaluator Tests -- #

import numpy as np
import pytest

from TeapotMesh.geometry.bezierPatch import (
    TessellatedPatch,
    bernsteinBasis,
    bernsteinDerivative,
    evaluatePatch,
    evaluateSurfacePoint,
    triangulateGrid,
)
from TeapotMesh.geometry.controlPoints import getPatch
from TeapotMesh.geometry.resolution import InvalidResolutionError

TOL = 1e-6


def planarPatch() -> np.ndarray:
    '''Control net of the unit square z=0, spaced evenly so S(u, v) = (u, v, 0).'''
    grid = np.zeros((4, 4, 3))
    for a in range(4):
        for b in range(4):
            grid[a, b] = [b / 3.0, a / 3.0, 0.0]
    return grid


class TestBernstein:

    def testEndpoints(self):
        np.testing.assert_array_equal(bernsteinBasis(0.0)[0], [1.0, 0.0, 0.0, 0.0])
        np.testing.assert_array_equal(bernsteinBasis(1.0)[0], [0.0, 0.0, 0.0, 1.0])

    def testMidpoint(self):
        np.testing.assert_allclose(bernsteinBasis(0.5)[0], [0.125, 0.375, 0.375, 0.125])
        np.testing.assert_allclose(bernsteinDerivative(0.5)[0], [-0.75, -0.75, 0.75, 0.75])

    def testPartitionOfUnity(self):
        t = np.linspace(0.0, 1.0, 17)
        np.testing.assert_allclose(bernsteinBasis(t).sum(axis=1), 1.0, atol=1e-12)
        np.testing.assert_allclose(bernsteinDerivative(t).sum(axis=1), 0.0, atol=1e-12)

    def testDerivativeMatchesFiniteDifference(self):
        h = 1e-6
        t = np.array([0.1, 0.3, 0.65, 0.9])
        numeric = (bernsteinBasis(t + h) - bernsteinBasis(t - h)) / (2 * h)
        np.testing.assert_allclose(bernsteinDerivative(t), numeric, atol=1e-6)

    def testVectorShape(self):
        assert bernsteinBasis(np.linspace(0, 1, 7)).shape == (7, 4)
        assert bernsteinDerivative(0.2).shape == (1, 4)


class TestTriangulation:

    def testSingleCell(self):
        np.testing.assert_array_equal(triangulateGrid(2, 2), [0, 1, 3, 0, 3, 2])

    def testCellOrderIsRowMajor(self):
        indices = triangulateGrid(3, 4)
        assert len(indices) == 6 * 2 * 3
        # Cell (r=1, c=0) is the fourth cell
        np.testing.assert_array_equal(indices[18:24], [4, 5, 9, 4, 9, 8])
        # Last cell (r=1, c=2)
        np.testing.assert_array_equal(indices[-6:], [6, 7, 11, 6, 11, 10])

    def testEveryVertexReferenced(self):
        indices = triangulateGrid(5, 6)
        assert indices.min() == 0
        assert indices.max() == 5 * 6 - 1
        assert np.unique(indices).size == 5 * 6

    def testInvalid(self):
        with pytest.raises(InvalidResolutionError):
            triangulateGrid(1, 4)


class TestEvaluatePatch:

    def testOutputLengths(self):
        result = evaluatePatch(getPatch(0), 7, 13)
        assert isinstance(result, TessellatedPatch)
        assert len(result.vertices) == 7 * 13 * 3
        assert len(result.normals) == 7 * 13 * 3
        assert len(result.indices) == 6 * 6 * 12
        assert result.numVertices == 91
        assert result.numTriangles == 2 * 6 * 12

    def testPlanarPatchSamplesParameterGrid(self):
        rows, cols = 4, 6
        result = evaluatePatch(planarPatch(), rows, cols)
        for r in range(rows):
            for c in range(cols):
                np.testing.assert_allclose(
                    result.positions[r * cols + c],
                    [c / (cols - 1), r / (rows - 1), 0.0],
                    atol=1e-12,
                )

    def testNormalIsCrossOfUTangentWithVTangent(self):
        # dS/du = +x, dS/dv = +y, so cross(dS/du, dS/dv) = +z
        result = evaluatePatch(planarPatch(), 3, 3)
        np.testing.assert_allclose(result.vertexNormals, np.tile([0.0, 0.0, 1.0], (9, 1)), atol=1e-12)

    def testWindingMatchesNormals(self):
        result = evaluatePatch(planarPatch(), 3, 5)
        p = result.positions
        for a, b, c in result.triangles:
            face = np.cross(p[b] - p[a], p[c] - p[a])
            assert face[2] > 0

    def testCornersInterpolateControlPoints(self):
        grid = getPatch(4)
        rows, cols = 5, 7
        p = evaluatePatch(grid, rows, cols).positions
        np.testing.assert_allclose(p[0], grid[0, 0], atol=1e-12)
        np.testing.assert_allclose(p[cols - 1], grid[0, 3], atol=1e-12)
        np.testing.assert_allclose(p[(rows - 1) * cols], grid[3, 0], atol=1e-12)
        np.testing.assert_allclose(p[-1], grid[3, 3], atol=1e-12)

    def testMatchesSinglePointEvaluation(self):
        grid = getPatch(13)
        rows, cols = 4, 5
        p = evaluatePatch(grid, rows, cols).positions
        for r in range(rows):
            for c in range(cols):
                point = evaluateSurfacePoint(grid, c / (cols - 1), r / (rows - 1))
                np.testing.assert_allclose(p[r * cols + c], point, atol=1e-12)

    @pytest.mark.parametrize('index', range(32))
    def testNormalsAreUnitLength(self, index):
        normals = evaluatePatch(getPatch(index), 7, 13).vertexNormals
        assert np.all(np.isfinite(normals))
        np.testing.assert_allclose(np.linalg.norm(normals, axis=1), 1.0, atol=TOL)

    def testLidApexNormalIsVertical(self):
        normals = evaluatePatch(getPatch(20), 7, 13).vertexNormals
        # First row is the collapsed apex; the lid top is flat there
        assert np.all(np.abs(normals[:13, 2]) > 0.99)

    def testBottomCenterNormalIsVertical(self):
        normals = evaluatePatch(getPatch(28), 7, 13).vertexNormals
        assert np.all(np.abs(normals[:13, 2]) > 0.99)

    def testFullyCollapsedPatchStillGivesUnitNormals(self):
        result = evaluatePatch(np.ones((4, 4, 3)), 3, 3)
        np.testing.assert_allclose(result.positions, 1.0, atol=1e-12)
        np.testing.assert_allclose(np.linalg.norm(result.vertexNormals, axis=1), 1.0, atol=TOL)

    def testIdempotent(self):
        first = evaluatePatch(getPatch(17), 6, 9)
        second = evaluatePatch(getPatch(17), 6, 9)
        np.testing.assert_array_equal(first.vertices, second.vertices)
        np.testing.assert_array_equal(first.normals, second.normals)
        np.testing.assert_array_equal(first.indices, second.indices)

    def testMinimumResolution(self):
        result = evaluatePatch(getPatch(0), 2, 2)
        assert len(result.vertices) == 12
        np.testing.assert_array_equal(result.indices, [0, 1, 3, 0, 3, 2])

    @pytest.mark.parametrize('rows, cols', [(1, 5), (5, 1), (0, 0), (-3, 4), (2.5, 4), (4, '4'), (True, 4)])
    def testInvalidResolution(self, rows, cols):
        with pytest.raises(InvalidResolutionError):
            evaluatePatch(getPatch(0), rows, cols)

    def testInvalidResolutionIsValueError(self):
        with pytest.raises(ValueError):
            evaluatePatch(getPatch(0), 1, 1)

    def testNumpyIntegerResolution(self):
        result = evaluatePatch(getPatch(0), np.int64(3), np.int32(4))
        assert len(result.vertices) == 36

    def testBadControlShape(self):
        with pytest.raises(ValueError, match='expected'):
            evaluatePatch(np.zeros((3, 4, 3)), 4, 4)
