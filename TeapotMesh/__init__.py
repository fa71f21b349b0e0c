# -- TeapotMesh Package -- #

'''
Bezier patch tessellation for the Utah teapot.

Evaluates the 32 bicubic patches of the teapot into renderer-ready
vertex, normal, and index buffers, with STL / viewer-JSON export and
Plotly previews as consumers of those buffers.

Wildcard import exposes the main entry points:
    from TeapotMesh import *
    geometry = getGeometry()
    geometry.numVertices, geometry.numTriangles

Sub-modules:
    - geometry: control-point catalog, patch evaluator, mesh aggregator
    - export: STL and viewer JSON writers
    - visualization: Plotly previews

Sean Bowman [10/19/2026]
'''

__version__ = '0.1.0'

from TeapotMesh.geometry.controlPoints import getControlPoints, getPatch, CatalogShapeError
from TeapotMesh.geometry.resolution import Resolution, RESOLUTION_PRESETS, InvalidResolutionError
from TeapotMesh.geometry.bezierPatch import TessellatedPatch, evaluatePatch
from TeapotMesh.geometry.teapotMesh import TeapotGeometry, generateTeapot, getGeometry, tessellatePatches

__all__ = [
    # Catalog
    'getControlPoints',
    'getPatch',
    'CatalogShapeError',
    # Resolution
    'Resolution',
    'RESOLUTION_PRESETS',
    'InvalidResolutionError',
    # Tessellation
    'TessellatedPatch',
    'evaluatePatch',
    'TeapotGeometry',
    'tessellatePatches',
    'generateTeapot',
    'getGeometry',
]
