# -- Geometry Subpackage -- #

'''
The pure tessellation engine: control-point catalog, Bezier patch
evaluator, and whole-model aggregator, plus the renderer-side mesh holder.
'''

from TeapotMesh.geometry.resolution import Resolution, InvalidResolutionError
from TeapotMesh.geometry.bezierPatch import evaluatePatch, triangulateGrid
from TeapotMesh.geometry.teapotMesh import TeapotGeometry, generateTeapot, getGeometry
