# -- Constants for Teapot Tessellation -- #

'''
Fixed numbers shared by the tessellation engine and its consumers.

The teapot is defined in object space with Z up; units are arbitrary
(the authored Utah teapot data spans roughly 6.5 x 4 x 3 units).

Sean Bowman [10/19/2026]
'''

######################################################################
# -- Control-Point Catalog -- #
######################################################################

# Number of bicubic Bezier patches in the teapot catalog
numPatches: int = 32

# Control points per patch side (bicubic -> 4x4 grid)
patchOrder: int = 4

# Components per control point, vertex, and normal (x, y, z)
numComponents: int = 3

######################################################################
# -- Tessellation -- #
######################################################################

# Samples per patch along v (rows) and u (columns) for the displayed model
productionRows: int = 10
productionCols: int = 13

# Smallest legal sample count along either parametric direction
minSamples: int = 2

# Vectors shorter than this are treated as zero-length when normalizing
degenerateLength: float = 1e-12

# Parameter step used to re-derive a normal next to a collapsed patch edge
degenerateNudge: float = 1e-4

# Unit-length tolerance for generated normals
normalTolerance: float = 1e-6

######################################################################
# -- Shading Defaults (consumed by the preview only) -- #
######################################################################

# Material color (RGB in [0, 1])
materialColor: tuple[float, float, float] = (0.5, 0.25, 1.0)

# Phong-style coefficients: ambient, diffuse, specular, specular exponent
ambientCoefficient: float = 0.15
diffuseCoefficient: float = 0.8
specularCoefficient: float = 0.75
specularExponent: float = 12.0

# Direction toward the light before any animation is applied
defaultLightDirection: tuple[float, float, float] = (-1.0, 0.0, 0.0)
