# -- Teapot Mesh Generator -- #

'''
Renderer-side holder for the tessellated teapot.

The tessellation engine is stateless, so anything that draws the teapot
every frame owns the geometry itself. TeapotMeshGenerator is that owner:
generate() runs the tessellation once and keeps both the raw buffers and
a trimesh.Trimesh built from them for export and mesh queries.

Vertex order is preserved in the Trimesh (process=False) so that the
Trimesh vertices line up one-to-one with the renderer buffers.

Sean Bowman [10/19/2026]
'''

from __future__ import annotations

from typing import Optional

try:
    import trimesh
except ImportError:
    trimesh = None

from TeapotMesh.geometry.resolution import Resolution
from TeapotMesh.geometry.teapotMesh import TeapotGeometry, generateTeapot


class TeapotMeshGenerator:
    '''
    Tessellates the teapot once and holds the result.

    Examples:
    ---------
    >>> gen = TeapotMeshGenerator.fromPreset('production')
    >>> gen.generate()
    >>> gen.exportStl('teapot.stl')
    '''

    def __init__(self, rows: int, cols: int) -> None:
        '''
        Initialize the generator for a given sampling resolution.

        Parameters:
        -----------
        rows : int
            Samples along v per patch (>= 2)
        cols : int
            Samples along u per patch (>= 2)
        '''
        if trimesh is None:
            raise ImportError(
                'trimesh is required for teapot mesh generation. '
                'Install with: pip install trimesh'
            )

        # Validates before anything is stored
        self._resolution = Resolution(rows, cols)

        # Populated by generate()
        self._geometry: Optional[TeapotGeometry] = None
        self._mesh: Optional[trimesh.Trimesh] = None

    @classmethod
    def fromPreset(cls, preset: str = 'production') -> TeapotMeshGenerator:
        '''
        Create a generator using a named resolution preset.

        Parameters:
        -----------
        preset : str
            Preset name: 'draft', 'test', 'production', or 'high'

        Returns:
        --------
        TeapotMeshGenerator : Configured generator instance
        '''
        resolution = Resolution.fromPreset(preset)
        return cls(resolution.rows, resolution.cols)

    @property
    def resolution(self) -> Resolution:
        return self._resolution

    @property
    def isGenerated(self) -> bool:
        return self._geometry is not None

    ######################################################################
    # -- Generation -- #
    ######################################################################

    def generate(self) -> TeapotGeometry:
        '''
        Tessellate the teapot and build the Trimesh.

        Calling generate() again re-tessellates and replaces the held data.

        Returns:
        --------
        TeapotGeometry : Renderer buffers for the whole teapot
        '''
        geometry = generateTeapot(self._resolution.rows, self._resolution.cols)

        self._mesh = trimesh.Trimesh(
            vertices=geometry.positions,
            faces=geometry.triangles,
            vertex_normals=geometry.vertexNormals,
            process=False,
        )
        self._geometry = geometry
        return geometry

    def getGeometry(self) -> TeapotGeometry:
        '''
        Get the held renderer buffers.

        Returns:
        --------
        TeapotGeometry : Buffers produced by the last generate()
        '''
        self._requireGenerated()
        return self._geometry

    def getMesh(self) -> trimesh.Trimesh:
        '''
        Get the held Trimesh.

        Returns:
        --------
        trimesh.Trimesh : Triangle mesh sharing the buffer vertex order
        '''
        self._requireGenerated()
        return self._mesh

    ######################################################################
    # -- Export & Queries -- #
    ######################################################################

    def exportStl(self, filePath: str, binary: bool = True) -> None:
        '''
        Export the teapot mesh as an STL file.

        Parameters:
        -----------
        filePath : str
            Output file path (should end in .stl)
        binary : bool
            If True, write binary STL (smaller). If False, write ASCII STL.
        '''
        mesh = self.getMesh()
        fileType = 'stl' if binary else 'stl_ascii'
        mesh.export(filePath, file_type=fileType)

    def computeSurfaceArea(self) -> float:
        '''
        Total area of all triangles.

        The patch set is not closed (the lid and body are separate
        shells), so area is reported instead of volume.

        Returns:
        --------
        float : Surface area in model units squared
        '''
        return float(self.getMesh().area)

    def _requireGenerated(self) -> None:
        if self._geometry is None:
            raise RuntimeError(
                'Teapot geometry has not been generated. Call generate() first.'
            )
