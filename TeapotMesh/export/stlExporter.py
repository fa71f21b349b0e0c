# -- STL Export Wrapper -- #

'''
Convenience wrapper for exporting the tessellated teapot as STL files.

Wraps TeapotMeshGenerator with higher-level methods for exporting a
given resolution, a named resolution preset, or every preset at once.

Sean Bowman [10/19/2026]
'''

from __future__ import annotations

from pathlib import Path

from TeapotMesh.geometry.meshGenerator import TeapotMeshGenerator
from TeapotMesh.geometry.resolution import RESOLUTION_PRESETS, Resolution


class StlExporter:
    '''
    Exports the teapot mesh as STL files.

    Examples:
    ---------
    >>> exporter = StlExporter()
    >>> exporter.exportPreset('production', 'output/')
    >>> exporter.exportTeapot('output/teapot_fine.stl', rows=40, cols=52)
    '''

    def exportTeapot(
        self,
        outputPath: str,
        rows: int,
        cols: int,
        binary: bool = True,
    ) -> str:
        '''
        Tessellate the teapot at a given resolution and write it as STL.

        Parameters:
        -----------
        outputPath : str
            Output file path (should end in .stl)
        rows : int
            Samples along v per patch
        cols : int
            Samples along u per patch
        binary : bool
            If True, write binary STL. If False, write ASCII STL.

        Returns:
        --------
        str : Path to the exported STL file
        '''
        gen = TeapotMeshGenerator(rows, cols)
        geometry = gen.generate()
        gen.exportStl(outputPath, binary=binary)

        print(f'Exported {Path(outputPath).name}: '
              f'{rows}x{cols} per patch, '
              f'{geometry.numVertices} vertices, '
              f'{geometry.numTriangles} triangles')

        return str(outputPath)

    def exportPreset(
        self,
        presetName: str,
        outputDir: str,
        binary: bool = True,
    ) -> str:
        '''
        Export the teapot at a named resolution preset.

        Parameters:
        -----------
        presetName : str
            Preset name: 'draft', 'test', 'production', or 'high'
        outputDir : str
            Output directory (file named 'teapot_{presetName}.stl')
        binary : bool
            If True, write binary STL

        Returns:
        --------
        str : Path to the exported STL file
        '''
        resolution = Resolution.fromPreset(presetName)
        outDir = Path(outputDir)
        outDir.mkdir(parents=True, exist_ok=True)
        outputPath = str(outDir / f'teapot_{presetName}.stl')

        return self.exportTeapot(outputPath, resolution.rows, resolution.cols, binary)

    def exportAllPresets(self, outputDir: str, binary: bool = True) -> list[str]:
        '''
        Export the teapot at every resolution preset.

        Parameters:
        -----------
        outputDir : str
            Output directory
        binary : bool
            If True, write binary STL

        Returns:
        --------
        list[str] : Paths to all exported STL files
        '''
        paths = []
        for presetName in RESOLUTION_PRESETS:
            path = self.exportPreset(presetName, outputDir, binary)
            paths.append(path)
        return paths
