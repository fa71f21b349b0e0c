# -- TeapotMesh Runner -- #

'''
Command-line entry point for tessellating the teapot and writing outputs.

Tessellates all 32 patches at a preset or explicit resolution, prints a
summary of the buffers, and optionally writes STL, viewer JSON, and a
Plotly preview.

Usage:
    python -m TeapotMesh                               # Production 10x13, summary only
    python -m TeapotMesh --preset high                 # Named resolution preset
    python -m TeapotMesh --rows 7 --cols 13            # Explicit resolution
    python -m TeapotMesh --stl teapot.stl --ascii      # ASCII STL export
    python -m TeapotMesh --json viewer/data --embed-binary
    python -m TeapotMesh --plot --html teapot.html

Sean Bowman [10/19/2026]
'''

from __future__ import annotations

import argparse
from typing import Optional

import numpy as np

from TeapotMesh import constants as const
from TeapotMesh.geometry.controlPoints import controlPointBounds
from TeapotMesh.geometry.resolution import RESOLUTION_PRESETS, Resolution
from TeapotMesh.geometry.teapotMesh import TeapotGeometry, generateTeapot


def buildParser() -> argparse.ArgumentParser:
    '''Build the CLI argument parser.'''
    parser = argparse.ArgumentParser(
        description='TeapotMesh -- Bezier patch tessellation of the Utah teapot',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        '--preset', type=str, default='production',
        choices=list(RESOLUTION_PRESETS.keys()),
        help='Resolution preset (default: production, 10x13)',
    )
    parser.add_argument(
        '--rows', type=int, default=None,
        help='Samples along v per patch (overrides preset)',
    )
    parser.add_argument(
        '--cols', type=int, default=None,
        help='Samples along u per patch (overrides preset)',
    )
    parser.add_argument(
        '--resolution-json', type=str, default=None,
        help='Path to a {"rows": R, "cols": C} JSON file (overrides preset)',
    )
    parser.add_argument(
        '--stl', type=str, default=None,
        help='Write the mesh to this STL path',
    )
    parser.add_argument(
        '--ascii', action='store_true',
        help='Write ASCII STL instead of binary',
    )
    parser.add_argument(
        '--json', type=str, default=None,
        help='Write viewer JSON buffers into this directory',
    )
    parser.add_argument(
        '--embed-binary', action='store_true',
        help='Store viewer buffers as base64 binary instead of JSON lists',
    )
    parser.add_argument(
        '--plot', action='store_true',
        help='Open a Plotly preview in the browser',
    )
    parser.add_argument(
        '--html', type=str, default=None,
        help='Save the Plotly preview to this HTML path',
    )

    return parser


def resolveResolution(args: argparse.Namespace) -> Resolution:
    '''Pick the resolution from args: explicit rows/cols, then JSON, then preset.'''
    if args.rows is not None or args.cols is not None:
        base = Resolution.fromPreset(args.preset)
        rows = args.rows if args.rows is not None else base.rows
        cols = args.cols if args.cols is not None else base.cols
        return Resolution(rows, cols)

    if args.resolution_json:
        return Resolution.fromJson(args.resolution_json)

    return Resolution.fromPreset(args.preset)


def printSummary(geometry: TeapotGeometry) -> None:
    '''Print buffer counts and bounds for a tessellated teapot.'''
    mins, maxs = geometry.bounds()
    cpMins, cpMaxs = controlPointBounds()
    normalLengths = np.linalg.norm(geometry.vertexNormals, axis=1)
    maxNormalError = float(np.max(np.abs(normalLengths - 1.0)))

    print(f'  Resolution:        {geometry.rows:>5} x {geometry.cols:<5} samples per patch')
    print(f'  Patches:           {geometry.numPatches:8d}')
    print(f'  Vertices:          {geometry.numVertices:8d}')
    print(f'  Triangles:         {geometry.numTriangles:8d}')
    print(f'  Index Range:       {int(geometry.indices.min()):8d} .. {int(geometry.indices.max())}')
    print(f'  Max |n| - 1:       {maxNormalError:8.1e}  (tolerance {const.normalTolerance:.0e})')
    print()
    print(f'  {"":<10}  {"min":>8}  {"max":>8}  {"ctrl min":>8}  {"ctrl max":>8}')
    print('  ' + '-' * 50)
    for axis, name in enumerate('xyz'):
        print(f'  {name:<10}  {mins[axis]:8.4f}  {maxs[axis]:8.4f}  '
              f'{cpMins[axis]:8.4f}  {cpMaxs[axis]:8.4f}')


def runTessellation(
    resolution: Resolution,
    stlPath: Optional[str] = None,
    binaryStl: bool = True,
    jsonDir: Optional[str] = None,
    embedBinary: bool = False,
    showPlot: bool = False,
    htmlPath: Optional[str] = None,
) -> TeapotGeometry:
    '''
    Run the tessellation and every requested output.

    Parameters:
    -----------
    resolution : Resolution
        Samples per patch
    stlPath : str, optional
        STL output path
    binaryStl : bool
        Write binary (True) or ASCII (False) STL
    jsonDir : str, optional
        Viewer JSON output directory
    embedBinary : bool
        Store viewer buffers as base64 binary
    showPlot : bool
        Open the Plotly preview
    htmlPath : str, optional
        Save the Plotly preview as HTML

    Returns:
    --------
    TeapotGeometry : The tessellated buffers
    '''
    print()
    print('=' * 62)
    print('  TEAPOT TESSELLATION')
    print('=' * 62)
    print()

    geometry = generateTeapot(resolution.rows, resolution.cols)
    printSummary(geometry)
    print()

    ######################################################################
    # Outputs
    ######################################################################
    if stlPath or jsonDir or showPlot or htmlPath:
        print('-' * 62)
        print('  OUTPUTS')
        print('-' * 62)

    if stlPath:
        from TeapotMesh.export.stlExporter import StlExporter
        StlExporter().exportTeapot(stlPath, resolution.rows, resolution.cols, binary=binaryStl)

    if jsonDir:
        from TeapotMesh.export.viewerExporter import ViewerExporter
        ViewerExporter().exportForViewer(geometry, outputDir=jsonDir, embedBinary=embedBinary)

    if showPlot or htmlPath:
        from TeapotMesh.visualization.meshPlots import plotTeapot, writeHtml
        fig = plotTeapot(geometry)
        if htmlPath:
            writeHtml(fig, htmlPath)
        if showPlot:
            fig.show()
            print('  Preview opened in browser.')

    print()
    print('=' * 62)
    print('  Tessellation complete.')
    print('=' * 62)

    return geometry


def main(argv: Optional[list[str]] = None) -> None:
    '''CLI entry point.'''
    parser = buildParser()
    args = parser.parse_args(argv)

    runTessellation(
        resolution=resolveResolution(args),
        stlPath=args.stl,
        binaryStl=not args.ascii,
        jsonDir=args.json,
        embedBinary=args.embed_binary,
        showPlot=args.plot,
        htmlPath=args.html,
    )


if __name__ == '__main__':
    main()
