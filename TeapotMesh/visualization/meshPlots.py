# -- Teapot Mesh Visualizations -- #

'''
Plotly-based interactive plots for the tessellated teapot.

These are consumers of the tessellation buffers: Plotly does its own
shading, so the preview only passes the triangle list, a material color,
and a fixed light position.

Sean Bowman [10/19/2026]
'''

from __future__ import annotations

from typing import Optional

import numpy as np
import plotly.graph_objects as go

from TeapotMesh import constants as const
from TeapotMesh.geometry.controlPoints import PATCH_GROUPS, getControlPoints
from TeapotMesh.geometry.teapotMesh import TeapotGeometry, getGeometry
from TeapotMesh.visualization import theme

# Plotly places lights at a position, not a direction; push it far out
_LIGHT_DISTANCE = 1e4


def _sceneLayout() -> dict:
    return dict(
        aspectmode='data',
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        zaxis=dict(visible=False),
        bgcolor=theme.BACKGROUND,
    )


def plotTeapot(
    geometry: Optional[TeapotGeometry] = None,
    lightDirection: tuple[float, float, float] = const.defaultLightDirection,
    title: str = 'Utah Teapot',
) -> go.Figure:
    '''
    Shaded 3D view of the tessellated teapot.

    Parameters:
    -----------
    geometry : TeapotGeometry, optional
        Buffers to draw. Defaults to the production-resolution teapot.
    lightDirection : tuple[float, float, float]
        Direction from the model toward the light
    title : str
        Figure title

    Returns:
    --------
    go.Figure : Plotly figure
    '''
    if geometry is None:
        geometry = getGeometry()

    positions = geometry.positions
    triangles = geometry.triangles

    light = np.asarray(lightDirection, dtype=np.float64)
    light = light / np.linalg.norm(light) * _LIGHT_DISTANCE

    fig = go.Figure()
    fig.add_trace(go.Mesh3d(
        x=positions[:, 0], y=positions[:, 1], z=positions[:, 2],
        i=triangles[:, 0], j=triangles[:, 1], k=triangles[:, 2],
        color=theme.TEAPOT,
        flatshading=False,
        lighting=dict(
            ambient=const.ambientCoefficient,
            diffuse=const.diffuseCoefficient,
            specular=const.specularCoefficient,
            roughness=0.5,
            fresnel=0.0,
        ),
        lightposition=dict(x=light[0], y=light[1], z=light[2]),
        name='Teapot',
    ))

    fig.update_layout(
        title=f'{title} ({geometry.rows} x {geometry.cols} per patch, '
              f'{geometry.numTriangles} triangles)',
        scene=_sceneLayout(),
        template=theme.TEMPLATE,
        height=600,
    )

    return fig


def plotControlNet(points: Optional[np.ndarray] = None) -> go.Figure:
    '''
    Wireframe of every patch's 4x4 control net, colored by teapot part.

    Parameters:
    -----------
    points : np.ndarray, optional
        Control points, shape (nPatches, 4, 4, 3). Defaults to the catalog.

    Returns:
    --------
    go.Figure : Plotly figure
    '''
    if points is None:
        points = getControlPoints()

    fig = go.Figure()

    for groupIndex, (name, patchRange) in enumerate(PATCH_GROUPS.items()):
        color = theme.PALETTE[groupIndex % len(theme.PALETTE)]
        xs, ys, zs = [], [], []

        for p in patchRange:
            if p >= len(points):
                continue
            grid = points[p]
            # Rows then columns; None breaks the polyline between segments
            for line in list(grid) + list(grid.transpose(1, 0, 2)):
                xs.extend(line[:, 0].tolist() + [None])
                ys.extend(line[:, 1].tolist() + [None])
                zs.extend(line[:, 2].tolist() + [None])

        if not xs:
            continue

        fig.add_trace(go.Scatter3d(
            x=xs, y=ys, z=zs, mode='lines+markers',
            name=name, line=dict(color=color, width=2),
            marker=dict(size=2, color=color),
        ))

    fig.update_layout(
        title='Bezier Control Nets',
        scene=_sceneLayout(),
        template=theme.TEMPLATE,
        height=600,
    )

    return fig


def plotNormals(
    geometry: Optional[TeapotGeometry] = None,
    scale: float = 0.15,
    stride: int = 1,
) -> go.Figure:
    '''
    Vertex normals drawn as short line segments over the mesh.

    Useful for checking normal orientation against the triangle winding.

    Parameters:
    -----------
    geometry : TeapotGeometry, optional
        Buffers to draw. Defaults to the production-resolution teapot.
    scale : float
        Segment length in model units
    stride : int
        Draw every stride-th vertex

    Returns:
    --------
    go.Figure : Plotly figure
    '''
    if geometry is None:
        geometry = getGeometry()

    starts = geometry.positions[::stride]
    ends = starts + scale * geometry.vertexNormals[::stride]

    # Interleave start, end, NaN so each normal is a separate segment
    segments = np.full((len(starts) * 3, 3), np.nan)
    segments[0::3] = starts
    segments[1::3] = ends

    fig = plotTeapot(geometry, title='Vertex Normals')
    fig.data[0].opacity = 0.6
    fig.add_trace(go.Scatter3d(
        x=segments[:, 0], y=segments[:, 1], z=segments[:, 2],
        mode='lines', name='Normals',
        line=dict(color=theme.CYAN, width=2),
    ))

    return fig


def writeHtml(fig: go.Figure, filePath: str) -> str:
    '''
    Save a figure as a standalone HTML file.

    Parameters:
    -----------
    fig : go.Figure
        Figure to save
    filePath : str
        Output path (should end in .html)

    Returns:
    --------
    str : Path to the written file
    '''
    fig.write_html(filePath)
    print(f'  Figure saved: {filePath}')
    return filePath
