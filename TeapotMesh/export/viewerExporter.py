# -- Viewer Data Exporter -- #

'''
Exports tessellated teapot buffers as JSON for a WebGL / Three.js viewer.

The file carries exactly what a renderer uploads: a flat position buffer,
a flat normal buffer, and a triangle index buffer, plus the counts used
for the draw call. Buffers are written either as rounded JSON lists or,
for compact files, as base64-encoded little-endian binary that maps
straight onto Float32Array / Uint16Array / Uint32Array on the JS side.

The index type is chosen from the vertex count: uint16 while every index
fits, uint32 beyond that.

Sean Bowman [10/19/2026]
'''

from __future__ import annotations

import base64
import json
import os
from datetime import datetime

import numpy as np

from TeapotMesh.geometry.teapotMesh import TeapotGeometry

# Largest vertex count addressable by 16-bit indices
_UINT16_VERTEX_LIMIT = 65536

# Stored dtype for each index type name written to the JSON
INDEX_DTYPES = {'uint16': '<u2', 'uint32': '<u4'}


class ViewerExporter:
    '''
    Exports teapot geometry as JSON for the browser viewer.

    Produces one JSON file per resolution containing the renderer
    buffers and draw counts.
    '''

    def exportForViewer(
        self,
        geometry: TeapotGeometry,
        outputDir: str = 'viewer/data',
        embedBinary: bool = False,
        decimals: int = 6,
    ) -> str:
        '''
        Export geometry buffers as JSON for the viewer.

        Parameters:
        -----------
        geometry : TeapotGeometry
            Buffers from the tessellation engine
        outputDir : str
            Output directory for the JSON file
        embedBinary : bool
            If True, store buffers as base64 binary instead of JSON lists
        decimals : int
            Decimal places kept for positions and normals in list form

        Returns:
        --------
        str : Path to the exported JSON file
        '''
        exportData = self.buildViewerData(geometry, embedBinary, decimals)

        os.makedirs(outputDir, exist_ok=True)
        outputFilename = f'teapotGeometry_{geometry.rows}x{geometry.cols}.json'
        outputPath = os.path.join(outputDir, outputFilename)

        with open(outputPath, 'w') as f:
            json.dump(exportData, f, indent=2, default=self._jsonSerializer)

        print(f'  Viewer data exported: {outputPath}')

        return outputPath

    def buildViewerData(
        self,
        geometry: TeapotGeometry,
        embedBinary: bool = False,
        decimals: int = 6,
    ) -> dict:
        '''
        Assemble the JSON-ready viewer payload.

        Parameters:
        -----------
        geometry : TeapotGeometry
            Buffers from the tessellation engine
        embedBinary : bool
            If True, store buffers as base64 binary instead of JSON lists
        decimals : int
            Decimal places kept for positions and normals in list form

        Returns:
        --------
        dict : Viewer payload with keys meta, numComponents, numVertices,
            numTriangles, indexType, encoding, and the three buffers
        '''
        indexType = self._indexType(geometry.numVertices)

        exportData = {
            'meta': {
                'exportTimestamp': datetime.now().isoformat(),
                'rows': geometry.rows,
                'cols': geometry.cols,
                'numPatches': geometry.numPatches,
            },
            'numComponents': geometry.numComponents,
            'numVertices': geometry.numVertices,
            'numTriangles': geometry.numTriangles,
            'indexType': indexType,
        }

        #--------------------------------------------------------------------#
        # -- Buffers -- #
        #--------------------------------------------------------------------#
        if embedBinary:
            exportData['encoding'] = 'base64'
            exportData['vertices'] = self._encodeBufferBase64(geometry.vertices, '<f4')
            exportData['normals'] = self._encodeBufferBase64(geometry.normals, '<f4')
            exportData['indices'] = self._encodeBufferBase64(
                geometry.indices, INDEX_DTYPES[indexType]
            )
        else:
            exportData['encoding'] = 'json'
            exportData['vertices'] = self._arrayToRoundedList(geometry.vertices, decimals)
            exportData['normals'] = self._arrayToRoundedList(geometry.normals, decimals)
            exportData['indices'] = geometry.indices.tolist()

        return exportData

    #--------------------------------------------------------------------#
    # -- Private Helpers -- #
    #--------------------------------------------------------------------#

    @staticmethod
    def _indexType(numVertices: int) -> str:
        return 'uint16' if numVertices <= _UINT16_VERTEX_LIMIT else 'uint32'

    @staticmethod
    def _encodeBufferBase64(arr: np.ndarray, dtype: str) -> str:
        '''
        Encode a numpy buffer as base64 in a fixed binary layout.

        Parameters:
        -----------
        arr : np.ndarray
            Flat buffer to encode
        dtype : str
            Numpy dtype string for the stored layout (e.g. '<f4', '<u2')

        Returns:
        --------
        str : Base64-encoded buffer bytes
        '''
        rawBytes = np.ascontiguousarray(arr, dtype=dtype).tobytes()
        return base64.b64encode(rawBytes).decode('ascii')

    @staticmethod
    def _arrayToRoundedList(arr, decimals: int = 6) -> list:
        '''
        Convert a numpy array or list to a rounded Python list.

        Parameters:
        -----------
        arr : array-like
            Input array or list
        decimals : int
            Number of decimal places

        Returns:
        --------
        list : Rounded values
        '''
        if isinstance(arr, np.ndarray):
            return np.round(arr.astype(np.float64), decimals).tolist()
        elif isinstance(arr, list):
            return [round(float(v), decimals) for v in arr]
        return []

    @staticmethod
    def _jsonSerializer(obj):
        '''
        Custom JSON serializer for numpy types.

        Parameters:
        -----------
        obj : any
            Object to serialize

        Returns:
        --------
        JSON-serializable type

        Raises:
        -------
        TypeError : If the object type is not handled
        '''
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        raise TypeError(f'Object of type {type(obj)} is not JSON serializable')


def decodeViewerBuffer(encoded: str, dtype: str) -> np.ndarray:
    '''
    Decode a base64 buffer written by ViewerExporter.

    Parameters:
    -----------
    encoded : str
        Base64 buffer string
    dtype : str
        Stored numpy dtype ('<f4' for positions/normals, '<u2' or '<u4'
        for indices)

    Returns:
    --------
    np.ndarray : Flat decoded buffer
    '''
    return np.frombuffer(base64.b64decode(encoded), dtype=dtype)

