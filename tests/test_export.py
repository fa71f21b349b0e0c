# -- Export Tests -- #

import json
import os

import numpy as np
import pytest

from TeapotMesh.export.viewerExporter import INDEX_DTYPES, ViewerExporter, decodeViewerBuffer
from TeapotMesh.geometry.teapotMesh import generateTeapot


@pytest.fixture(scope='module')
def smallTeapot():
    return generateTeapot(3, 4)


class TestViewerExporter:

    def testJsonPayload(self, smallTeapot):
        data = ViewerExporter().buildViewerData(smallTeapot)
        assert data['encoding'] == 'json'
        assert data['numComponents'] == 3
        assert data['numVertices'] == 3 * 4 * 32
        assert data['numTriangles'] == 2 * 2 * 3 * 32
        assert data['indexType'] == 'uint16'
        assert len(data['vertices']) == 3 * data['numVertices']
        assert len(data['normals']) == 3 * data['numVertices']
        assert data['indices'] == smallTeapot.indices.tolist()
        assert data['meta']['rows'] == 3
        assert data['meta']['cols'] == 4

    def testBinaryPayloadDecodes(self, smallTeapot):
        data = ViewerExporter().buildViewerData(smallTeapot, embedBinary=True)
        assert data['encoding'] == 'base64'

        vertices = decodeViewerBuffer(data['vertices'], '<f4')
        normals = decodeViewerBuffer(data['normals'], '<f4')
        indices = decodeViewerBuffer(data['indices'], INDEX_DTYPES[data['indexType']])

        np.testing.assert_allclose(vertices, smallTeapot.vertices, atol=1e-6)
        np.testing.assert_allclose(normals, smallTeapot.normals, atol=1e-6)
        np.testing.assert_array_equal(indices, smallTeapot.indices)

    def testIndexTypeWidensPastSixteenBits(self):
        assert ViewerExporter._indexType(65536) == 'uint16'
        assert ViewerExporter._indexType(65537) == 'uint32'

    def testExportWritesFile(self, smallTeapot, tmp_path):
        path = ViewerExporter().exportForViewer(smallTeapot, outputDir=str(tmp_path / 'data'))
        assert os.path.basename(path) == 'teapotGeometry_3x4.json'
        with open(path) as f:
            data = json.load(f)
        assert data['numTriangles'] == smallTeapot.numTriangles

    def testSerializerRejectsUnknownTypes(self):
        assert ViewerExporter._jsonSerializer(np.int64(3)) == 3
        assert ViewerExporter._jsonSerializer(np.float32(0.5)) == 0.5
        with pytest.raises(TypeError):
            ViewerExporter._jsonSerializer(object())


class TestStlExport:

    def testGeneratorRequiresGenerate(self):
        pytest.importorskip('trimesh')
        from TeapotMesh.geometry.meshGenerator import TeapotMeshGenerator

        gen = TeapotMeshGenerator(3, 4)
        assert not gen.isGenerated
        with pytest.raises(RuntimeError, match='generate'):
            gen.getMesh()

    def testGeneratorMeshMatchesBuffers(self):
        pytest.importorskip('trimesh')
        from TeapotMesh.geometry.meshGenerator import TeapotMeshGenerator

        gen = TeapotMeshGenerator.fromPreset('draft')
        geometry = gen.generate()
        mesh = gen.getMesh()

        assert gen.isGenerated
        assert gen.getGeometry() is geometry
        assert len(mesh.vertices) == geometry.numVertices
        assert len(mesh.faces) == geometry.numTriangles
        np.testing.assert_array_equal(np.asarray(mesh.faces), geometry.triangles)
        assert gen.computeSurfaceArea() > 0.0

    def testGeneratorRejectsBadResolution(self):
        pytest.importorskip('trimesh')
        from TeapotMesh.geometry.meshGenerator import TeapotMeshGenerator
        from TeapotMesh.geometry.resolution import InvalidResolutionError

        with pytest.raises(InvalidResolutionError):
            TeapotMeshGenerator(1, 4)

    def testBinaryStlSize(self, tmp_path):
        pytest.importorskip('trimesh')
        from TeapotMesh.export.stlExporter import StlExporter

        path = StlExporter().exportTeapot(str(tmp_path / 'teapot.stl'), 3, 4)
        numTriangles = 2 * 2 * 3 * 32
        # 80-byte header, uint32 count, 50 bytes per facet
        assert os.path.getsize(path) == 84 + 50 * numTriangles

    def testAsciiStl(self, tmp_path):
        pytest.importorskip('trimesh')
        from TeapotMesh.export.stlExporter import StlExporter

        path = StlExporter().exportTeapot(str(tmp_path / 'teapot.stl'), 2, 2, binary=False)
        with open(path) as f:
            text = f.read()
        assert text.startswith('solid')
        assert text.count('facet normal') == 2 * 32

    def testPresetFileName(self, tmp_path):
        pytest.importorskip('trimesh')
        from TeapotMesh.export.stlExporter import StlExporter

        path = StlExporter().exportPreset('draft', str(tmp_path))
        assert os.path.basename(path) == 'teapot_draft.stl'
        assert os.path.exists(path)
