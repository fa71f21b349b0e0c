# -- CLI Runner Tests -- #

import os

import pytest

from TeapotMesh.geometry.resolution import InvalidResolutionError, Resolution
from TeapotMesh.runner import buildParser, main, resolveResolution


class TestResolveResolution:

    def testDefaultPreset(self):
        args = buildParser().parse_args([])
        assert resolveResolution(args) == Resolution(10, 13)

    def testNamedPreset(self):
        args = buildParser().parse_args(['--preset', 'test'])
        assert resolveResolution(args) == Resolution(7, 13)

    def testExplicitRowsCols(self):
        args = buildParser().parse_args(['--rows', '5', '--cols', '8'])
        assert resolveResolution(args) == Resolution(5, 8)

    def testPartialOverrideKeepsPresetAxis(self):
        args = buildParser().parse_args(['--preset', 'draft', '--rows', '6'])
        assert resolveResolution(args) == Resolution(6, 5)

    def testResolutionJson(self, tmp_path):
        path = tmp_path / 'res.json'
        Resolution(3, 3).toJson(str(path))
        args = buildParser().parse_args(['--resolution-json', str(path)])
        assert resolveResolution(args) == Resolution(3, 3)

    def testUnknownPresetRejected(self):
        with pytest.raises(SystemExit):
            buildParser().parse_args(['--preset', 'ultra'])


class TestMain:

    def testSummary(self, capsys):
        main(['--preset', 'draft'])
        out = capsys.readouterr().out
        assert 'TEAPOT TESSELLATION' in out
        assert str(4 * 5 * 32) in out
        assert 'Tessellation complete.' in out

    def testInvalidRows(self):
        with pytest.raises(InvalidResolutionError):
            main(['--rows', '1'])

    def testJsonOutput(self, tmp_path):
        main(['--rows', '2', '--cols', '3', '--json', str(tmp_path)])
        assert os.path.exists(tmp_path / 'teapotGeometry_2x3.json')

    def testStlOutput(self, tmp_path):
        pytest.importorskip('trimesh')
        path = tmp_path / 'teapot.stl'
        main(['--preset', 'draft', '--stl', str(path)])
        assert os.path.exists(path)
