# -- Resolution Config Tests -- #

import dataclasses
import json

import pytest

from TeapotMesh.geometry.resolution import (
    RESOLUTION_PRESETS,
    InvalidResolutionError,
    Resolution,
    validateResolution,
)


class TestResolution:

    def testDefaultIsProduction(self):
        assert Resolution() == Resolution(10, 13)
        assert Resolution.production() == Resolution(10, 13)

    def testDerivedCounts(self):
        res = Resolution(7, 13)
        assert res.verticesPerPatch == 91
        assert res.trianglesPerPatch == 2 * 6 * 12

    def testFrozen(self):
        res = Resolution(4, 4)
        with pytest.raises(dataclasses.FrozenInstanceError):
            res.rows = 8

    @pytest.mark.parametrize('rows, cols', [(1, 2), (2, 1), (0, 10), (3.0, 3), (None, 3)])
    def testInvalidOnConstruction(self, rows, cols):
        with pytest.raises(InvalidResolutionError):
            Resolution(rows, cols)

    def testValidateMessageNamesAxis(self):
        with pytest.raises(InvalidResolutionError, match='cols'):
            validateResolution(5, 1)


class TestPresets:

    @pytest.mark.parametrize('name', list(RESOLUTION_PRESETS.keys()))
    def testEveryPresetIsValid(self, name):
        res = Resolution.fromPreset(name)
        assert res.rows == RESOLUTION_PRESETS[name]['rows']
        assert res.cols == RESOLUTION_PRESETS[name]['cols']

    def testTestPreset(self):
        assert Resolution.fromPreset('test') == Resolution(7, 13)

    def testUnknownPreset(self):
        with pytest.raises(ValueError, match='Unknown preset'):
            Resolution.fromPreset('ultra')


class TestJson:

    def testRoundTrip(self, tmp_path):
        path = tmp_path / 'resolution.json'
        Resolution(6, 9).toJson(str(path))
        assert json.loads(path.read_text()) == {'rows': 6, 'cols': 9}
        assert Resolution.fromJson(str(path)) == Resolution(6, 9)

    def testInvalidJsonValues(self, tmp_path):
        path = tmp_path / 'bad.json'
        path.write_text(json.dumps({'rows': 1, 'cols': 9}))
        with pytest.raises(InvalidResolutionError):
            Resolution.fromJson(str(path))
