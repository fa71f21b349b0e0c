# -- Tessellation Resolution -- #

'''
Sampling resolution shared by every patch in a tessellation run.

A resolution is the number of samples along each parametric direction of
a patch: rows along v, columns along u. Both must be at least 2 so that
the uniform parameter step 1/(n-1) is defined.

Sean Bowman [10/19/2026]
'''

from __future__ import annotations

import json
import numbers
from dataclasses import dataclass, asdict

from TeapotMesh import constants as const


class InvalidResolutionError(ValueError):
    '''Raised when a requested sample count cannot be tessellated.'''


######################################################################
# -- Resolution Presets -- #
######################################################################

RESOLUTION_PRESETS = {
    'draft': {'rows': 4, 'cols': 5},
    'test': {'rows': 7, 'cols': 13},
    'production': {'rows': const.productionRows, 'cols': const.productionCols},
    'high': {'rows': 20, 'cols': 26},
}


def validateResolution(rows, cols) -> None:
    '''
    Check a (rows, cols) pair before any sampling happens.

    Parameters:
    -----------
    rows : int
        Samples along v per patch (>= 2)
    cols : int
        Samples along u per patch (>= 2)

    Raises:
    -------
    InvalidResolutionError : If either count is not an integer >= 2
    '''
    for name, value in (('rows', rows), ('cols', cols)):
        # bool is an Integral subclass but never a meaningful sample count
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise InvalidResolutionError(
                f'{name} must be an integer, got {value!r}'
            )
        if value < const.minSamples:
            raise InvalidResolutionError(
                f'{name} must be >= {const.minSamples}, got {value}'
            )


@dataclass(frozen=True)
class Resolution:
    '''
    Per-patch sample counts for one tessellation run.

    Validated on construction, so a Resolution instance is always legal.
    '''

    # Samples along the v (row) direction
    rows: int = const.productionRows

    # Samples along the u (column) direction
    cols: int = const.productionCols

    def __post_init__(self) -> None:
        validateResolution(self.rows, self.cols)

    #--------------------------------------------------------------------#
    # -- Derived Counts -- #
    #--------------------------------------------------------------------#

    @property
    def verticesPerPatch(self) -> int:
        return self.rows * self.cols

    @property
    def trianglesPerPatch(self) -> int:
        return 2 * (self.rows - 1) * (self.cols - 1)

    #--------------------------------------------------------------------#
    # -- Factories -- #
    #--------------------------------------------------------------------#

    @classmethod
    def production(cls) -> Resolution:
        '''Resolution used for the displayed model (10 x 13).'''
        return cls()

    @classmethod
    def fromPreset(cls, preset: str) -> Resolution:
        '''
        Create a resolution from a named preset.

        Parameters:
        -----------
        preset : str
            Preset name: 'draft', 'test', 'production', or 'high'

        Returns:
        --------
        Resolution : The preset's sample counts
        '''
        if preset not in RESOLUTION_PRESETS:
            raise ValueError(
                f'Unknown preset \'{preset}\'. '
                f'Available: {list(RESOLUTION_PRESETS.keys())}'
            )
        return cls(**RESOLUTION_PRESETS[preset])

    @classmethod
    def fromJson(cls, filePath: str) -> Resolution:
        '''
        Load a resolution from a JSON file of the form {"rows": R, "cols": C}.

        Parameters:
        -----------
        filePath : str
            Path to the JSON file

        Returns:
        --------
        Resolution : Loaded (and validated) resolution
        '''
        with open(filePath, 'r') as f:
            data = json.load(f)
        return cls(rows=data['rows'], cols=data['cols'])

    def toJson(self, filePath: str) -> None:
        '''
        Write the resolution to a JSON file.

        Parameters:
        -----------
        filePath : str
            Output file path
        '''
        with open(filePath, 'w') as f:
            json.dump(self.toDict(), f, indent=2)

    def toDict(self) -> dict:
        return asdict(self)
