# -- Teapot Control-Point Catalog -- #

'''
The 32 bicubic Bezier patches of the Utah teapot.

Each patch is a 4x4 grid of object-space control points indexed
[row][col], where rows run along the v parameter and columns along u.
The table is built once at import, validated, and flagged read-only;
nothing in the package ever writes to it.

Patch order is fixed and grouped by teapot part:

    rim 0-3, upper body 4-7, lower body 8-11, handle 12-15,
    spout 16-19, lid knob 20-23, lid 24-27, bottom 28-31

The lid knob and bottom patches collapse their first row to a single
point (the lid apex and the bottom center). That is part of the authored
data, not a defect.

Sean Bowman [10/19/2026]
'''

from __future__ import annotations

from typing import Optional

import numpy as np

from TeapotMesh import constants as const


class CatalogShapeError(RuntimeError):
    '''Raised when the control-point table does not have the expected shape.'''


######################################################################
# -- Patch Groups -- #
######################################################################

PATCH_GROUPS = {
    'rim': range(0, 4),
    'upperBody': range(4, 8),
    'lowerBody': range(8, 12),
    'handle': range(12, 16),
    'spout': range(16, 20),
    'lidKnob': range(20, 24),
    'lid': range(24, 28),
    'bottom': range(28, 32),
}


######################################################################
# -- Control Points -- #
######################################################################

_CONTROL_POINTS = np.array([
    # Rim
    [  # 0
        [[1.4, 0.0, 2.4], [1.4, -0.784, 2.4], [0.784, -1.4, 2.4], [0.0, -1.4, 2.4]],
        [[1.3375, 0.0, 2.53125], [1.3375, -0.749, 2.53125], [0.749, -1.3375, 2.53125], [0.0, -1.3375, 2.53125]],
        [[1.4375, 0.0, 2.53125], [1.4375, -0.805, 2.53125], [0.805, -1.4375, 2.53125], [0.0, -1.4375, 2.53125]],
        [[1.5, 0.0, 2.4], [1.5, -0.84, 2.4], [0.84, -1.5, 2.4], [0.0, -1.5, 2.4]],
    ],
    [  # 1
        [[0.0, -1.4, 2.4], [-0.784, -1.4, 2.4], [-1.4, -0.784, 2.4], [-1.4, 0.0, 2.4]],
        [[0.0, -1.3375, 2.53125], [-0.749, -1.3375, 2.53125], [-1.3375, -0.749, 2.53125], [-1.3375, 0.0, 2.53125]],
        [[0.0, -1.4375, 2.53125], [-0.805, -1.4375, 2.53125], [-1.4375, -0.805, 2.53125], [-1.4375, 0.0, 2.53125]],
        [[0.0, -1.5, 2.4], [-0.84, -1.5, 2.4], [-1.5, -0.84, 2.4], [-1.5, 0.0, 2.4]],
    ],
    [  # 2
        [[-1.4, 0.0, 2.4], [-1.4, 0.784, 2.4], [-0.784, 1.4, 2.4], [0.0, 1.4, 2.4]],
        [[-1.3375, 0.0, 2.53125], [-1.3375, 0.749, 2.53125], [-0.749, 1.3375, 2.53125], [0.0, 1.3375, 2.53125]],
        [[-1.4375, 0.0, 2.53125], [-1.4375, 0.805, 2.53125], [-0.805, 1.4375, 2.53125], [0.0, 1.4375, 2.53125]],
        [[-1.5, 0.0, 2.4], [-1.5, 0.84, 2.4], [-0.84, 1.5, 2.4], [0.0, 1.5, 2.4]],
    ],
    [  # 3
        [[0.0, 1.4, 2.4], [0.784, 1.4, 2.4], [1.4, 0.784, 2.4], [1.4, 0.0, 2.4]],
        [[0.0, 1.3375, 2.53125], [0.749, 1.3375, 2.53125], [1.3375, 0.749, 2.53125], [1.3375, 0.0, 2.53125]],
        [[0.0, 1.4375, 2.53125], [0.805, 1.4375, 2.53125], [1.4375, 0.805, 2.53125], [1.4375, 0.0, 2.53125]],
        [[0.0, 1.5, 2.4], [0.84, 1.5, 2.4], [1.5, 0.84, 2.4], [1.5, 0.0, 2.4]],
    ],
    # Upper body
    [  # 4
        [[1.5, 0.0, 2.4], [1.5, -0.84, 2.4], [0.84, -1.5, 2.4], [0.0, -1.5, 2.4]],
        [[1.75, 0.0, 1.875], [1.75, -0.98, 1.875], [0.98, -1.75, 1.875], [0.0, -1.75, 1.875]],
        [[2.0, 0.0, 1.35], [2.0, -1.12, 1.35], [1.12, -2.0, 1.35], [0.0, -2.0, 1.35]],
        [[2.0, 0.0, 0.9], [2.0, -1.12, 0.9], [1.12, -2.0, 0.9], [0.0, -2.0, 0.9]],
    ],
    [  # 5
        [[0.0, -1.5, 2.4], [-0.84, -1.5, 2.4], [-1.5, -0.84, 2.4], [-1.5, 0.0, 2.4]],
        [[0.0, -1.75, 1.875], [-0.98, -1.75, 1.875], [-1.75, -0.98, 1.875], [-1.75, 0.0, 1.875]],
        [[0.0, -2.0, 1.35], [-1.12, -2.0, 1.35], [-2.0, -1.12, 1.35], [-2.0, 0.0, 1.35]],
        [[0.0, -2.0, 0.9], [-1.12, -2.0, 0.9], [-2.0, -1.12, 0.9], [-2.0, 0.0, 0.9]],
    ],
    [  # 6
        [[-1.5, 0.0, 2.4], [-1.5, 0.84, 2.4], [-0.84, 1.5, 2.4], [0.0, 1.5, 2.4]],
        [[-1.75, 0.0, 1.875], [-1.75, 0.98, 1.875], [-0.98, 1.75, 1.875], [0.0, 1.75, 1.875]],
        [[-2.0, 0.0, 1.35], [-2.0, 1.12, 1.35], [-1.12, 2.0, 1.35], [0.0, 2.0, 1.35]],
        [[-2.0, 0.0, 0.9], [-2.0, 1.12, 0.9], [-1.12, 2.0, 0.9], [0.0, 2.0, 0.9]],
    ],
    [  # 7
        [[0.0, 1.5, 2.4], [0.84, 1.5, 2.4], [1.5, 0.84, 2.4], [1.5, 0.0, 2.4]],
        [[0.0, 1.75, 1.875], [0.98, 1.75, 1.875], [1.75, 0.98, 1.875], [1.75, 0.0, 1.875]],
        [[0.0, 2.0, 1.35], [1.12, 2.0, 1.35], [2.0, 1.12, 1.35], [2.0, 0.0, 1.35]],
        [[0.0, 2.0, 0.9], [1.12, 2.0, 0.9], [2.0, 1.12, 0.9], [2.0, 0.0, 0.9]],
    ],
    # Lower body
    [  # 8
        [[2.0, 0.0, 0.9], [2.0, -1.12, 0.9], [1.12, -2.0, 0.9], [0.0, -2.0, 0.9]],
        [[2.0, 0.0, 0.45], [2.0, -1.12, 0.45], [1.12, -2.0, 0.45], [0.0, -2.0, 0.45]],
        [[1.5, 0.0, 0.225], [1.5, -0.84, 0.225], [0.84, -1.5, 0.225], [0.0, -1.5, 0.225]],
        [[1.5, 0.0, 0.15], [1.5, -0.84, 0.15], [0.84, -1.5, 0.15], [0.0, -1.5, 0.15]],
    ],
    [  # 9
        [[0.0, -2.0, 0.9], [-1.12, -2.0, 0.9], [-2.0, -1.12, 0.9], [-2.0, 0.0, 0.9]],
        [[0.0, -2.0, 0.45], [-1.12, -2.0, 0.45], [-2.0, -1.12, 0.45], [-2.0, 0.0, 0.45]],
        [[0.0, -1.5, 0.225], [-0.84, -1.5, 0.225], [-1.5, -0.84, 0.225], [-1.5, 0.0, 0.225]],
        [[0.0, -1.5, 0.15], [-0.84, -1.5, 0.15], [-1.5, -0.84, 0.15], [-1.5, 0.0, 0.15]],
    ],
    [  # 10
        [[-2.0, 0.0, 0.9], [-2.0, 1.12, 0.9], [-1.12, 2.0, 0.9], [0.0, 2.0, 0.9]],
        [[-2.0, 0.0, 0.45], [-2.0, 1.12, 0.45], [-1.12, 2.0, 0.45], [0.0, 2.0, 0.45]],
        [[-1.5, 0.0, 0.225], [-1.5, 0.84, 0.225], [-0.84, 1.5, 0.225], [0.0, 1.5, 0.225]],
        [[-1.5, 0.0, 0.15], [-1.5, 0.84, 0.15], [-0.84, 1.5, 0.15], [0.0, 1.5, 0.15]],
    ],
    [  # 11
        [[0.0, 2.0, 0.9], [1.12, 2.0, 0.9], [2.0, 1.12, 0.9], [2.0, 0.0, 0.9]],
        [[0.0, 2.0, 0.45], [1.12, 2.0, 0.45], [2.0, 1.12, 0.45], [2.0, 0.0, 0.45]],
        [[0.0, 1.5, 0.225], [0.84, 1.5, 0.225], [1.5, 0.84, 0.225], [1.5, 0.0, 0.225]],
        [[0.0, 1.5, 0.15], [0.84, 1.5, 0.15], [1.5, 0.84, 0.15], [1.5, 0.0, 0.15]],
    ],
    # Handle
    [  # 12
        [[-1.6, 0.0, 2.025], [-1.6, -0.3, 2.025], [-1.5, -0.3, 2.25], [-1.5, 0.0, 2.25]],
        [[-2.3, 0.0, 2.025], [-2.3, -0.3, 2.025], [-2.5, -0.3, 2.25], [-2.5, 0.0, 2.25]],
        [[-2.7, 0.0, 2.025], [-2.7, -0.3, 2.025], [-3.0, -0.3, 2.25], [-3.0, 0.0, 2.25]],
        [[-2.7, 0.0, 1.8], [-2.7, -0.3, 1.8], [-3.0, -0.3, 1.8], [-3.0, 0.0, 1.8]],
    ],
    [  # 13
        [[-1.5, 0.0, 2.25], [-1.5, 0.3, 2.25], [-1.6, 0.3, 2.025], [-1.6, 0.0, 2.025]],
        [[-2.5, 0.0, 2.25], [-2.5, 0.3, 2.25], [-2.3, 0.3, 2.025], [-2.3, 0.0, 2.025]],
        [[-3.0, 0.0, 2.25], [-3.0, 0.3, 2.25], [-2.7, 0.3, 2.025], [-2.7, 0.0, 2.025]],
        [[-3.0, 0.0, 1.8], [-3.0, 0.3, 1.8], [-2.7, 0.3, 1.8], [-2.7, 0.0, 1.8]],
    ],
    [  # 14
        [[-2.7, 0.0, 1.8], [-2.7, -0.3, 1.8], [-3.0, -0.3, 1.8], [-3.0, 0.0, 1.8]],
        [[-2.7, 0.0, 1.575], [-2.7, -0.3, 1.575], [-3.0, -0.3, 1.35], [-3.0, 0.0, 1.35]],
        [[-2.5, 0.0, 1.125], [-2.5, -0.3, 1.125], [-2.65, -0.3, 0.9375], [-2.65, 0.0, 0.9375]],
        [[-2.0, 0.0, 0.9], [-2.0, -0.3, 0.9], [-1.9, -0.3, 0.6], [-1.9, 0.0, 0.6]],
    ],
    [  # 15
        [[-3.0, 0.0, 1.8], [-3.0, 0.3, 1.8], [-2.7, 0.3, 1.8], [-2.7, 0.0, 1.8]],
        [[-3.0, 0.0, 1.35], [-3.0, 0.3, 1.35], [-2.7, 0.3, 1.575], [-2.7, 0.0, 1.575]],
        [[-2.65, 0.0, 0.9375], [-2.65, 0.3, 0.9375], [-2.5, 0.3, 1.125], [-2.5, 0.0, 1.125]],
        [[-1.9, 0.0, 0.6], [-1.9, 0.3, 0.6], [-2.0, 0.3, 0.9], [-2.0, 0.0, 0.9]],
    ],
    # Spout
    [  # 16
        [[1.7, 0.0, 1.425], [1.7, -0.66, 1.425], [1.7, -0.66, 0.6], [1.7, 0.0, 0.6]],
        [[2.6, 0.0, 1.425], [2.6, -0.66, 1.425], [3.1, -0.66, 0.825], [3.1, 0.0, 0.825]],
        [[2.3, 0.0, 2.1], [2.3, -0.25, 2.1], [2.4, -0.25, 2.025], [2.4, 0.0, 2.025]],
        [[2.7, 0.0, 2.4], [2.7, -0.25, 2.4], [3.3, -0.25, 2.4], [3.3, 0.0, 2.4]],
    ],
    [  # 17
        [[1.7, 0.0, 0.6], [1.7, 0.66, 0.6], [1.7, 0.66, 1.425], [1.7, 0.0, 1.425]],
        [[3.1, 0.0, 0.825], [3.1, 0.66, 0.825], [2.6, 0.66, 1.425], [2.6, 0.0, 1.425]],
        [[2.4, 0.0, 2.025], [2.4, 0.25, 2.025], [2.3, 0.25, 2.1], [2.3, 0.0, 2.1]],
        [[3.3, 0.0, 2.4], [3.3, 0.25, 2.4], [2.7, 0.25, 2.4], [2.7, 0.0, 2.4]],
    ],
    [  # 18
        [[2.7, 0.0, 2.4], [2.7, -0.25, 2.4], [3.3, -0.25, 2.4], [3.3, 0.0, 2.4]],
        [[2.8, 0.0, 2.475], [2.8, -0.25, 2.475], [3.525, -0.25, 2.49375], [3.525, 0.0, 2.49375]],
        [[2.9, 0.0, 2.475], [2.9, -0.15, 2.475], [3.45, -0.15, 2.5125], [3.45, 0.0, 2.5125]],
        [[2.8, 0.0, 2.4], [2.8, -0.15, 2.4], [3.2, -0.15, 2.4], [3.2, 0.0, 2.4]],
    ],
    [  # 19
        [[3.3, 0.0, 2.4], [3.3, 0.25, 2.4], [2.7, 0.25, 2.4], [2.7, 0.0, 2.4]],
        [[3.525, 0.0, 2.49375], [3.525, 0.25, 2.49375], [2.8, 0.25, 2.475], [2.8, 0.0, 2.475]],
        [[3.45, 0.0, 2.5125], [3.45, 0.15, 2.5125], [2.9, 0.15, 2.475], [2.9, 0.0, 2.475]],
        [[3.2, 0.0, 2.4], [3.2, 0.15, 2.4], [2.8, 0.15, 2.4], [2.8, 0.0, 2.4]],
    ],
    # Lid knob
    [  # 20
        [[0.0, 0.0, 3.15], [0.0, 0.0, 3.15], [0.0, 0.0, 3.15], [0.0, 0.0, 3.15]],
        [[0.8, 0.0, 3.15], [0.8, -0.45, 3.15], [0.45, -0.8, 3.15], [0.0, -0.8, 3.15]],
        [[0.0, 0.0, 2.85], [0.0, 0.0, 2.85], [0.0, 0.0, 2.85], [0.0, 0.0, 2.85]],
        [[0.2, 0.0, 2.7], [0.2, -0.112, 2.7], [0.112, -0.2, 2.7], [0.0, -0.2, 2.7]],
    ],
    [  # 21
        [[0.0, 0.0, 3.15], [0.0, 0.0, 3.15], [0.0, 0.0, 3.15], [0.0, 0.0, 3.15]],
        [[0.0, -0.8, 3.15], [-0.45, -0.8, 3.15], [-0.8, -0.45, 3.15], [-0.8, 0.0, 3.15]],
        [[0.0, 0.0, 2.85], [0.0, 0.0, 2.85], [0.0, 0.0, 2.85], [0.0, 0.0, 2.85]],
        [[0.0, -0.2, 2.7], [-0.112, -0.2, 2.7], [-0.2, -0.112, 2.7], [-0.2, 0.0, 2.7]],
    ],
    [  # 22
        [[0.0, 0.0, 3.15], [0.0, 0.0, 3.15], [0.0, 0.0, 3.15], [0.0, 0.0, 3.15]],
        [[-0.8, 0.0, 3.15], [-0.8, 0.45, 3.15], [-0.45, 0.8, 3.15], [0.0, 0.8, 3.15]],
        [[0.0, 0.0, 2.85], [0.0, 0.0, 2.85], [0.0, 0.0, 2.85], [0.0, 0.0, 2.85]],
        [[-0.2, 0.0, 2.7], [-0.2, 0.112, 2.7], [-0.112, 0.2, 2.7], [0.0, 0.2, 2.7]],
    ],
    [  # 23
        [[0.0, 0.0, 3.15], [0.0, 0.0, 3.15], [0.0, 0.0, 3.15], [0.0, 0.0, 3.15]],
        [[0.0, 0.8, 3.15], [0.45, 0.8, 3.15], [0.8, 0.45, 3.15], [0.8, 0.0, 3.15]],
        [[0.0, 0.0, 2.85], [0.0, 0.0, 2.85], [0.0, 0.0, 2.85], [0.0, 0.0, 2.85]],
        [[0.0, 0.2, 2.7], [0.112, 0.2, 2.7], [0.2, 0.112, 2.7], [0.2, 0.0, 2.7]],
    ],
    # Lid
    [  # 24
        [[0.2, 0.0, 2.7], [0.2, -0.112, 2.7], [0.112, -0.2, 2.7], [0.0, -0.2, 2.7]],
        [[0.4, 0.0, 2.55], [0.4, -0.224, 2.55], [0.224, -0.4, 2.55], [0.0, -0.4, 2.55]],
        [[1.3, 0.0, 2.55], [1.3, -0.728, 2.55], [0.728, -1.3, 2.55], [0.0, -1.3, 2.55]],
        [[1.3, 0.0, 2.4], [1.3, -0.728, 2.4], [0.728, -1.3, 2.4], [0.0, -1.3, 2.4]],
    ],
    [  # 25
        [[0.0, -0.2, 2.7], [-0.112, -0.2, 2.7], [-0.2, -0.112, 2.7], [-0.2, 0.0, 2.7]],
        [[0.0, -0.4, 2.55], [-0.224, -0.4, 2.55], [-0.4, -0.224, 2.55], [-0.4, 0.0, 2.55]],
        [[0.0, -1.3, 2.55], [-0.728, -1.3, 2.55], [-1.3, -0.728, 2.55], [-1.3, 0.0, 2.55]],
        [[0.0, -1.3, 2.4], [-0.728, -1.3, 2.4], [-1.3, -0.728, 2.4], [-1.3, 0.0, 2.4]],
    ],
    [  # 26
        [[-0.2, 0.0, 2.7], [-0.2, 0.112, 2.7], [-0.112, 0.2, 2.7], [0.0, 0.2, 2.7]],
        [[-0.4, 0.0, 2.55], [-0.4, 0.224, 2.55], [-0.224, 0.4, 2.55], [0.0, 0.4, 2.55]],
        [[-1.3, 0.0, 2.55], [-1.3, 0.728, 2.55], [-0.728, 1.3, 2.55], [0.0, 1.3, 2.55]],
        [[-1.3, 0.0, 2.4], [-1.3, 0.728, 2.4], [-0.728, 1.3, 2.4], [0.0, 1.3, 2.4]],
    ],
    [  # 27
        [[0.0, 0.2, 2.7], [0.112, 0.2, 2.7], [0.2, 0.112, 2.7], [0.2, 0.0, 2.7]],
        [[0.0, 0.4, 2.55], [0.224, 0.4, 2.55], [0.4, 0.224, 2.55], [0.4, 0.0, 2.55]],
        [[0.0, 1.3, 2.55], [0.728, 1.3, 2.55], [1.3, 0.728, 2.55], [1.3, 0.0, 2.55]],
        [[0.0, 1.3, 2.4], [0.728, 1.3, 2.4], [1.3, 0.728, 2.4], [1.3, 0.0, 2.4]],
    ],
    # Bottom
    [  # 28
        [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0], [0.0, 0.0, 0.0], [0.0, 0.0, 0.0]],
        [[1.425, 0.0, 0.0], [1.425, 0.798, 0.0], [0.798, 1.425, 0.0], [0.0, 1.425, 0.0]],
        [[1.5, 0.0, 0.075], [1.5, 0.84, 0.075], [0.84, 1.5, 0.075], [0.0, 1.5, 0.075]],
        [[1.5, 0.0, 0.15], [1.5, 0.84, 0.15], [0.84, 1.5, 0.15], [0.0, 1.5, 0.15]],
    ],
    [  # 29
        [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0], [0.0, 0.0, 0.0], [0.0, 0.0, 0.0]],
        [[0.0, 1.425, 0.0], [-0.798, 1.425, 0.0], [-1.425, 0.798, 0.0], [-1.425, 0.0, 0.0]],
        [[0.0, 1.5, 0.075], [-0.84, 1.5, 0.075], [-1.5, 0.84, 0.075], [-1.5, 0.0, 0.075]],
        [[0.0, 1.5, 0.15], [-0.84, 1.5, 0.15], [-1.5, 0.84, 0.15], [-1.5, 0.0, 0.15]],
    ],
    [  # 30
        [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0], [0.0, 0.0, 0.0], [0.0, 0.0, 0.0]],
        [[-1.425, 0.0, 0.0], [-1.425, -0.798, 0.0], [-0.798, -1.425, 0.0], [0.0, -1.425, 0.0]],
        [[-1.5, 0.0, 0.075], [-1.5, -0.84, 0.075], [-0.84, -1.5, 0.075], [0.0, -1.5, 0.075]],
        [[-1.5, 0.0, 0.15], [-1.5, -0.84, 0.15], [-0.84, -1.5, 0.15], [0.0, -1.5, 0.15]],
    ],
    [  # 31
        [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0], [0.0, 0.0, 0.0], [0.0, 0.0, 0.0]],
        [[0.0, -1.425, 0.0], [0.798, -1.425, 0.0], [1.425, -0.798, 0.0], [1.425, 0.0, 0.0]],
        [[0.0, -1.5, 0.075], [0.84, -1.5, 0.075], [1.5, -0.84, 0.075], [1.5, 0.0, 0.075]],
        [[0.0, -1.5, 0.15], [0.84, -1.5, 0.15], [1.5, -0.84, 0.15], [1.5, 0.0, 0.15]],
    ],
], dtype=np.float64)


def validateControlPoints(points: np.ndarray) -> None:
    '''
    Check that a control-point table has the teapot catalog's shape.

    Parameters:
    -----------
    points : np.ndarray
        Candidate table, expected shape (32, 4, 4, 3) of finite reals

    Raises:
    -------
    CatalogShapeError : If the shape is wrong or any value is not finite
    '''
    expected = (const.numPatches, const.patchOrder, const.patchOrder, const.numComponents)
    if points.shape != expected:
        raise CatalogShapeError(
            f'Control-point table has shape {points.shape}, expected {expected}'
        )
    if not np.all(np.isfinite(points)):
        raise CatalogShapeError('Control-point table contains non-finite values')


# Startup check: a malformed table is a build defect
validateControlPoints(_CONTROL_POINTS)
_CONTROL_POINTS.setflags(write=False)


######################################################################
# -- Accessors -- #
######################################################################

def getControlPoints() -> np.ndarray:
    '''
    Get the full teapot control-point catalog.

    Returns:
    --------
    np.ndarray : Read-only array of shape (32, 4, 4, 3)
    '''
    return _CONTROL_POINTS


def getPatch(index: int) -> np.ndarray:
    '''
    Get a single patch's 4x4 control-point grid.

    Parameters:
    -----------
    index : int
        Patch number in [0, 32)

    Returns:
    --------
    np.ndarray : Read-only array of shape (4, 4, 3)
    '''
    if not 0 <= index < const.numPatches:
        raise IndexError(
            f'Patch index {index} out of range [0, {const.numPatches})'
        )
    return _CONTROL_POINTS[index]


def getPatchGroup(name: str) -> np.ndarray:
    '''
    Get the control points for one named part of the teapot.

    Parameters:
    -----------
    name : str
        Group name, one of PATCH_GROUPS

    Returns:
    --------
    np.ndarray : Read-only array of shape (nPatches, 4, 4, 3)
    '''
    if name not in PATCH_GROUPS:
        raise ValueError(
            f'Unknown patch group \'{name}\'. '
            f'Available: {list(PATCH_GROUPS.keys())}'
        )
    group = PATCH_GROUPS[name]
    return _CONTROL_POINTS[group.start:group.stop]


def controlPointBounds(
    points: Optional[np.ndarray] = None,
) -> tuple[np.ndarray, np.ndarray]:
    '''
    Component-wise bounds over a set of control points.

    Parameters:
    -----------
    points : np.ndarray, optional
        Any array whose last axis holds (x, y, z). Defaults to the catalog.

    Returns:
    --------
    tuple[np.ndarray, np.ndarray] : (mins, maxs), each shape (3,)
    '''
    if points is None:
        points = _CONTROL_POINTS
    flat = np.asarray(points, dtype=np.float64).reshape(-1, const.numComponents)
    return flat.min(axis=0), flat.max(axis=0)
