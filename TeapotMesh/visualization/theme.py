# -- Visualization Theme -- #

'''
Centralized dark-mode theme for all TeapotMesh Plotly visualizations.

Change colors or template here to restyle every plot at once.

Sean Bowman [10/19/2026]
'''

from TeapotMesh import constants as const

# Plotly template
TEMPLATE = 'plotly_dark'

# Primary color palette (Material Design, visible on dark backgrounds)
BLUE = '#42A5F5'
RED = '#EF5350'
GREEN = '#66BB6A'
ORANGE = '#FFA726'
PURPLE = '#AB47BC'
BROWN = '#A1887F'
CYAN = '#26C6DA'

# Neutrals
WHITE = '#E0E0E0'
REFERENCE_LINE = '#888888'

# Ordered palette for multi-series plots
PALETTE = [BLUE, RED, GREEN, ORANGE, PURPLE, BROWN, CYAN]

# Teapot surface color, from the shading material color
TEAPOT = 'rgb({:d}, {:d}, {:d})'.format(*(round(255 * c) for c in const.materialColor))

# Background behind the teapot (matches the original clear color, 25% gray)
BACKGROUND = 'rgb(64, 64, 64)'
