# -- Visualization Subpackage -- #

'''
Plotly previews of the tessellated teapot and its control nets.
'''
