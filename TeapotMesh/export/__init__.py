# -- Export Subpackage -- #

'''
Writers for the tessellated teapot: STL files and viewer JSON buffers.
'''

from TeapotMesh.export.viewerExporter import ViewerExporter
from TeapotMesh.export.stlExporter import StlExporter

__all__ = ['ViewerExporter', 'StlExporter']
