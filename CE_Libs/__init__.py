"""
CE_Libs - Coral Editor Library Modules

This package contains core functionality for the Coral Editor project,
organized into specialized sub-packages:

- GeometryLib: View transform, geometry types and crop-region resolution
- SelectionLib: Drag-selection state machine and the per-frame crop session
- ImageEditingLib: Image loading, cropping, saving and the editor window
"""

__version__ = "0.1.0"
