"""
Interactive Sierpinski tetrahedron renderer.
"""
__version__ = "0.1.0"
