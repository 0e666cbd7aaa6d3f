"""
The MODEL layer contains the fractal geometry and the scene state.
It has NO knowledge of the GUI (Qt). It only talks to a DrawingSurface.
"""
