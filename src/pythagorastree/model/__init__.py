"""
The MODEL layer contains pure data structures and the fractal geometry.
It has NO knowledge of the GUI (Qt).
It deals with Geometry, Memoization, Tree construction and Export.
"""
