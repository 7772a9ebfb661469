"""
The MODEL layer contains the geometric value types and the algebra between them.
It has NO knowledge of rendering, input or any consumer of these primitives.
"""
