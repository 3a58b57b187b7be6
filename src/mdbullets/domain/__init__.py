"""Domain layer — bullet glyph values and the depth-to-glyph rule.

This layer depends only on stdlib.
It must never import from styles, output, commands, or config.
"""
