"""Style layer — bullet style capability and the render environment.

Styles may import from the domain layer and from Rich.
They must never import from output, commands, or config.
"""
