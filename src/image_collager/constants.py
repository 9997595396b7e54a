"""
Constants used internally by the image collager.

These are implementation-level values that should not be overridden
via config files or CLI arguments.
"""

# Circle cells are shrunk below the inscribed circle of the resized image
CIRCLE_DIAMETER = 0.8

# Padding around the canvas edge and between cells, per shape
RECTANGLE_PADDING = 1
CIRCLE_PADDING = 20

# Canvas colour handling
COLOR_MODE_RGBA = "RGBA"
COLOR_TRANSPARENT = (0, 0, 0, 0)

# Alpha values produced by the circle mask
MASK_OPAQUE = 255
MASK_TRANSPARENT = 0

# Inputs above this edge length are accepted with a warning
MAX_DIMENSION = 6000
