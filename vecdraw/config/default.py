"""
Default configuration settings for vecdraw drawings.
"""

DEFAULT_CONFIG = {
    # Document settings
    "default_width": 600,  # Drawing width in points when none is given
    "default_height": 600,  # Drawing height in points when none is given
    "default_filename": "vecdraw-drawing.png",
    "output_dir": None,  # Relative filenames are resolved against this directory if set
    "background": "white",  # Background painted by the draw() helpers

    # Graphics state defaults
    "line_width": 2.0,
    "font_face": "sans-serif",
    "font_size": 10.0,

    # SVG output
    "precision": 3,  # Decimal places for coordinates in path data
    "validate_output": False,  # Run the SVG validator before writing files

    # Text metrics used when estimating text extents
    "glyph_width": 0.6,  # Average advance per glyph, in ems
    "ascent": 0.8,  # Height above the baseline, in ems
    "descent": 0.2,  # Depth below the baseline, in ems
}
