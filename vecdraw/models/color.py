"""
Color model for vecdraw drawings.
Provides immutable RGBA colors parsed from names, hex strings, CSS functions
and numeric tuples, plus simple manipulation helpers.
"""

import math
import colorsys
import random
from typing import Dict, Tuple, Union, Optional, Sequence

# Type definitions
RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, float]
HSL = Tuple[float, float, float]
ColorValue = Union[str, Sequence[float], 'Color']

# Constants
DEFAULT_ALPHA = 1.0
COLOR_PRECISION = 4  # Decimal places for alpha and HSL values

# CSS named colors
_NAMED_COLORS: Dict[str, str] = {
    "aliceblue": "#f0f8ff", "antiquewhite": "#faebd7", "aqua": "#00ffff",
    "aquamarine": "#7fffd4", "azure": "#f0ffff", "beige": "#f5f5dc",
    "bisque": "#ffe4c4", "black": "#000000", "blanchedalmond": "#ffebcd",
    "blue": "#0000ff", "blueviolet": "#8a2be2", "brown": "#a52a2a",
    "burlywood": "#deb887", "cadetblue": "#5f9ea0", "chartreuse": "#7fff00",
    "chocolate": "#d2691e", "coral": "#ff7f50", "cornflowerblue": "#6495ed",
    "cornsilk": "#fff8dc", "crimson": "#dc143c", "cyan": "#00ffff",
    "darkblue": "#00008b", "darkcyan": "#008b8b", "darkgoldenrod": "#b8860b",
    "darkgray": "#a9a9a9", "darkgreen": "#006400", "darkgrey": "#a9a9a9",
    "darkkhaki": "#bdb76b", "darkmagenta": "#8b008b", "darkolivegreen": "#556b2f",
    "darkorange": "#ff8c00", "darkorchid": "#9932cc", "darkred": "#8b0000",
    "darksalmon": "#e9967a", "darkseagreen": "#8fbc8f", "darkslateblue": "#483d8b",
    "darkslategray": "#2f4f4f", "darkslategrey": "#2f4f4f", "darkturquoise": "#00ced1",
    "darkviolet": "#9400d3", "deeppink": "#ff1493", "deepskyblue": "#00bfff",
    "dimgray": "#696969", "dimgrey": "#696969", "dodgerblue": "#1e90ff",
    "firebrick": "#b22222", "floralwhite": "#fffaf0", "forestgreen": "#228b22",
    "fuchsia": "#ff00ff", "gainsboro": "#dcdcdc", "ghostwhite": "#f8f8ff",
    "gold": "#ffd700", "goldenrod": "#daa520", "gray": "#808080",
    "grey": "#808080", "green": "#008000", "greenyellow": "#adff2f",
    "honeydew": "#f0fff0", "hotpink": "#ff69b4", "indianred": "#cd5c5c",
    "indigo": "#4b0082", "ivory": "#fffff0", "khaki": "#f0e68c",
    "lavender": "#e6e6fa", "lavenderblush": "#fff0f5", "lawngreen": "#7cfc00",
    "lemonchiffon": "#fffacd", "lightblue": "#add8e6", "lightcoral": "#f08080",
    "lightcyan": "#e0ffff", "lightgoldenrodyellow": "#fafad2", "lightgray": "#d3d3d3",
    "lightgreen": "#90ee90", "lightgrey": "#d3d3d3", "lightpink": "#ffb6c1",
    "lightsalmon": "#ffa07a", "lightseagreen": "#20b2aa", "lightskyblue": "#87cefa",
    "lightslategray": "#778899", "lightslategrey": "#778899", "lightsteelblue": "#b0c4de",
    "lightyellow": "#ffffe0", "lime": "#00ff00", "limegreen": "#32cd32",
    "linen": "#faf0e6", "magenta": "#ff00ff", "maroon": "#800000",
    "mediumaquamarine": "#66cdaa", "mediumblue": "#0000cd", "mediumorchid": "#ba55d3",
    "mediumpurple": "#9370db", "mediumseagreen": "#3cb371", "mediumslateblue": "#7b68ee",
    "mediumspringgreen": "#00fa9a", "mediumturquoise": "#48d1cc", "mediumvioletred": "#c71585",
    "midnightblue": "#191970", "mintcream": "#f5fffa", "mistyrose": "#ffe4e1",
    "moccasin": "#ffe4b5", "navajowhite": "#ffdead", "navy": "#000080",
    "oldlace": "#fdf5e6", "olive": "#808000", "olivedrab": "#6b8e23",
    "orange": "#ffa500", "orangered": "#ff4500", "orchid": "#da70d6",
    "palegoldenrod": "#eee8aa", "palegreen": "#98fb98", "paleturquoise": "#afeeee",
    "palevioletred": "#db7093", "papayawhip": "#ffefd5", "peachpuff": "#ffdab9",
    "peru": "#cd853f", "pink": "#ffc0cb", "plum": "#dda0dd",
    "powderblue": "#b0e0e6", "purple": "#800080", "rebeccapurple": "#663399",
    "red": "#ff0000", "rosybrown": "#bc8f8f", "royalblue": "#4169e1",
    "saddlebrown": "#8b4513", "salmon": "#fa8072", "sandybrown": "#f4a460",
    "seagreen": "#2e8b57", "seashell": "#fff5ee", "sienna": "#a0522d",
    "silver": "#c0c0c0", "skyblue": "#87ceeb", "slateblue": "#6a5acd",
    "slategray": "#708090", "slategrey": "#708090", "snow": "#fffafa",
    "springgreen": "#00ff7f", "steelblue": "#4682b4", "tan": "#d2b48c",
    "teal": "#008080", "thistle": "#d8bfd8", "tomato": "#ff6347",
    "turquoise": "#40e0d0", "violet": "#ee82ee", "wheat": "#f5deb3",
    "white": "#ffffff", "whitesmoke": "#f5f5f5", "yellow": "#ffff00",
    "yellowgreen": "#9acd32",
}


class ColorError(ValueError):
    """Exception raised for colors that cannot be parsed."""
    pass


class Color:
    """
    Immutable color representation.

    Components are stored as 0-255 integers plus an alpha in 0.0-1.0.
    Numeric tuples whose components are all within 0-1 are read as
    fractions, otherwise as 0-255 values.
    """

    __slots__ = ('_r', '_g', '_b', '_a', '_hash')

    def __init__(self, value: ColorValue, alpha: Optional[float] = None):
        """
        Initialize a color.

        Args:
            value: Color name, hex/rgb()/hsl() string, numeric tuple or Color
            alpha: Optional alpha overriding the one in `value`

        Raises:
            ColorError: If the value cannot be parsed
        """
        if isinstance(value, Color):
            r, g, b, a = value.rgba
        elif isinstance(value, str):
            r, g, b, a = self._parse_color_string(value)
        elif isinstance(value, (tuple, list)) and len(value) in (3, 4):
            r, g, b, a = self._parse_tuple(value)
        else:
            raise ColorError(f"Unsupported color value: {value!r}")

        if alpha is not None:
            a = alpha

        self._set(r, g, b, a)

    def _set(self, r: float, g: float, b: float, a: float) -> None:
        """Store normalised components."""
        try:
            a = float(a)
        except (TypeError, ValueError):
            raise ColorError(f"Invalid alpha value: {a!r}")
        if math.isnan(a):
            raise ColorError("Alpha value cannot be NaN")

        self._r = min(255, max(0, int(round(r))))
        self._g = min(255, max(0, int(round(g))))
        self._b = min(255, max(0, int(round(b))))
        self._a = round(min(1.0, max(0.0, a)), COLOR_PRECISION)
        self._hash = hash((self._r, self._g, self._b, self._a))

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, a: float = DEFAULT_ALPHA) -> 'Color':
        """
        Create a color from fractional RGB values.

        Args:
            r: Red component (0.0-1.0)
            g: Green component (0.0-1.0)
            b: Blue component (0.0-1.0)
            a: Alpha value (0.0-1.0)
        """
        color = cls.__new__(cls)
        color._set(r * 255, g * 255, b * 255, a)
        return color

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: float = DEFAULT_ALPHA) -> 'Color':
        """
        Create a color from HSL values.

        Args:
            h: Hue in degrees
            s: Saturation (0.0-1.0)
            l: Lightness (0.0-1.0)
            a: Alpha value (0.0-1.0)
        """
        r, g, b = colorsys.hls_to_rgb((h % 360) / 360.0, min(1.0, max(0.0, l)), min(1.0, max(0.0, s)))
        return cls.from_rgb(r, g, b, a)

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> 'Color':
        """Create a random opaque color."""
        rng = rng or random
        return cls.from_rgb(rng.random(), rng.random(), rng.random())

    @property
    def red(self) -> int:
        return self._r

    @property
    def green(self) -> int:
        return self._g

    @property
    def blue(self) -> int:
        return self._b

    @property
    def alpha(self) -> float:
        return self._a

    @property
    def rgb(self) -> RGB:
        """Get RGB tuple (0-255)."""
        return (self._r, self._g, self._b)

    @property
    def rgba(self) -> RGBA:
        """Get RGBA tuple (0-255 components, 0.0-1.0 alpha)."""
        return (self._r, self._g, self._b, self._a)

    @property
    def fractions(self) -> Tuple[float, float, float, float]:
        """Get components as 0.0-1.0 fractions."""
        return (self._r / 255, self._g / 255, self._b / 255, self._a)

    @property
    def hsl(self) -> HSL:
        """Get HSL tuple (hue in degrees, saturation and lightness in 0.0-1.0)."""
        h, l, s = colorsys.rgb_to_hls(self._r / 255, self._g / 255, self._b / 255)
        return (round(h * 360, COLOR_PRECISION), round(s, COLOR_PRECISION), round(l, COLOR_PRECISION))

    @property
    def hex(self) -> str:
        """Get hex color string without alpha."""
        return f"#{self._r:02x}{self._g:02x}{self._b:02x}"

    @property
    def is_opaque(self) -> bool:
        return self._a > 0.999

    def with_alpha(self, alpha: float) -> 'Color':
        """Return the same color with another alpha value."""
        return Color(self, alpha=alpha)

    def lighten(self, amount: float = 0.1) -> 'Color':
        """
        Create a lighter version of this color.

        Args:
            amount: Amount to add to the lightness (0.0-1.0)
        """
        h, s, l = self.hsl
        return Color.from_hsl(h, s, min(1.0, l + amount), self._a)

    def darken(self, amount: float = 0.1) -> 'Color':
        """
        Create a darker version of this color.

        Args:
            amount: Amount to subtract from the lightness (0.0-1.0)
        """
        h, s, l = self.hsl
        return Color.from_hsl(h, s, max(0.0, l - amount), self._a)

    def blend(self, other: ColorValue, ratio: float = 0.5) -> 'Color':
        """
        Blend with another color.

        Args:
            other: Color to blend with
            ratio: Weight of `other` (0.0 keeps this color, 1.0 gives `other`)
        """
        other = other if isinstance(other, Color) else Color(other)
        ratio = min(1.0, max(0.0, ratio))
        mix = lambda a, b: a + (b - a) * ratio
        blended = Color.__new__(Color)
        blended._set(mix(self._r, other._r), mix(self._g, other._g), mix(self._b, other._b), mix(self._a, other._a))
        return blended

    def to_svg_string(self) -> str:
        """Color string for SVG paint attributes (alpha is emitted separately)."""
        return self.hex

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return False
        return self.rgba == other.rgba

    def __hash__(self) -> int:
        return self._hash

    def __str__(self) -> str:
        if self._a < 0.999:
            return f"rgba({self._r}, {self._g}, {self._b}, {self._a:.4f})"
        return self.hex

    def __repr__(self) -> str:
        return f"Color(rgb=({self._r}, {self._g}, {self._b}), alpha={self._a:.4f})"

    @staticmethod
    def _parse_tuple(value: Sequence[float]) -> Tuple[float, float, float, float]:
        """Parse an (r, g, b[, a]) tuple of fractions or 0-255 values."""
        try:
            components = [float(c) for c in value[:3]]
            alpha = float(value[3]) if len(value) == 4 else DEFAULT_ALPHA
        except (TypeError, ValueError):
            raise ColorError(f"Color components must be numbers, got {value!r}")

        if any(math.isnan(c) for c in components):
            raise ColorError(f"Color components cannot be NaN: {value!r}")

        if all(0.0 <= c <= 1.0 for c in components):
            components = [c * 255 for c in components]
        elif len(value) == 4:
            # 0-255 tuples carry a 0-255 alpha
            alpha = alpha / 255
        r, g, b = components
        return r, g, b, alpha

    @staticmethod
    def _parse_color_string(value: str) -> Tuple[float, float, float, float]:
        """
        Parse color string into RGBA components.

        Raises:
            ColorError: If color string can't be parsed
        """
        text = value.strip().lower().replace(" ", "")

        if text in _NAMED_COLORS:
            return Color._parse_hex(_NAMED_COLORS[text])

        if text.startswith('#'):
            return Color._parse_hex(text)

        if text.startswith('rgb'):
            return Color._parse_function(text, 'rgb')

        if text.startswith('hsl'):
            return Color._parse_function(text, 'hsl')

        raise ColorError(f"Unknown color: {value!r}")

    @staticmethod
    def _parse_hex(hex_string: str) -> Tuple[float, float, float, float]:
        """Parse #rgb, #rgba, #rrggbb or #rrggbbaa."""
        digits = hex_string.lstrip('#')
        try:
            if len(digits) in (3, 4):
                values = [int(ch * 2, 16) for ch in digits]
            elif len(digits) in (6, 8):
                values = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
            else:
                raise ColorError(f"Invalid hex color format: #{digits}")
        except ValueError:
            raise ColorError(f"Invalid hex color format: #{digits}")

        alpha = values[3] / 255 if len(values) == 4 else DEFAULT_ALPHA
        return values[0], values[1], values[2], alpha

    @staticmethod
    def _parse_function(text: str, kind: str) -> Tuple[float, float, float, float]:
        """Parse rgb()/rgba()/hsl()/hsla() notation."""
        if '(' not in text or not text.endswith(')'):
            raise ColorError(f"Invalid {kind} color format: {text}")
        name = text[:text.index('(')]
        if name not in (kind, kind + 'a'):
            raise ColorError(f"Invalid {kind} color format: {text}")

        parts = text[text.index('(') + 1:-1].split(',')
        if len(parts) not in (3, 4):
            raise ColorError(f"Invalid {kind} color format: {text}")

        try:
            alpha = float(parts[3]) if len(parts) == 4 else DEFAULT_ALPHA
            if kind == 'rgb':
                channels = []
                for part in parts[:3]:
                    if part.endswith('%'):
                        channels.append(float(part[:-1]) * 2.55)
                    else:
                        channels.append(float(part))
                return channels[0], channels[1], channels[2], alpha

            h = float(parts[0])
            s = float(parts[1].rstrip('%')) / 100
            l = float(parts[2].rstrip('%')) / 100
        except ValueError:
            raise ColorError(f"Invalid {kind} values in: {text}")

        r, g, b, _ = Color.from_hsl(h, s, l).rgba
        return r, g, b, alpha


def parse_color(value: ColorValue, *rest: float) -> Color:
    """
    Build a color from the argument forms accepted by the drawing API.

    Accepts a single color value, or three/four separate numeric components.
    """
    if rest:
        return Color((value,) + tuple(rest))
    return value if isinstance(value, Color) else Color(value)


def named_colors() -> Tuple[str, ...]:
    """Names of all recognised colors."""
    return tuple(sorted(_NAMED_COLORS))


# Logo palette
LOGO_BLUE = Color((0.251, 0.388, 0.847))
LOGO_RED = Color((0.796, 0.235, 0.2))
LOGO_GREEN = Color((0.22, 0.596, 0.149))
LOGO_PURPLE = Color((0.584, 0.345, 0.698))
