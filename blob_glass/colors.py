# colors.py
# RGB color value type, hex/HSL parsing and luminance helpers

import re

import numpy as np

LUM_THRESHOLD = 0.03928

PERCEPTIVE_FACTOR_RED = 0.2126
PERCEPTIVE_FACTOR_GREEN = 0.7152
PERCEPTIVE_FACTOR_BLUE = 0.0722

COLOR_RE = re.compile(r"(#)?([0-9a-f]+)", re.IGNORECASE)


class InvalidColor(ValueError):
    """Raised when a string is not a #rgb or #rrggbb hex color."""

    def __init__(self, value):
        super().__init__(f"Invalid color {value!r}")
        self.value = value


def gun_luminance(v):
    """sRGB gamma expansion of a single channel normalized to [0,1]."""
    if v <= LUM_THRESHOLD:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def hue2rgb(p, q, t):
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def _channel(v):
    return max(0, min(255, int(v)))


class Color:
    """RGB color with channels nominally in [0,255].

    Arithmetic may push channels out of range; serialization clamps.
    Operations taking ``out`` write into it instead of allocating.
    """

    __slots__ = ("r", "g", "b")

    def __init__(self, r=0, g=0, b=0):
        self.r = r
        self.g = g
        self.b = b

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return (self.r, self.g, self.b) == (other.r, other.g, other.b)

    def __hash__(self):
        return hash((self.r, self.g, self.b))

    def __iter__(self):
        return iter((self.r, self.g, self.b))

    def __repr__(self):
        return f"Color({self.r}, {self.g}, {self.b})"

    def mix(self, other, ratio, out=None):
        """Linear mix towards ``other``; channels truncated to int."""
        if out is None:
            out = Color()
        out.r = int(self.r + (other.r - self.r) * ratio)
        out.g = int(self.g + (other.g - self.g) * ratio)
        out.b = int(self.b + (other.b - self.b) * ratio)
        return out

    def multiply(self, n, out=None):
        if out is None:
            out = Color()
        out.r = self.r * n
        out.g = self.g * n
        out.b = self.b * n
        return out

    def scale(self, r, g, b, out=None):
        if out is None:
            out = Color()
        out.r = self.r * r
        out.g = self.g * g
        out.b = self.b * b
        return out

    def set(self, r, g=None, b=None):
        if isinstance(r, Color):
            self.r, self.g, self.b = r.r, r.g, r.b
        else:
            self.r, self.g, self.b = r, g, b
        return self

    def to_hex(self):
        return "#{:02x}{:02x}{:02x}".format(_channel(self.r), _channel(self.g), _channel(self.b))

    def to_rgba(self, alpha):
        return f"rgba({_channel(self.r)},{_channel(self.g)},{_channel(self.b)},{alpha})"

    def to_int(self):
        return (_channel(self.r) << 16) + (_channel(self.g) << 8) + _channel(self.b)

    def luminance(self):
        """Relative luminance (0 for black, 1 for white)."""
        return (
            PERCEPTIVE_FACTOR_RED * gun_luminance(self.r / 255)
            + PERCEPTIVE_FACTOR_GREEN * gun_luminance(self.g / 255)
            + PERCEPTIVE_FACTOR_BLUE * gun_luminance(self.b / 255)
        )

    @staticmethod
    def parse(text):
        """Parse ``#rgb`` / ``#rrggbb`` (``#`` optional, any case).

        Raises InvalidColor for anything else.
        """
        m = COLOR_RE.fullmatch(text) if isinstance(text, str) else None
        if m is None:
            raise InvalidColor(text)
        col = m.group(2)
        if len(col) == 3:
            return Color(*(int(c, 16) * 17 for c in col))
        if len(col) == 6:
            return Color(*(int(col[i : i + 2], 16) for i in (0, 2, 4)))
        raise InvalidColor(text)

    @staticmethod
    def from_value(text, factor=1.0):
        return Color.parse(text).multiply(factor)

    @staticmethod
    def from_hsl(h, s, l):
        """Build a color from fractional hue ``h`` in [0,1), ``s`` and ``l`` in [0,1]."""
        if s <= 0:
            r = g = b = l
        else:
            q = l * (1 + s) if l < 0.5 else l + s - l * s
            p = 2 * l - q
            r = hue2rgb(p, q, h + 1 / 3)
            g = hue2rgb(p, q, h)
            b = hue2rgb(p, q, h - 1 / 3)
        return Color(round(r * 255), round(g * 255), round(b * 255))


def parse_color(text):
    return Color.parse(text)


def luminance(color):
    if isinstance(color, str):
        color = Color.parse(color)
    return color.luminance()


def contrast_ratio(a, b):
    """WCAG contrast ratio between two colors, 1.0 to 21.0."""
    l1 = luminance(a)
    l2 = luminance(b)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def colors_to_array(values, factor=1.0):
    """Parse hex strings into an (n, 3) float32 array scaled by ``factor/255``."""
    array = np.zeros((len(values), 3), dtype=np.float32)
    f = factor / 255
    for i, value in enumerate(values):
        col = Color.parse(value)
        array[i] = (col.r * f, col.g * f, col.b * f)
    return array


def random_palette(rng, size=5):
    """Analogous palette of ``size`` hex colors spread around a random hue."""
    if size < 2:
        raise ValueError("palette needs at least 2 colors")
    base = rng.random()
    spread = 0.08 + 0.17 * rng.random()
    palette = []
    for i in range(size):
        hue = (base + spread * i) % 1.0
        saturation = 0.35 + 0.4 * rng.random()
        # dark first, light last so there is always something to contrast with
        lightness = 0.2 + 0.65 * i / (size - 1)
        palette.append(Color.from_hsl(hue, saturation, lightness).to_hex())
    return palette
