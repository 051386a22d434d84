"""Deterministic low-poly pattern generator.

A pattern is fully determined by (width, height, seed, emotion). The seed
drives a sine-based generator whose draws are consumed in a fixed order:
grid jitter (x then y per point), palette (hue, saturation, lightness per
colour), then one colour pick per triangle. Changing that order changes
every pattern ever stored, so it must stay as is.

Markup and number formatting follow the browser template. Output is
deterministic within one runtime; across runtimes it may differ in the last
digits because `sin` is not bit-identical between math libraries.
"""
import base64
import logging
import math
import random
import uuid
from typing import Optional, Union

from whispher.models.emotion import Emotion, PaletteProfile
from whispher.models.pattern import (
    HSLColor,
    PatternRequest,
    PatternResponse,
    Point,
    Seed,
    Triangle,
)
from whispher.services.palettes import get_palette_profile, resolve_emotion

logger = logging.getLogger(__name__)

CELL_SIZE = 60
VARIANCE = 0.75
PALETTE_SIZE = 5
STROKE_WIDTH = 0.5

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600

DATA_URI_PREFIX = "data:image/svg+xml;base64,"

_INT32_MAX = 2147483647
_UINT32_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    if value > _INT32_MAX:
        value -= 1 << 32
    return value


def _utf16_code_units(text: str):
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def hash_seed(text: str) -> int:
    """Rolling 32-bit signed hash (hash * 31 + code unit) over a string.

    Code units are UTF-16, so strings outside the BMP hash the same way
    they do in the browser.
    """
    value = 0
    for code in _utf16_code_units(text):
        value = _to_int32(value * 31 + code)
    return value


def normalize_seed(seed: Seed) -> float:
    """Convert a numeric or string seed to the generator's numeric seed.

    Numbers pass through untouched, range is the caller's business.
    Strings are hashed and scaled into [0, 1].
    """
    if isinstance(seed, str):
        return abs(hash_seed(seed)) / _INT32_MAX
    return seed


class SeededRandom:
    """Sine-based generator with a private counter.

    Not suitable for anything but reproducible visuals. Each call to
    generate a pattern must use its own instance.
    """

    def __init__(self, seed: float) -> None:
        self.counter = seed * 1000

    def random(self) -> float:
        x = math.sin(self.counter) * 10000
        self.counter += 1
        return x - math.floor(x)


def grid_shape(width: float, height: float) -> tuple[int, int]:
    """Return (cols, rows) of grid cells needed to cover the canvas."""
    cols = math.ceil(width / CELL_SIZE) + 1
    rows = math.ceil(height / CELL_SIZE) + 1
    return cols, rows


def generate_points(cols: int, rows: int, rng: SeededRandom) -> list[Point]:
    """Build the jittered grid, row-major over -1..rows by -1..cols."""
    points = []
    for row in range(-1, rows + 1):
        for col in range(-1, cols + 1):
            x = col * CELL_SIZE + (rng.random() - 0.5) * CELL_SIZE * VARIANCE
            y = row * CELL_SIZE + (rng.random() - 0.5) * CELL_SIZE * VARIANCE
            points.append(Point(x=x, y=y))
    return points


def derive_palette(profile: PaletteProfile, rng: SeededRandom) -> list[HSLColor]:
    """Draw PALETTE_SIZE colours around the profile's base values."""
    colors = []
    for _ in range(PALETTE_SIZE):
        hue = profile.base_hue + (rng.random() - 0.5) * profile.hue_range
        saturation = profile.saturation_base + rng.random() * profile.saturation_range
        lightness = profile.lightness_base + rng.random() * profile.lightness_range
        colors.append(HSLColor(hue=hue, saturation=saturation, lightness=lightness))
    return colors


def _pick(colors: list[HSLColor], rng: SeededRandom) -> HSLColor:
    # x - floor(x) can round up to 1.0 for tiny negative x
    index = min(math.floor(rng.random() * len(colors)), len(colors) - 1)
    return colors[index]


def triangulate(
    points: list[Point],
    cols: int,
    rows: int,
    colors: list[HSLColor],
    rng: SeededRandom,
) -> list[Triangle]:
    """Split every grid cell into two triangles and colour them.

    Per cell the top-left/top-right/bottom-left triangle is emitted (and
    coloured) before the top-right/bottom-right/bottom-left one.
    """
    points_per_row = cols + 2
    triangles = []
    for row in range(rows):
        for col in range(cols):
            top_left = row * points_per_row + col
            top_right = top_left + 1
            bottom_left = top_left + points_per_row
            bottom_right = bottom_left + 1

            triangles.append(
                Triangle(
                    points=(points[top_left], points[top_right], points[bottom_left]),
                    color=_pick(colors, rng),
                )
            )
            triangles.append(
                Triangle(
                    points=(points[top_right], points[bottom_right], points[bottom_left]),
                    color=_pick(colors, rng),
                )
            )
    return triangles


def format_number(value: Union[int, float]) -> str:
    """Format a number the way ECMAScript's Number#toString does.

    Shortest round-trip digits, integers without a trailing ".0", and
    exponent notation only below 1e-6 or from 1e21 up.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    mantissa, _, exp = repr(abs(value)).partition("e")
    int_part, _, frac_part = mantissa.partition(".")
    raw = int_part + frac_part
    digits = raw.lstrip("0")
    # position of the decimal point relative to the first significant digit
    point = len(int_part) + int(exp or 0) - (len(raw) - len(digits))
    digits = digits.rstrip("0")
    k = len(digits)

    if k <= point <= 21:
        return sign + digits + "0" * (point - k)
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits
    exponent = point - 1
    exp_str = ("+" if exponent >= 0 else "-") + str(abs(exponent))
    if k == 1:
        return sign + digits + "e" + exp_str
    return sign + digits[0] + "." + digits[1:] + "e" + exp_str


def format_color(color: HSLColor) -> str:
    return (
        f"hsl({format_number(color.hue)}, "
        f"{format_number(color.saturation)}%, "
        f"{format_number(color.lightness)}%)"
    )


def _polygon(triangle: Triangle) -> str:
    points = " ".join(
        f"{format_number(p.x)},{format_number(p.y)}" for p in triangle.points
    )
    color = format_color(triangle.color)
    return (
        f'<polygon points="{points}" fill="{color}" stroke="{color}" '
        f'stroke-width="{format_number(STROKE_WIDTH)}"/>'
    )


def serialize_svg(width: float, height: float, triangles: list[Triangle]) -> str:
    """Render triangles, in order, into a width x height SVG document."""
    body = "".join(_polygon(triangle) for triangle in triangles)
    return (
        "\n"
        f'    <svg width="{format_number(width)}" height="{format_number(height)}" '
        'xmlns="http://www.w3.org/2000/svg">\n'
        f"      {body}\n"
        "    </svg>\n"
        "  "
    )


def encode_data_uri(svg: str) -> str:
    return DATA_URI_PREFIX + base64.b64encode(svg.encode("utf-8")).decode("ascii")


def _check_inputs(width: float, height: float, seed: Seed) -> None:
    for name, value in (("width", width), ("height", height)):
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"{name} must be a finite positive number, got {value!r}")
    if not isinstance(seed, str) and not math.isfinite(seed):
        raise ValueError(f"numeric seed must be finite, got {seed!r}")


def build_triangles(
    width: float,
    height: float,
    seed: Seed,
    emotion: Optional[Union[str, Emotion]],
) -> list[Triangle]:
    """Run the full generation pipeline and return the coloured triangles."""
    _check_inputs(width, height, seed)
    rng = SeededRandom(normalize_seed(seed))
    cols, rows = grid_shape(width, height)
    points = generate_points(cols, rows, rng)
    colors = derive_palette(get_palette_profile(emotion), rng)
    return triangulate(points, cols, rows, colors, rng)


def render_svg(
    width: float = DEFAULT_WIDTH,
    height: float = DEFAULT_HEIGHT,
    seed: Optional[Seed] = None,
    emotion: Optional[Union[str, Emotion]] = Emotion.calm,
) -> str:
    """Return the raw SVG markup for a pattern."""
    if seed is None:
        seed = random.random()
    return serialize_svg(width, height, build_triangles(width, height, seed, emotion))


def generate_pattern(
    width: float = DEFAULT_WIDTH,
    height: float = DEFAULT_HEIGHT,
    seed: Optional[Seed] = None,
    emotion: Optional[Union[str, Emotion]] = Emotion.calm,
) -> str:
    """Generate a pattern as a base64 SVG data URI.

    Args:
        width: Canvas width.
        height: Canvas height.
        seed: Float seed or any string (typically a message UUID). A random
            float is used when omitted, which makes the result one-off.
        emotion: Emotion category; unknown names use the calm palette.

    Returns:
        ``data:image/svg+xml;base64,...`` usable directly as an image source.

    Raises:
        ValueError: On non-finite or non-positive dimensions, or a
            non-finite numeric seed.
    """
    return encode_data_uri(render_svg(width, height, seed, emotion))


def generate_pattern_element(
    width: float,
    height: float,
    seed: Optional[Seed],
    emotion: Optional[Union[str, Emotion]],
) -> str:
    """Alias of generate_pattern kept for the frontend's generatePatternElement."""
    return generate_pattern(width, height, seed, emotion)


def new_seed() -> str:
    """Return a fresh seed for a new message."""
    return str(uuid.uuid4())


def export_filename(seed: Seed, emotion: Union[str, Emotion]) -> str:
    """Return a download filename for a pattern.

    Only ASCII alphanumerics, "-" and "_" of the seed survive, so path separators
    and ".." never reach the filesystem.
    """
    safe_seed = "".join(
        c for c in str(seed) if (c.isascii() and c.isalnum()) or c in "-_"
    )[:64] or "pattern"
    return f"whispher-{resolve_emotion(emotion).value}-{safe_seed}.svg"


class PatternService:
    """Renders patterns for API requests using configured defaults."""

    def __init__(
        self,
        default_width: float = DEFAULT_WIDTH,
        default_height: float = DEFAULT_HEIGHT,
        default_emotion: Union[str, Emotion] = Emotion.calm,
        max_dimension: Optional[float] = None,
    ) -> None:
        self.default_width = default_width
        self.default_height = default_height
        self.default_emotion = resolve_emotion(default_emotion)
        self.max_dimension = max_dimension

    def _resolve(
        self, request: PatternRequest
    ) -> tuple[float, float, Seed, Emotion]:
        width = request.width if request.width is not None else self.default_width
        height = request.height if request.height is not None else self.default_height
        if self.max_dimension is not None:
            for name, value in (("width", width), ("height", height)):
                if value > self.max_dimension:
                    raise ValueError(
                        f"{name} must not exceed {self.max_dimension}, got {value!r}"
                    )
        seed = request.seed if request.seed is not None else new_seed()
        emotion = (
            resolve_emotion(request.emotion)
            if request.emotion is not None
            else self.default_emotion
        )
        return width, height, seed, emotion

    def render(self, request: PatternRequest) -> PatternResponse:
        """Render a pattern and describe it.

        The response echoes the seed actually used (a new UUID when the
        request had none) and the emotion after fallback, so the caller can
        store exactly what reproduces the image.

        Raises:
            ValueError: When the request's dimensions or seed are unusable.
        """
        width, height, seed, emotion = self._resolve(request)
        triangles = build_triangles(width, height, seed, emotion)
        data_uri = encode_data_uri(serialize_svg(width, height, triangles))
        logger.info(
            "Rendered pattern: %s %sx%s (%d triangles)",
            emotion.value,
            format_number(width),
            format_number(height),
            len(triangles),
            extra={
                "emotion": emotion.value,
                "width": width,
                "height": height,
                "triangle_count": len(triangles),
            },
        )
        return PatternResponse(
            data_uri=data_uri,
            seed=seed,
            emotion=emotion,
            width=width,
            height=height,
            triangle_count=len(triangles),
        )

    def render_svg(self, request: PatternRequest) -> tuple[str, Seed, Emotion]:
        """Render raw SVG markup for export, with the seed and emotion used."""
        width, height, seed, emotion = self._resolve(request)
        svg = serialize_svg(width, height, build_triangles(width, height, seed, emotion))
        logger.debug("Exported SVG for %s seed=%s", emotion.value, seed)
        return svg, seed, emotion
