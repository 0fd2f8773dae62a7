"""
Celestial mathematics helpers

Angle normalisation shared by every transform, and the star display
colours: colour index to temperature, temperature to blackbody RGB.
"""

import math
from typing import Tuple

RAD_PER_DEG = math.pi / 180.0
DEG_PER_RAD = 180.0 / math.pi

METERS_PER_AU = 149597870700.0


def normalize_deg(angle: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    a = angle % 360.0
    # -1e-17 % 360.0 rounds to 360.0
    return 0.0 if a >= 360.0 else a


def normalize_hours(hours: float) -> float:
    """Wrap a time in hours into [0, 24)."""
    h = hours % 24.0
    return 0.0 if h >= 24.0 else h


def clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else x


def ci_to_temperature(ci: float) -> float:
    """Effective temperature (K) from a B-V colour index (Ballesteros 2012)."""
    return 4600.0 * (1.0 / (0.92 * ci + 1.7) + 1.0 / (0.92 * ci + 0.62))


# Display colour of a black body, 1000 K .. 29800 K in 200 K steps, at
# maximum brightness (Mitchell Charity's blackbody table, 0xRRGGBB).
BLACKBODY_STEP = 200
BLACKBODY_MIN_K = 1000
BLACKBODY_MAX_K = 29800
_BLACKBODY_RGB = (
    0xff3800, 0xff5300, 0xff6500, 0xff7300, 0xff7e00, 0xff8912, 0xff932c,
    0xff9d3f, 0xffa54f, 0xffad5e, 0xffb46b, 0xffbb78, 0xffc184, 0xffc78f,
    0xffcc99, 0xffd1a3, 0xffd5ad, 0xffd9b6, 0xffddbe, 0xffe1c6, 0xffe4ce,
    0xffe8d5, 0xffebdc, 0xffeee3, 0xfff0e9, 0xfff3ef, 0xfff5f5, 0xfff8fb,
    0xfef9ff, 0xf9f6ff, 0xf5f3ff, 0xf0f1ff, 0xedefff, 0xe9edff, 0xe6ebff,
    0xe3e9ff, 0xe0e7ff, 0xdde6ff, 0xdae4ff, 0xd8e3ff, 0xd6e1ff, 0xd3e0ff,
    0xd1dfff, 0xcfddff, 0xcedcff, 0xccdbff, 0xcadaff, 0xc9d9ff, 0xc7d8ff,
    0xc6d8ff, 0xc4d7ff, 0xc3d6ff, 0xc2d5ff, 0xc1d4ff, 0xc0d4ff, 0xbfd3ff,
    0xbed2ff, 0xbdd2ff, 0xbcd1ff, 0xbbd1ff, 0xbad0ff, 0xb9d0ff, 0xb8cfff,
    0xb7cfff, 0xb7ceff, 0xb6ceff, 0xb5cdff, 0xb5cdff, 0xb4ccff, 0xb3ccff,
    0xb3ccff, 0xb2cbff, 0xb2cbff, 0xb1caff, 0xb1caff, 0xb0caff, 0xafc9ff,
    0xafc9ff, 0xafc9ff, 0xaec9ff, 0xaec8ff, 0xadc8ff, 0xadc8ff, 0xacc7ff,
    0xacc7ff, 0xacc7ff, 0xabc7ff, 0xabc6ff, 0xaac6ff, 0xaac6ff, 0xaac6ff,
    0xa9c6ff, 0xa9c5ff, 0xa9c5ff, 0xa9c5ff, 0xa8c5ff, 0xa8c5ff, 0xa8c4ff,
    0xa7c4ff, 0xa7c4ff, 0xa7c4ff, 0xa7c4ff, 0xa6c3ff, 0xa6c3ff, 0xa6c3ff,
    0xa6c3ff, 0xa5c3ff, 0xa5c3ff, 0xa5c3ff, 0xa5c2ff, 0xa4c2ff, 0xa4c2ff,
    0xa4c2ff, 0xa4c2ff, 0xa4c2ff, 0xa3c2ff, 0xa3c1ff, 0xa3c1ff, 0xa3c1ff,
    0xa3c1ff, 0xa3c1ff, 0xa2c1ff, 0xa2c1ff, 0xa2c1ff, 0xa2c1ff, 0xa2c0ff,
    0xa2c0ff, 0xa1c0ff, 0xa1c0ff, 0xa1c0ff, 0xa1c0ff, 0xa1c0ff, 0xa1c0ff,
    0xa1c0ff, 0xa0c0ff, 0xa0bfff, 0xa0bfff, 0xa0bfff, 0xa0bfff, 0xa0bfff,
    0xa0bfff, 0xa0bfff, 0x9fbfff, 0x9fbfff, 0x9fbfff,
)

# saturation boost applied to every channel
_COLOUR_EXAGGERATION = 1.5


def blackbody_rgb(temperature: float) -> Tuple[int, int, int]:
    """
    RGB display colour (0..255) of a black body at the given temperature.

    Temperatures snap down to the 200 K grid and clamp to the table range.
    Each channel is pushed away from white by 1.5x so star colours read
    clearly on screen.
    """
    t = int(temperature // BLACKBODY_STEP) * BLACKBODY_STEP
    t = int(clamp(t, BLACKBODY_MIN_K, BLACKBODY_MAX_K))
    packed = _BLACKBODY_RGB[(t - BLACKBODY_MIN_K) // BLACKBODY_STEP]
    channels = ((packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF)
    r, g, b = (int(max(0.0, 255 - _COLOUR_EXAGGERATION * (255 - c))) for c in channels)
    return (r, g, b)


def bv_to_rgb(bv: float) -> Tuple[int, int, int]:
    """Convert a B-V colour index to an RGB display colour (0..255)."""
    return blackbody_rgb(ci_to_temperature(clamp(bv, -0.4, 2.0)))
