"""
Sunrise/sunset time from the Almanac for Computers (1990), Nautical Almanac
Office, United States Naval Observatory.

Accurate to a minute or two between the polar circles. Every coefficient
below is the published value; the output is compared minute-for-minute
against the almanac tables, so they must not be rounded.
"""

import logging
import math

from ..model.events import EventKind, SolarEvent

logger = logging.getLogger(__name__)

# center of the sun 50' below the horizon: 34' refraction + 16' semi-diameter
ZENITH_OFFICIAL = 90 + 50 / 60.0

DEGREES_PER_HOUR = 15
RISE_HOUR = 6
SET_HOUR = 18

# mean anomaly: M = 0.9856 t - 3.289
MEAN_ANOMALY_RATE = 0.9856
MEAN_ANOMALY_EPOCH = 3.289

# true longitude: L = M + 1.916 sin M + 0.020 sin 2M + 282.634
CENTER_EQ_1 = 1.916
CENTER_EQ_2 = 0.020
PERIHELION_LONGITUDE = 282.634

# tan RA = cos(obliquity) tan L, sin Dec = sin(obliquity) sin L
COS_OBLIQUITY = 0.91764
SIN_OBLIQUITY = 0.39782

# local mean time: T = H + RA - 0.06571 t - 6.622
SIDEREAL_RATE = 0.06571
SIDEREAL_OFFSET = 6.622


def _wrap(value, period):
  # x % period rounds tiny negatives up to period itself
  value %= period
  if value >= period:
    value -= period
  return value


def _sin(deg):
  return math.sin(math.radians(deg))


def _cos(deg):
  return math.cos(math.radians(deg))


def calc_suntime(sunrise: bool, day_of_year: int, latitude: float, longitude: float,
                 zenith: float = ZENITH_OFFICIAL) -> SolarEvent:
  """
  Calculate the UTC time of sunrise (or sunset) on a day of the year.

  Params:
    sunrise: True for sunrise, False for sunset.
    day_of_year: Zero-based; 0 is January 1.
    latitude: Decimal degrees, positive north.
    longitude: Decimal degrees, positive east.
    zenith: Angle between the zenith and the center of the sun at the event.

  Returns:
    SolarEvent with the UTC hour and minute, or a NEVER_RISES / NEVER_SETS
    event when the sun stays below / above the zenith angle all day.
  """
  if not all(math.isfinite(v) for v in (latitude, longitude, zenith)):
    raise ValueError(f"non-finite input: lat={latitude} lng={longitude} zenith={zenith}")

  n = day_of_year + 1

  lng_hour = longitude / DEGREES_PER_HOUR
  t = n + ((RISE_HOUR if sunrise else SET_HOUR) - lng_hour) / 24

  m = (MEAN_ANOMALY_RATE * t) - MEAN_ANOMALY_EPOCH

  true_long = m + (CENTER_EQ_1 * _sin(m)) + (CENTER_EQ_2 * _sin(2 * m)) + PERIHELION_LONGITUDE
  true_long = _wrap(true_long, 360)

  ra = math.degrees(math.atan(COS_OBLIQUITY * math.tan(math.radians(true_long))))
  ra = _wrap(ra, 360)

  # right ascension has to be in the same quadrant as L
  l_quadrant = math.floor(true_long / 90) * 90
  ra_quadrant = math.floor(ra / 90) * 90
  ra = (ra + (l_quadrant - ra_quadrant)) / DEGREES_PER_HOUR

  sin_dec = SIN_OBLIQUITY * _sin(true_long)
  cos_dec = math.cos(math.asin(sin_dec))

  cos_h = (_cos(zenith) - (sin_dec * _sin(latitude))) / (cos_dec * _cos(latitude))
  if cos_h > 1:
    logger.debug("day %d lat %.4f: cosH=%.4f, sun never rises", day_of_year, latitude, cos_h)
    return SolarEvent(EventKind.NEVER_RISES)
  if cos_h < -1:
    logger.debug("day %d lat %.4f: cosH=%.4f, sun never sets", day_of_year, latitude, cos_h)
    return SolarEvent(EventKind.NEVER_SETS)

  h = math.degrees(math.acos(cos_h))
  if sunrise:
    h = 360 - h
  h /= DEGREES_PER_HOUR

  local_t = h + ra - (SIDEREAL_RATE * t) - SIDEREAL_OFFSET

  ut = _wrap(local_t - lng_hour, 24)
  frac, whole = math.modf(ut)

  return SolarEvent(EventKind.OCCURS, hour=int(whole), minute=math.floor(frac * 60))
