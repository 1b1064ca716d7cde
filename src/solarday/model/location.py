"""ISO 6709 sign-degrees-minutes-seconds coordinates."""

import re
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

# +DDMM+DDDMM or +DDMMSS+DDDMMSS; latitude first (+ is north), then longitude (+ is east)
_SHORT = re.compile(r"([+-][0-9]{2})([0-9]{2})([+-][0-9]{3})([0-9]{2})")
_LONG = re.compile(r"([+-][0-9]{2})([0-9]{2})([0-9]{2})([+-][0-9]{3})([0-9]{2})([0-9]{2})")


class LocationError(ValueError):
  pass


class GeoCoordinate(BaseModel):
  model_config = ConfigDict(frozen=True)

  degrees: int
  minutes: int = Field(0, ge=0, lt=60)
  seconds: int = Field(0, ge=0, lt=60)
  # needed for "-00" degrees, where the int cannot hold the sign
  negative: bool = False

  @property
  def sign(self) -> int:
    return -1 if self.negative or self.degrees < 0 else 1

  def decimal_degrees(self) -> float:
    return self.sign * (abs(self.degrees) + self.minutes / 60.0 + self.seconds / 3600.0)


def _coordinate(deg: str, minutes: str, seconds: str = "0") -> GeoCoordinate:
  return GeoCoordinate(
    degrees=int(deg),
    minutes=int(minutes),
    seconds=int(seconds),
    negative=deg.startswith("-"),
  )


def parse_location(text: str) -> Tuple[GeoCoordinate, GeoCoordinate]:
  """
  Parse a fixed-width ISO 6709 location into (latitude, longitude).

  Accepts the 11 character +DDMM+DDDMM form (seconds are zero) and the
  15 character +DDMMSS+DDDMMSS form. Anything else raises LocationError.
  """
  if len(text) == 11:
    m = _SHORT.fullmatch(text)
    if m is None:
      raise LocationError(f"malformed location: {text!r}")
    lat_d, lat_m, lon_d, lon_m = m.groups()
    lat_s = lon_s = "0"
  elif len(text) == 15:
    m = _LONG.fullmatch(text)
    if m is None:
      raise LocationError(f"malformed location: {text!r}")
    lat_d, lat_m, lat_s, lon_d, lon_m, lon_s = m.groups()
  else:
    raise LocationError(f"location must be 11 or 15 characters long, got {len(text)}: {text!r}")
  try:
    return _coordinate(lat_d, lat_m, lat_s), _coordinate(lon_d, lon_m, lon_s)
  except ValidationError as e:
    raise LocationError(f"location out of range: {text!r}") from e
