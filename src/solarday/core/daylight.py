from dataclasses import dataclass
from datetime import datetime, timezone
import logging
from typing import Optional

from ..model.events import RiseSet
from ..model.location import GeoCoordinate
from .solar import ZENITH_OFFICIAL, calc_suntime

logger = logging.getLogger(__name__)


def suntime(instant: datetime, latitude: GeoCoordinate, longitude: GeoCoordinate) -> Optional[RiseSet]:
  """
  Sunrise and sunset on the UTC calendar day of `instant`.

  Both results keep the UTC date of `instant`; only the time of day is
  replaced. West of Greenwich the sunset can therefore fall before the
  sunrise in UTC. Returns None when the sun does not rise or does not set.
  """
  if instant.tzinfo is None:
    raise ValueError("instant must be timezone-aware")
  utc = instant.astimezone(timezone.utc)
  day_of_year = utc.timetuple().tm_yday - 1

  lat = latitude.decimal_degrees()
  lng = longitude.decimal_degrees()

  rise = calc_suntime(True, day_of_year, lat, lng, ZENITH_OFFICIAL)
  if not rise.occurs:
    logger.debug("%s at %.4f,%.4f: %s", utc.date(), lat, lng, rise.kind.value)
    return None
  sunrise = utc.replace(hour=rise.hour, minute=rise.minute, second=0, microsecond=0)

  fall = calc_suntime(False, day_of_year, lat, lng, ZENITH_OFFICIAL)
  if not fall.occurs:
    logger.debug("%s at %.4f,%.4f: %s", utc.date(), lat, lng, fall.kind.value)
    return None
  sunset = utc.replace(hour=fall.hour, minute=fall.minute, second=0, microsecond=0)

  return RiseSet(sunrise=sunrise, sunset=sunset)


@dataclass
class Daylight:
  latitude: GeoCoordinate
  longitude: GeoCoordinate

  def sunrise_sunset(self, instant: datetime) -> Optional[RiseSet]:
    return suntime(instant, self.latitude, self.longitude)
