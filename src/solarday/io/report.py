"""Rendering of sunrise/sunset results in the output time zone."""

import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..model.events import RiseSet
from .schema import ReportRow

_OFFSET = re.compile(r"([+-])([0-9]{2}):?([0-9]{2})")


def resolve_tz(name: Optional[str]) -> Optional[tzinfo]:
  """
  Map a zone name to a tzinfo. None means the OS local zone.

  Accepts "UTC"/"Z", fixed offsets such as "-04:00", and IANA names.
  """
  if name is None:
    return None
  if name.upper() in ("UTC", "Z"):
    return timezone.utc
  m = _OFFSET.fullmatch(name)
  if m:
    sign, hh, mm = m.groups()
    delta = timedelta(hours=int(hh), minutes=int(mm))
    return timezone(-delta if sign == "-" else delta)
  try:
    return ZoneInfo(name)
  except (ZoneInfoNotFoundError, ValueError) as e:
    raise ValueError(f"unknown time zone: {name}") from e


def localize(instant: datetime, tz: Optional[tzinfo]) -> datetime:
  return instant.astimezone(tz) if tz is not None else instant.astimezone()


def report_row(location: str, result: RiseSet, tz: Optional[tzinfo] = None) -> ReportRow:
  rise = localize(result.sunrise, tz)
  fall = localize(result.sunset, tz)
  return ReportRow(
    location=location,
    date=rise.date().isoformat(),
    sunrise=f"{rise.hour:02d}:{rise.minute:02d}",
    sunset=f"{fall.hour:02d}:{fall.minute:02d}",
    sunrise_utc=result.sunrise,
    sunset_utc=result.sunset,
  )


def tsv_line(row: ReportRow) -> str:
  return f"{row.date}\t{row.sunrise}\t{row.sunset}"
