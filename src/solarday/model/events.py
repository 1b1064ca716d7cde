from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class EventKind(Enum):
  OCCURS = "occurs"
  NEVER_RISES = "never_rises"
  NEVER_SETS = "never_sets"


@dataclass(frozen=True)
class SolarEvent:
  """UTC hour/minute of a sunrise or sunset, or why there is none."""
  kind: EventKind
  hour: Optional[int] = None
  minute: Optional[int] = None

  @property
  def occurs(self) -> bool:
    return self.kind is EventKind.OCCURS


@dataclass(frozen=True)
class RiseSet:
  sunrise: datetime
  sunset: datetime
