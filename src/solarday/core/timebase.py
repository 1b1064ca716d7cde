from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass
class Timebase:
  start: datetime
  days: int = 1

  def instants(self):
    for i in range(self.days):
      yield self.start + timedelta(days=i)

  @property
  def end(self) -> datetime:
    return self.start + timedelta(days=self.days - 1)
