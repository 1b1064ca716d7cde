from datetime import datetime

from pydantic import BaseModel


class ReportRow(BaseModel):
  location: str
  date: str
  sunrise: str
  sunset: str
  sunrise_utc: datetime
  sunset_utc: datetime
