from pathlib import Path
from typing import Dict, Literal, Optional

import yaml
from pydantic import BaseModel, field_validator

from .location import parse_location

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class SuntimeConfig(BaseModel):
  time_zone: Optional[str] = None
  output: Literal["tsv", "jsonl"] = "tsv"
  log_level: str = "WARNING"
  places: Dict[str, str] = {}

  @field_validator("places")
  @classmethod
  def _places_parse(cls, v: Dict[str, str]) -> Dict[str, str]:
    for name, loc in v.items():
      try:
        parse_location(loc)
      except ValueError as e:
        raise ValueError(f"place {name!r}: {e}") from e
    return v

  @field_validator("log_level")
  @classmethod
  def _level_known(cls, v: str) -> str:
    v = v.upper()
    if v not in LOG_LEVELS:
      raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
    return v


def load_config(path: str) -> SuntimeConfig:
  raw = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
  return SuntimeConfig.model_validate(raw)
