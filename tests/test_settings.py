import pytest
from pydantic import ValidationError

from solarday.model.settings import SuntimeConfig, load_config


def test_defaults():
  cfg = SuntimeConfig()
  assert cfg.time_zone is None
  assert cfg.output == "tsv"
  assert cfg.log_level == "WARNING"
  assert cfg.places == {}


def test_load_yaml(tmp_path):
  p = tmp_path / "config.yaml"
  p.write_text("time_zone: UTC\noutput: jsonl\nlog_level: debug\nplaces:\n  nyc: \"+404246-0740022\"\n", encoding="utf-8")
  cfg = load_config(str(p))
  assert cfg.time_zone == "UTC"
  assert cfg.output == "jsonl"
  assert cfg.log_level == "DEBUG"
  assert cfg.places["nyc"] == "+404246-0740022"


def test_empty_file(tmp_path):
  p = tmp_path / "empty.yaml"
  p.write_text("", encoding="utf-8")
  assert load_config(str(p)) == SuntimeConfig()


@pytest.mark.parametrize("body", [
  "output: csv\n",
  "log_level: LOUD\n",
  "places:\n  home: \"+4042\"\n",
  "- a\n- b\n",
])
def test_invalid(tmp_path, body):
  p = tmp_path / "bad.yaml"
  p.write_text(body, encoding="utf-8")
  with pytest.raises(ValidationError):
    load_config(str(p))
