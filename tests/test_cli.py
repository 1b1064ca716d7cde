import json
import re
import time
from datetime import datetime, timezone

import pytest
from click.testing import CliRunner

from solarday.cli.main import main

NOON = "2024-06-21T12:00:00Z"
LINE = re.compile(r"(\d{4}-\d{2}-\d{2})\t(\d{2}):(\d{2})\t(\d{2}):(\d{2})")


def _run(*args):
  return CliRunner().invoke(main, list(args))


def test_no_locations_is_usage_error():
  for args in ([], ["0"]):
    result = _run(*args)
    assert result.exit_code == 1
    assert "usage:" in result.stderr
    assert result.stdout == ""


def test_new_york_line():
  result = _run("--start-time", NOON, "--tz", "-04:00", "0", "+404246-0740022")
  assert result.exit_code == 0
  m = LINE.fullmatch(result.stdout.strip())
  assert m is not None
  day, rh, rm, sh, sm = m.groups()
  assert day == "2024-06-21"
  rise = int(rh) * 60 + int(rm)
  fall = int(sh) * 60 + int(sm)
  assert 5 * 60 + 10 <= rise <= 5 * 60 + 40
  assert 20 * 60 + 15 <= fall <= 20 * 60 + 45
  assert rise < fall


def test_negative_offset_and_southern_location():
  result = _run("--start-time", NOON, "--tz", "UTC", "-1", "-3352+15113")
  assert result.exit_code == 0
  assert result.stdout.startswith("2024-06-20\t")


def test_bad_location_continues():
  result = _run("--start-time", NOON, "--tz", "UTC", "0", "+4042", "+5214+02101")
  assert result.exit_code == 0
  assert "error: +4042: bad location coords" in result.stderr
  assert len(result.stdout.splitlines()) == 1


def test_polar_location_reported():
  result = _run("--start-time", "2024-12-21T12:00:00Z", "0", "+7813+01539", "+5214+02101")
  assert result.exit_code == 0
  assert "error: +7813+01539: sun today never rises or sets" in result.stderr
  assert len(result.stdout.splitlines()) == 1


def test_all_locations_failing_still_exit_zero():
  result = _run("0", "nowhere")
  assert result.exit_code == 0
  assert result.stdout == ""


def test_days_option():
  result = _run("--start-time", NOON, "--tz", "UTC", "--days", "3", "0", "+5214+02101")
  dates = [line.split("\t")[0] for line in result.stdout.splitlines()]
  assert dates == ["2024-06-21", "2024-06-22", "2024-06-23"]


def test_jsonl_and_places_from_config(tmp_path):
  cfg = tmp_path / "config.yaml"
  cfg.write_text("time_zone: UTC\noutput: jsonl\nplaces:\n  warsaw: \"+5214+02101\"\n", encoding="utf-8")
  result = _run("--config", str(cfg), "--start-time", NOON, "0", "warsaw")
  assert result.exit_code == 0
  doc = json.loads(result.stdout)
  assert doc["location"] == "warsaw"
  assert doc["date"] == "2024-06-21"


def test_command_line_overrides_config(tmp_path):
  cfg = tmp_path / "config.yaml"
  cfg.write_text("output: jsonl\n", encoding="utf-8")
  result = _run("--config", str(cfg), "--format", "tsv", "--tz", "UTC", "--start-time", NOON, "0", "+5214+02101")
  assert LINE.fullmatch(result.stdout.strip())


def test_invalid_config_is_rejected(tmp_path):
  cfg = tmp_path / "config.yaml"
  cfg.write_text("output: csv\n", encoding="utf-8")
  result = _run("--config", str(cfg), "0", "+5214+02101")
  assert result.exit_code == 2
  assert result.stdout == ""


def test_unknown_time_zone_is_rejected():
  result = _run("--tz", "Not/AZone", "0", "+5214+02101")
  assert result.exit_code == 2


@pytest.fixture
def warsaw_local(monkeypatch):
  monkeypatch.setenv("TZ", "Europe/Warsaw")
  time.tzset()
  yield
  monkeypatch.undo()
  time.tzset()


def test_default_now_and_local_zone(warsaw_local):
  result = _run("0", "+5214+02101")
  assert result.exit_code == 0
  m = LINE.fullmatch(result.stdout.strip())
  assert m is not None
  day, rh, rm, sh, sm = m.groups()
  # computed on the UTC day; local midnight may already be past it
  assert day in (
    datetime.now().astimezone().date().isoformat(),
    datetime.now(timezone.utc).date().isoformat(),
  )
  assert int(rh) * 60 + int(rm) < int(sh) * 60 + int(sm)


def test_non_integer_offset_is_usage_error():
  result = _run("abc", "+5214+02101")
  assert result.exit_code == 2
  assert result.stdout == ""


def test_offset_out_of_date_range_is_usage_error():
  for offset in ("99999999", "-99999999", "10000000000"):
    result = _run(offset, "+5214+02101")
    assert result.exit_code == 2
    assert "OFFSET" in result.stderr
    assert result.exception is None or isinstance(result.exception, SystemExit)


def test_days_past_date_range_is_usage_error():
  result = _run("--start-time", "9999-12-30T12:00:00Z", "--days", "5", "0", "+5214+02101")
  assert result.exit_code == 2
  assert result.stdout == ""
