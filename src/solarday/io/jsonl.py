import json

from .schema import ReportRow


def jsonl_line(row: ReportRow) -> str:
  return json.dumps(row.model_dump(mode="json"), ensure_ascii=False)
