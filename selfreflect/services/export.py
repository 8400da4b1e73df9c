import json
from datetime import date
from typing import List, Optional

from ..models import Entry

EXPORT_MIME = "application/json"


def export_json(entries: List[Entry]) -> str:
    return json.dumps([e.to_dict() for e in entries], ensure_ascii=False, indent=2)


def export_filename(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"journal_export_{today.isoformat()}.json"
