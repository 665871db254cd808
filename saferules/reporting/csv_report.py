from __future__ import annotations

import csv
import io
from collections.abc import Iterable

from saferules.rules.model import Rule

CSV_COLUMNS = ["ID", "Category", "Severity", "Text"]


def render_csv(rules: Iterable[Rule]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_COLUMNS)
    for r in rules:
        writer.writerow([r.id, r.category, r.severity, r.text])
    return buf.getvalue()
