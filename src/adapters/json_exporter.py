"""JSON export of stage receipts.

Lets CI pipelines pick up the staged path and checksum without scraping the
console output.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import StageReceipt


def export_receipt_json(*, receipt: StageReceipt, output_path: Path) -> Path:
    """Write `receipt` as UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = receipt.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
