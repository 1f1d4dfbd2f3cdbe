"""Backup time logs.

Note: Xuất toàn bộ bản ghi hợp lệ (sau khi lọc) ra một file JSON có dấu thời gian,
không phụ thuộc vào backend lưu trữ đang dùng (file / mysql).
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.log_desk.log_desk.container import build_container


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)
    result = container.timelog_service.load_records()

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"time_logs_{ts}.json"
    out_file.write_text(
        json.dumps([r.to_dict() for r in result.records], ensure_ascii=False, indent=2),
        encoding="utf-8",
    )

    print(f"OK: Backup created: {out_file} (records={len(result.records)})")
    if not result.integrity_ok:
        print("WARNING: checksum mismatch, please verify the exported time logs.")


if __name__ == "__main__":
    main()
