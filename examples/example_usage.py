"""Ví dụ: dùng service layer (không qua Flask).

Mục tiêu: minh hoạ luồng login -> logout -> sửa -> tải lại với storage trong bộ nhớ.
"""

from datetime import date, datetime

import config.testing as settings

from src.log_desk.log_desk.container import build_container


def main():
    container = build_container(settings=settings)
    svc = container.timelog_service

    svc.record_login(now=datetime(2026, 2, 2, 9, 0))
    svc.record_logout(now=datetime(2026, 2, 2, 17, 45))
    svc.update_record(0, login_time="8:30 AM", logout_time="5:45 PM", today=date(2026, 2, 2))

    result = svc.load_records()
    print(result.integrity_ok, [r.to_dict() for r in result.records])
    print(svc.get_today_status(now=datetime(2026, 2, 2, 18, 0)))


if __name__ == "__main__":
    main()
