"""Ví dụ: dùng service layer (không qua Flask).

Controllers chỉ là lớp mỏng; nghiệp vụ dự đoán nằm ở Services / forecast engine.
"""

import importlib
from datetime import date, datetime, timedelta

from config import get_settings_module

from src.timetrack.timetrack.container import build_container


def _sample_entries(today: date) -> list[dict]:
    entries = []
    for back in range(1, 29):
        day = today - timedelta(days=back)
        if day.weekday() >= 5:
            continue
        entries.append(
            {
                "id": f"e{back}",
                "date": day.isoformat(),
                "type": "work",
                "sessions": [
                    {"id": f"s{back}", "clockIn": "08:45", "clockOut": "17:15", "breakStart": "12:00", "breakEnd": "12:40"}
                ],
                "notes": "",
            }
        )
    return entries


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    now = datetime.now()
    entries = _sample_entries(now.date())

    for p in container.forecast_service.predictions(entries, now=now):
        print(p.to_dict())

    for point in container.forecast_service.forecast(entries, future_days=3, now=now)[-4:]:
        print(point.to_dict())

    print(container.report_service.week_summary(entries, today=now.date(), week_offset=-1).to_dict())


if __name__ == "__main__":
    main()
