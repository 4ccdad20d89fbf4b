"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the aggregation lives in the services.
"""

import importlib

from attendance_tracker.analytics.filters import FilterSpec
from attendance_tracker.config import get_settings_module
from attendance_tracker.container import build_container
from attendance_tracker.reports.service import report_to_dict


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(api_config=settings.ATTENDANCE_API)

    view = container.attendance_service.dashboard(FilterSpec(status="Present", limit=5))
    print(view.stats)
    print(report_to_dict(container.report_service.build_report())["summary"])


if __name__ == "__main__":
    main()
