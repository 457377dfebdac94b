"""CLI adapter printing a dashboard payload for one client.

The view and its parameters come from ``REPORT_*`` environment variables so
the command can be scheduled the same way as the other dashboard jobs.
"""

import json
import os

import dotenv

from src.adapters.interface.api.responses import error_payload
from src.adapters.interface.api.snapshot_views import (
    cash_view,
    custodian_view,
    months_view,
    overview_view,
)
from src.infrastructure.logging.logger import get_app_logger

VIEWS = {
    "custodian": custodian_view,
    "cash": cash_view,
    "overview": overview_view,
    "months": months_view,
}

_PARAMS = {
    "client_id": "REPORT_CLIENT_ID",
    "custodian": "REPORT_CUSTODIAN",
    "account": "REPORT_ACCOUNT",
    "from": "REPORT_FROM",
    "to": "REPORT_TO",
    "year": "REPORT_YEAR",
    "month": "REPORT_MONTH",
    "month_date": "REPORT_MONTH_DATE",
}


def read_params() -> dict[str, str]:
    """Collect request parameters from the environment."""
    params = {}
    for key, env_name in _PARAMS.items():
        value = os.getenv(env_name)
        if value:
            params[key] = value
    return params


def main() -> None:
    """Run the configured view and print its JSON payload."""
    dotenv.load_dotenv()
    logger = get_app_logger()
    view_name = os.getenv("REPORT_VIEW", "overview").strip().lower()
    view = VIEWS.get(view_name)
    if view is None:
        logger.error(f"Unknown REPORT_VIEW: {view_name}")
        message = (
            f"Unknown view {view_name!r}; "
            f"expected one of {', '.join(sorted(VIEWS))}"
        )
        print(json.dumps(error_payload(message)))
        return

    payload = view(read_params())
    print(json.dumps(payload, indent=2, ensure_ascii=False))


if __name__ == "__main__":  # pragma: no cover
    main()
