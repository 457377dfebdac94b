"""Simple CLI to validate the snapshot store connection.

This adapter is meant for local operations: it builds the database adapter
from the composition root, then checks that the store answers a trivial query
and exposes the aggregation functions the repository calls.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger

REQUIRED_FUNCTIONS = (
    "get_overview_range_aggregated",
    "get_month_overview_aggregated",
)

_FUNCTION_CHECK = (
    "SELECT count(*) FROM pg_proc p "
    "JOIN pg_namespace n ON n.oid = p.pronamespace "
    "WHERE n.nspname = 'public' AND p.proname = '{name}'"
)


def main() -> None:
    """Run connectivity checks against the configured snapshot store."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    engine = adapter.get_snapshot_engine()
    logger.info(f"Snapshot DB: {engine.url}")

    missing = []
    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")
        for name in REQUIRED_FUNCTIONS:
            found = conn.exec_driver_sql(
                _FUNCTION_CHECK.format(name=name)
            ).scalar()
            if not found:
                missing.append(name)

    if missing:
        logger.warning(f"Missing store functions: {', '.join(missing)}")
    else:
        logger.info("Snapshot store connection is working.")


if __name__ == "__main__":  # pragma: no cover
    main()
