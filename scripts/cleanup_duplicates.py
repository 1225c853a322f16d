"""Utility script to remove duplicated notifications outside the HTTP API."""

from __future__ import annotations

import argparse
import logging

from app.application.use_cases.notifications import cleanup_duplicate_notifications
from app.config import get_settings
from app.domain.exceptions import DuplicateCleanupError
from app.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the cleanup run."""

    parser = argparse.ArgumentParser(
        description="Remove duplicated notification campaigns and inbox notifications.",
    )
    parser.add_argument(
        "--lookback-days",
        type=int,
        default=None,
        help="Días hacia atrás a revisar en las bandejas (por defecto: NOTIFICATION_LOOKBACK_DAYS)",
    )
    parser.add_argument(
        "--merge-policy",
        choices=("collapse", "window"),
        default=None,
        help="Política de fusión de notificaciones (por defecto: NOTIFICATION_MERGE_POLICY)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Muestra el detalle de cada etapa de la limpieza.",
    )
    return parser.parse_args()


def main() -> None:
    """Run the duplicate cleanup using the provided command line arguments."""

    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    overrides: dict[str, object] = {}
    if args.lookback_days is not None:
        if args.lookback_days <= 0:
            raise SystemExit("--lookback-days debe ser mayor que cero.")
        overrides["notification_lookback_days"] = args.lookback_days
    if args.merge_policy is not None:
        overrides["notification_merge_policy"] = args.merge_policy
    settings = get_settings().model_copy(update=overrides)

    initialize_database()

    session = SessionLocal()
    try:
        report = cleanup_duplicate_notifications(session, settings=settings)
    except DuplicateCleanupError as exc:
        raise SystemExit(f"No se pudo completar la limpieza: {exc}") from exc
    else:
        print(
            f"{report.message}:\n"
            f"  Campañas eliminadas: {report.deleted_campaigns}\n"
            f"  Notificaciones eliminadas: {report.deleted_notifications}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
