# SPDX-License-Identifier: Apache-2.0

"""NetBox site reconciler.

Reads the declared sites, compares them with NetBox and creates, updates or
deletes sites until NetBox matches the declaration.
"""

import sys

from loguru import logger

from .config import Config
from .netbox_client import SiteClient
from .reconciler import NOOP, Reconciler, load_declarations
from .state import StateFile
from .utils import setup_logging


def main() -> None:
    """Main execution function."""
    setup_logging()

    try:
        config = Config.from_environment()

        declared = load_declarations(config.sites_file)
        state = StateFile(config.state_file)
        state.load()

        with SiteClient.connect(config) as client:
            reconciler = Reconciler(client, state)
            changes = reconciler.plan(declared)

            pending = [change for change in changes if change.action != NOOP]
            for change in pending:
                logger.info(f"Planned {change}")
            logger.info(f"{len(pending)} of {len(changes)} sites need changes")

            if config.dry_run:
                logger.info("DRY_RUN is set - not applying changes")
                return

            reconciler.apply(changes)

        logger.info("NetBox site reconciliation completed successfully")

    except Exception as e:
        logger.error(f"Failed to reconcile sites: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
