"""
Behave environment configuration for DNS Backup Manager scenarios.

Scenarios run against the in-memory mock provider, each in its own
temporary backup directory.
"""

import logging
import shutil
import tempfile
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def before_all(context):
    """Set up test environment before all tests."""
    context.base_dir = Path(__file__).parent.parent
    logger.info("Test environment setup complete")


def before_scenario(context, scenario):
    """Set up each test scenario."""
    context.scenario_name = scenario.name
    context.backup_dir = Path(tempfile.mkdtemp(prefix="dns-backup-"))
    context.zones = []
    context.records = []
    context.result = None
    context.error = None

    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Clean up after each test scenario."""
    try:
        shutil.rmtree(context.backup_dir)
    except OSError as e:
        logger.warning(f"Failed to cleanup backup directory: {e}")

    logger.info(f"Completed scenario: {scenario.name}")
