#!/usr/bin/env python3
"""
DNS Backup Manager - Command Line Interface

Main entry point for the DNS Backup Manager CLI.
"""

import argparse
import copy
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from ..core.backup_manager import BackupManager
from ..parsers.snapshot import DEFAULT_BACKUP_FILE
from ..providers.cloudflare_provider import DEFAULT_API_URL

logger = logging.getLogger(__name__)

CREDENTIAL_ENV_VARS = {
    "email": "CLOUDFLARE_EMAIL",
    "key": "CLOUDFLARE_API_KEY",
    "token": "CLOUDFLARE_API_TOKEN",
}


def build_parser() -> argparse.ArgumentParser:
    """Create the CLI parser."""
    parser = argparse.ArgumentParser(
        description="DNS Backup Manager - Snapshot and restore DNS records"
    )
    register_common_arguments(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    backup_parser = subparsers.add_parser("backup", help="backup zones")
    register_common_arguments(backup_parser, default=argparse.SUPPRESS)

    restore_parser = subparsers.add_parser("restore", help="restore zones")
    register_common_arguments(restore_parser, default=argparse.SUPPRESS)
    restore_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be changed without making changes",
    )
    restore_parser.add_argument(
        "--output-file",
        "-o",
        help="File to save dry run diff output (only used with --dry-run)",
    )
    restore_parser.add_argument(
        "--workers",
        "-w",
        type=int,
        help="Number of records applied in parallel (default: 1)",
    )

    return parser


def register_common_arguments(parser: argparse.ArgumentParser, default=None):
    """
    Register arguments shared by backup and restore.

    They are registered on the top-level parser and again on each
    subcommand with ``argparse.SUPPRESS`` as default, so they may be given
    before or after the subcommand without the subcommand resetting them.
    """
    kwargs = {} if default is None else {"default": default}
    parser.add_argument("--config", "-c", help="Configuration file path", **kwargs)
    parser.add_argument("--email", "-e", help="cf account email address", **kwargs)
    parser.add_argument("--key", "-k", help="cf account api key", **kwargs)
    parser.add_argument("--token", "-t", help="cf account api token", **kwargs)
    parser.add_argument("--dir", "-d", help="backup directory (default: ./)", **kwargs)
    parser.add_argument(
        "--url", "-u", help=f"cf api url (default: {DEFAULT_API_URL})", **kwargs
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging", **kwargs
    )


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if getattr(args, "output_file", None) and not args.dry_run:
        print("Error: --output-file can only be used with --dry-run")
        sys.exit(1)

    if args.config and not Path(args.config).exists():
        print(f"Error: Configuration file '{args.config}' not found")
        sys.exit(1)

    config = load_config(args.config) if args.config else get_default_config()
    config = apply_arguments(config, args)
    config_logger(config)

    try:
        manager = BackupManager(config)

        if args.command == "backup":
            manager.backup()
            success = True
        else:
            success = manager.restore(
                dry_run=args.dry_run,
                output_file=args.output_file,
                workers=args.workers,
            )

        if success:
            print(f"DNS {args.command} completed successfully")
            sys.exit(0)
        else:
            print(f"DNS {args.command} failed")
            sys.exit(1)

    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file."""
    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
        logger.info(f"Configuration loaded from {config_path}")
        return config
    except FileNotFoundError:
        logger.warning(f"Config file {config_path} not found, using defaults")
        return get_default_config()
    except yaml.YAMLError as e:
        print(f"Error parsing config file: {e}")
        sys.exit(1)


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "dns_providers": {
            "cloudflare": {
                "api_url": DEFAULT_API_URL,
                "email": "",
                "key": "",
                "token": "",
            }
        },
        "default_provider": "cloudflare",
        "backup": {"dir": "./", "file": DEFAULT_BACKUP_FILE},
        "restore": {"workers": 1},
        "logging": {"level": "INFO"},
    }


def apply_arguments(config: Dict, args: argparse.Namespace) -> Dict:
    """Overlay command-line flags and environment credentials on the config."""
    config = copy.deepcopy(config)
    providers = config.setdefault("dns_providers", {})
    cloudflare = providers.get("cloudflare") or {}
    providers["cloudflare"] = cloudflare

    for field, env_var in CREDENTIAL_ENV_VARS.items():
        value = getattr(args, field, None)
        if value:
            cloudflare[field] = value
        elif not cloudflare.get(field) and os.environ.get(env_var):
            cloudflare[field] = os.environ[env_var]

    if args.url:
        cloudflare["api_url"] = args.url

    if args.dir:
        backup = config.get("backup") or {}
        backup["dir"] = args.dir
        config["backup"] = backup

    if args.verbose:
        logging_config = config.get("logging") or {}
        logging_config["level"] = "DEBUG"
        config["logging"] = logging_config

    return config


def config_logger(config: Dict):
    """Configure logging."""
    logging_config = config.get("logging", None)
    if logging_config:
        log_level = logging_config.get("level", "INFO")
        log_file = logging_config.get("file")

        handlers = [logging.StreamHandler(sys.stdout)]
        if log_file:
            handlers.insert(0, logging.FileHandler(log_file))

        logging.basicConfig(
            level=log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=handlers,
        )
        return

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


if __name__ == "__main__":
    main()
