#!/usr/bin/env python3
"""
DNS Backup Manager - Main Entry Point

This is the main entry point for the DNS Backup Manager.
It can be run directly or imported as a module.
"""

from dns_backup_manager.cli.main import main

if __name__ == "__main__":
    main()
