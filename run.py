#!/usr/bin/env python3
"""
Slang Translator - Server Launcher
==================================
Start the Slang Translator API server.

Usage:
    python run.py
"""
import sys
from pathlib import Path

import requests

# Add package to path if running directly
package_dir = Path(__file__).parent
if str(package_dir) not in sys.path:
    sys.path.insert(0, str(package_dir))

from slang_translator.config import config


class Colors:
    RESET = '\033[0m'
    BOLD = '\033[1m'
    RED = '\033[91m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    CYAN = '\033[96m'


def check_lookup_service() -> bool:
    """Check if the Urban Dictionary API is reachable."""
    try:
        response = requests.get(
            config.discovery.urban_dictionary_url,
            params={'term': 'slay'},
            timeout=3
        )
        return response.status_code == 200
    except requests.RequestException:
        return False


def print_banner():
    """Display startup banner"""
    print(f"\n{Colors.CYAN}{'=' * 60}{Colors.RESET}")
    print(f"{Colors.BOLD}{Colors.GREEN}  SLANG TRANSLATOR{Colors.RESET}")
    print(f"{Colors.CYAN}{'=' * 60}{Colors.RESET}")
    print(f"  Server:   http://{config.server.host}:{config.server.port}")
    print(f"  Database: {config.paths.db_path}")
    print(f"{Colors.CYAN}{'=' * 60}{Colors.RESET}\n")


def main():
    """Main entry point"""
    print_banner()

    if config.discovery.enabled:
        print(f"{Colors.YELLOW}Checking Urban Dictionary...{Colors.RESET}")
        if check_lookup_service():
            print(f"{Colors.GREEN}   Urban Dictionary is reachable{Colors.RESET}\n")
        else:
            print(f"{Colors.RED}   Urban Dictionary not reachable; discovery will only use learned terms{Colors.RESET}\n")

    from slang_translator.app import run_server
    run_server()


if __name__ == '__main__':
    main()
