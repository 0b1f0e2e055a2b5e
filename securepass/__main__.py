#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
SecurePass

This program allows you to:
1. Generate strong, random passwords from selected character classes
2. Keep a history of generated passwords across sessions
3. Review the ten most recent passwords or clear the history

History is stored locally, unencrypted, at ~/.securepass/history.db
(or under $SECUREPASS_HOME when it is set).
"""

import asyncio

from securepass.app import SecurePassApp
from securepass.config import get_data_dir, get_log_file, get_log_level
from securepass.logger import setup_logger


def main():
    """Run the SecurePass application"""
    print("=== SecurePass ===")
    print("Generate secure, random passwords instantly.")

    data_dir = get_data_dir()
    logger = setup_logger(get_log_file(data_dir), get_log_level())

    try:
        app = SecurePassApp(data_dir=data_dir, logger=logger)
        asyncio.run(app.run_interactive_menu())
    except (KeyboardInterrupt, EOFError):
        print("\nProgram interrupted. Exiting...")
    except Exception as e:
        print(f"An error occurred: {e}")
        logger.error(f"Unhandled exception: {e}", exc_info=True)


if __name__ == "__main__":
    main()
