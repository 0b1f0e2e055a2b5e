#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Logging module for SecurePass"""

import logging
import os

LOGGER_NAME = "SecurePass"


def setup_logger(log_file, level=logging.INFO):
    """
    Set up the logging system

    Args:
        log_file: Path to the log file
        level: Logging level for the logger and its file handler

    Returns:
        Logger instance
    """
    # Create logger
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    log_file = os.path.abspath(log_file)
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == log_file:
            handler.setLevel(level)
            return logger

    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    # Create file handler
    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(level)

    # Create formatter
    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
    file_handler.setFormatter(formatter)

    # Add handler to logger
    logger.addHandler(file_handler)

    return logger
