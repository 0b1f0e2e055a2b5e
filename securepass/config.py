#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Configuration lookup for SecurePass"""

import logging
import os

from securepass.constants import (
    DATA_DIR_NAME, DB_FILE_NAME, LOG_FILE_NAME, HOME_ENV_VAR, LOG_LEVEL_ENV_VAR
)


def get_data_dir():
    """
    Get the directory that holds the history database and the log file

    Returns:
        Path from SECUREPASS_HOME, or ~/.securepass when it is not set
    """
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return os.path.expanduser(override)
    return os.path.join(os.path.expanduser("~"), DATA_DIR_NAME)


def get_db_path(data_dir=None):
    """Path to the history database inside the data directory"""
    return os.path.join(data_dir or get_data_dir(), DB_FILE_NAME)


def get_log_file(data_dir=None):
    """Path to the log file inside the data directory"""
    return os.path.join(data_dir or get_data_dir(), LOG_FILE_NAME)


def get_log_level():
    """
    Resolve the log level from SECUREPASS_LOG_LEVEL

    Unknown names fall back to INFO.

    Returns:
        Integer logging level
    """
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
