#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Constants for SecurePass"""

# Character sets for password generation, in canonical order
UPPERCASE_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE_CHARS = "abcdefghijklmnopqrstuvwxyz"
NUMBER_CHARS = "0123456789"
SYMBOL_CHARS = "!@#$%^&*()_+~`|}{[]:;?><,./-="

# Length limits offered to the user
MIN_LENGTH = 6
MAX_LENGTH = 64
DEFAULT_LENGTH = 16

# Shown instead of a password when no character class is enabled
NO_OPTIONS_PLACEHOLDER = "Select options"

# History settings
HISTORY_LIMIT = 10
SCHEMA_VERSION = 1

# Files inside the data directory
DATA_DIR_NAME = ".securepass"
DB_FILE_NAME = "history.db"
LOG_FILE_NAME = "securepass.log"

# Environment overrides
HOME_ENV_VAR = "SECUREPASS_HOME"
LOG_LEVEL_ENV_VAR = "SECUREPASS_LOG_LEVEL"
