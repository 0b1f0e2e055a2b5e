#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""SecurePass: random password generator with a persistent history"""

from securepass.exceptions import SecurePassError, StorageError, RandomnessUnavailable
from securepass.generator import (
    CharacterClass, GenerationOutcome, GenerationRequest, GenerationResult, build_alphabet, generate
)
from securepass.history import HistoryEntry, HistoryStore, StoreState

__version__ = "1.0.0"

__all__ = [
    "CharacterClass",
    "GenerationOutcome",
    "GenerationRequest",
    "GenerationResult",
    "HistoryEntry",
    "HistoryStore",
    "RandomnessUnavailable",
    "SecurePassError",
    "StorageError",
    "StoreState",
    "build_alphabet",
    "generate",
]
