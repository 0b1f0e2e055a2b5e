#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Password generation module for SecurePass"""

import enum
import secrets
from dataclasses import dataclass
from typing import Optional

from securepass.constants import (
    UPPERCASE_CHARS, LOWERCASE_CHARS, NUMBER_CHARS, SYMBOL_CHARS, NO_OPTIONS_PLACEHOLDER
)
from securepass.exceptions import RandomnessUnavailable


class CharacterClass(enum.Enum):
    """Character classes a password can be drawn from"""

    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGITS = "digits"
    SYMBOLS = "symbols"

    @property
    def alphabet(self):
        return ALPHABETS[self]


ALPHABETS = {
    CharacterClass.UPPERCASE: UPPERCASE_CHARS,
    CharacterClass.LOWERCASE: LOWERCASE_CHARS,
    CharacterClass.DIGITS: NUMBER_CHARS,
    CharacterClass.SYMBOLS: SYMBOL_CHARS,
}

# Order in which alphabets are concatenated
CANONICAL_ORDER = (
    CharacterClass.UPPERCASE,
    CharacterClass.LOWERCASE,
    CharacterClass.DIGITS,
    CharacterClass.SYMBOLS,
)


class GenerationOutcome(enum.Enum):
    GENERATED = "generated"
    NO_CLASSES_SELECTED = "no_classes_selected"


@dataclass(frozen=True)
class GenerationRequest:
    """
    Parameters for a single password

    Args:
        length: Number of characters, any positive integer
        enabled_classes: Character classes to draw from, may be empty
    """

    length: int
    enabled_classes: frozenset = frozenset()

    def __post_init__(self):
        if isinstance(self.length, bool) or not isinstance(self.length, int) or self.length <= 0:
            raise ValueError(f"Password length must be a positive integer, got {self.length!r}")
        classes = frozenset(self.enabled_classes)
        for char_class in classes:
            if not isinstance(char_class, CharacterClass):
                raise ValueError(f"Unknown character class: {char_class!r}")
        object.__setattr__(self, "enabled_classes", classes)

    @classmethod
    def from_options(cls, length, uppercase=True, lowercase=True, numbers=True, symbols=True):
        """
        Build a request from the on/off switches shown to the user

        Args:
            length: Password length
            uppercase: Whether to include A-Z
            lowercase: Whether to include a-z
            numbers: Whether to include 0-9
            symbols: Whether to include symbols

        Returns:
            GenerationRequest instance
        """
        flags = {
            CharacterClass.UPPERCASE: uppercase,
            CharacterClass.LOWERCASE: lowercase,
            CharacterClass.DIGITS: numbers,
            CharacterClass.SYMBOLS: symbols,
        }
        return cls(length, frozenset(c for c, enabled in flags.items() if enabled))


@dataclass(frozen=True)
class GenerationResult:
    """Result of a generation request; password is None unless outcome is GENERATED"""

    outcome: GenerationOutcome
    password: Optional[str] = None
    length: int = 0
    classes: frozenset = frozenset()

    @property
    def ok(self):
        return self.outcome is GenerationOutcome.GENERATED

    @property
    def display(self):
        """Text to show the user in place of the password"""
        return self.password if self.ok else NO_OPTIONS_PLACEHOLDER


def build_alphabet(classes):
    """
    Concatenate the alphabets of the given classes in canonical order

    Args:
        classes: Iterable of CharacterClass members

    Returns:
        Union alphabet string, empty when no class is given
    """
    selected = set(classes)
    return "".join(ALPHABETS[c] for c in CANONICAL_ORDER if c in selected)


def _class_names(classes):
    return ",".join(c.value for c in CANONICAL_ORDER if c in classes) or "none"


def generate(request, randbelow=secrets.randbelow, logger=None):
    """
    Generate a random password for the request

    Each character is an independent draw from the union alphabet.
    secrets.randbelow rejects out-of-range values instead of reducing
    modulo the alphabet size, so every symbol is equally likely.

    Args:
        request: GenerationRequest instance
        randbelow: Callable returning a uniform int in [0, n); must be
            backed by a cryptographically secure source
        logger: Optional logger instance

    Returns:
        GenerationResult; outcome is NO_CLASSES_SELECTED when the request
        enables no character class

    Raises:
        RandomnessUnavailable: The secure random source failed
    """
    # Log the request (never the password itself)
    if logger:
        logger.info(
            f"Generating password (length={request.length}, "
            f"classes={_class_names(request.enabled_classes)})"
        )

    alphabet = build_alphabet(request.enabled_classes)
    if not alphabet:
        if logger:
            logger.info("No character classes selected, nothing generated")
        return GenerationResult(GenerationOutcome.NO_CLASSES_SELECTED)

    size = len(alphabet)
    try:
        password = "".join(alphabet[randbelow(size)] for _ in range(request.length))
    except (NotImplementedError, OSError) as e:
        if logger:
            logger.error(f"Secure random source unavailable: {e}")
        raise RandomnessUnavailable("No secure random source is available") from e

    return GenerationResult(
        GenerationOutcome.GENERATED,
        password=password,
        length=len(password),
        classes=request.enabled_classes,
    )
