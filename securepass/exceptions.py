#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Exceptions raised by SecurePass"""


class SecurePassError(Exception):
    """Base class for SecurePass errors"""


class StorageError(SecurePassError):
    """The history database could not be opened, read or written"""


class RandomnessUnavailable(SecurePassError):
    """The operating system's secure random source is not available"""
