#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Run script for SecurePass
"""

from securepass.__main__ import main

if __name__ == "__main__":
    main()
