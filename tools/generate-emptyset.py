#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
generate-emptyset.py

Writes the ∅ SVG pack (precise and/or legacy set) plus a README.

Usage:
  python tools/generate-emptyset.py
  python tools/generate-emptyset.py ./emptyset_svg --set=all --preset=sf
  python tools/generate-emptyset.py ./emptyset_svg --slash=contained --edge-gap=8
"""

from __future__ import annotations

import sys
from pathlib import Path

# Allow running this script directly from a checkout.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from emptyset.cli import main  # noqa: E402

if __name__ == "__main__":
    main()
