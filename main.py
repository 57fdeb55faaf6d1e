#!/usr/bin/env python3
"""FocusRing entry point.

Run with:
    python main.py
    python -m focusring
"""

from focusring.__main__ import main


if __name__ == "__main__":
    main()
