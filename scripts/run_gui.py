#!/usr/bin/env python3
"""
Launch the batch scheduler GUI.
"""

import os
import sys

SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(SCRIPT_DIR, os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


def main():
    """Launch the GUI."""
    try:
        from batch_scheduler.gui.main_window import main as gui_main
    except ImportError as e:
        print(f"Import Error: {e}")
        print("Install the GUI dependency with: pip install PyQt6")
        sys.exit(1)
    gui_main()


if __name__ == "__main__":
    main()
