"""
Watermark Manager - Main Entry Point
====================================
An interactive command-line tool that adds a text or image watermark to an
image, with optional brightness, contrast, black & white and invert
adjustments beforehand.

Usage:
    python main.py [--img-dir DIR] [--font FONT.ttf] [--log-level LEVEL]

Architecture:
    - Core: watermark_manager/core/ (pure image logic)
    - Prompts: watermark_manager/cli/ (terminal interaction)
    - Controller: watermark_manager/controller.py (session flow)
"""

from watermark_manager.controller import main

if __name__ == "__main__":
    main()
