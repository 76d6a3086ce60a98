"""
Slidewipe CLI - Command-line interface for the wipe comparison.

Usage:
    slidewipe geometry --width 100 --height 50 --progress 0.5
    slidewipe render before.jpg after.jpg --progress 0.3
    slidewipe sweep before.jpg after.jpg --frames 90
    slidewipe interactive before.jpg after.jpg
"""

__version__ = "1.0.0"
