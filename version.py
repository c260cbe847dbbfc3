"""
flagset version information

This file contains the single source of truth for the flagset version number.
All version references throughout the codebase should import from this file.
"""

# Version number (semantic versioning)
__version__ = "1.0.0"

# Display name for the command line
__version_display__ = f"flagset v{__version__}"
