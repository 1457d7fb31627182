"""
Toolkit identity used for the default generator value.
"""

__version__ = "0.1.0"

TOOLKIT_NAME = "feedwriter"
TOOLKIT_URI = "https://pypi.org/project/feedwriter/"

DEFAULT_GENERATOR = f"{TOOLKIT_NAME} {__version__} ({TOOLKIT_URI})"
