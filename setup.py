"""Setup for FocusRing.

Install for development:
    pip install -e ".[test]"

Build a macOS .app bundle:
    pip install py2app
    python setup.py py2app
"""

import sys

from setuptools import find_packages, setup

APP = ["main.py"]
DATA_FILES = []
OPTIONS = {
    "argv_emulation": False,
    "iconfile": None,
    "plist": {
        "CFBundleName": "FocusRing",
        "CFBundleDisplayName": "FocusRing",
        "CFBundleIdentifier": "com.focusring.app",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "LSMinimumSystemVersion": "13.0",
    },
}

# py2app only when building the bundle; plain installs don't need it.
app_kwargs = {}
if "py2app" in sys.argv:
    app_kwargs = {
        "app": APP,
        "data_files": DATA_FILES,
        "options": {"py2app": OPTIONS},
        "setup_requires": ["py2app"],
    }

setup(
    name="FocusRing",
    version="0.1.0",
    packages=find_packages(include=["focusring", "focusring.*"]),
    python_requires=">=3.10",
    install_requires=["PyQt6"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["focusring = focusring.__main__:main"]},
    **app_kwargs,
)
