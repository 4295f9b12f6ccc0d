"""Packaging for RingTimer.

Install for development:
    pip install -e ".[test]"

Build a macOS .app bundle:
    pip install py2app
    python setup.py py2app
"""

import sys

from setuptools import setup, find_packages

APP = ["main.py"]
OPTIONS = {
    "argv_emulation": False,
    "plist": {
        "CFBundleName": "RingTimer",
        "CFBundleDisplayName": "RingTimer",
        "CFBundleIdentifier": "com.ringtimer.app",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "NSHighResolutionCapable": True,
    },
}

# Bundle options only apply to the py2app command; plain installs skip them.
PY2APP_KWARGS = (
    {"app": APP, "options": {"py2app": OPTIONS}, "setup_requires": ["py2app"]}
    if "py2app" in sys.argv
    else {}
)

setup(
    **PY2APP_KWARGS,
    name="RingTimer",
    version="0.1.0",
    packages=find_packages(include=["ringtimer", "ringtimer.*"]),
    python_requires=">=3.10",
    install_requires=["PyQt6"],
    extras_require={"test": ["pytest"]},
    entry_points={"gui_scripts": ["ringtimer = ringtimer.__main__:main"]},
)
