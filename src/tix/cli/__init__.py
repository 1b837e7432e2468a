"""CLI package.

The ``cli`` sub-package contains the Click application and all
command implementations. File reads and archive appends happen here;
the rest of the package never touches the file system.
"""
from __future__ import annotations
