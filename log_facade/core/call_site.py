"""
Call-site capture

Locates the frame that called into the logging API by skipping every frame
that belongs to this package.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional
import inspect
import logging
import os

_logger = logging.getLogger(__name__)

# Root directory of the log_facade package
_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


@dataclass(frozen=True)
class CallSite:
    """
    Source location of a log call.

    Attributes:
        path: Absolute path of the source file
        file: Basename of ``path``
        function: Name of the enclosing function (``<module>`` at top level)
        line: 1-based line number
        column: 1-based column, 0 when the interpreter does not expose it
    """

    path: str
    file: str
    function: str
    line: int
    column: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _is_internal(filename: str) -> bool:
    path = os.path.abspath(filename)
    return path == _PACKAGE_DIR or path.startswith(_PACKAGE_DIR + os.sep)


def _column_of(frame) -> int:
    # Column positions are only available on Python 3.11+
    positions = getattr(inspect.getframeinfo(frame, context=0), "positions", None)
    if positions is None or positions.col_offset is None:
        return 0
    return positions.col_offset + 1


def capture_call_site(skip: int = 0) -> Optional[CallSite]:
    """
    Capture the location of the code that called the logger.

    Args:
        skip: Number of additional frames to skip past the first frame
              outside this package (for wrapper libraries)

    Returns:
        CallSite of the selected frame, or None if there is no such frame
        or it could not be inspected
    """
    frame = None
    try:
        frame = inspect.currentframe()
        while frame is not None and _is_internal(frame.f_code.co_filename):
            frame = frame.f_back
        for _ in range(skip):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return None

        path = os.path.abspath(frame.f_code.co_filename)
        return CallSite(
            path=path,
            file=os.path.basename(path),
            function=frame.f_code.co_name,
            line=frame.f_lineno,
            column=_column_of(frame),
        )
    except Exception:
        _logger.debug("Call-site capture failed", exc_info=True)
        return None
    finally:
        del frame
