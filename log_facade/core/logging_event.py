"""
Logging event data structure

One immutable snapshot per accepted log call.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple, TYPE_CHECKING

from log_facade.core.call_site import CallSite
from log_facade.core.log_level import Level

if TYPE_CHECKING:
    from log_facade.core.logger import Logger


@dataclass(frozen=True)
class LoggingEvent:
    """
    Logging event data structure.

    Attributes:
        category_name: Category of the originating logger
        level: Resolved level of the call
        data: Payload values in call order
        logger: Originating logger (back-reference only)
        location: Call site, present only when tracing was enabled
        timestamp: Creation time
    """

    category_name: str
    level: Level
    data: Tuple[Any, ...] = field(default=(), hash=False)
    logger: Optional["Logger"] = field(default=None, repr=False, hash=False)
    location: Optional[CallSite] = None
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert logging event to dictionary.

        Returns:
            Dictionary representation; the logger is omitted
        """
        return {
            "timestamp": self.timestamp.isoformat(),
            "category_name": self.category_name,
            "level": str(self.level),
            "data": list(self.data),
            "location": self.location.to_dict() if self.location else None,
        }
