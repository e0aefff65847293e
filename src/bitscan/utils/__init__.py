from __future__ import annotations

from logging import Logger, getLogger
from typing import Any

import attr

#: The numeric level used for trace records. Registered as ``TRACE`` by the package.
TRACE = 5


@attr.s(slots=True, frozen=True, kw_only=True)
class LoggerWithTrace:
    """
    Thin wrapper around a :class:`logging.Logger` that adds a ``trace`` level below ``DEBUG``.
    """

    logger: Logger = attr.ib()

    @classmethod
    def get(cls, name: str) -> LoggerWithTrace:
        return LoggerWithTrace(logger=getLogger(name))

    def info(self, *args: Any, **kwargs: Any) -> None:
        self.logger.info(*args, **kwargs)

    def debug(self, *args: Any, **kwargs: Any) -> None:
        self.logger.debug(*args, **kwargs)

    def critical(self, *args: Any, **kwargs: Any) -> None:
        self.logger.critical(*args, **kwargs)

    def trace(self, message: str, *args: Any, **kws: Any) -> None:
        if self.logger.isEnabledFor(TRACE):
            self.logger.log(TRACE, message, *args, **kws)
