import json
import sys
import threading
from enum import IntEnum
from ulidkit.utils.timestamp import format_timestamp

class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

_root = None
_root_lock = threading.Lock()

class StructuredLogger:
    """JSON-lines logger writing to stderr. Named views share the root level."""

    def __init__(self, level=LogLevel.INFO, name=None, root=None):
        self._level = level
        self.name = name
        self._root = root

    @property
    def level(self):
        return self._root.level if self._root else self._level

    def child(self, name):
        return StructuredLogger(name=name, root=self._root or self)

    def _emit(self, level, message, error=None, **kwargs):
        if level < self.level:
            return
        try:
            record = {"timestamp": format_timestamp(), "level": level.name}
            if self.name:
                record["logger"] = self.name
            record.update(msg=message, **kwargs)
            if error:
                record["err"] = str(error)
            print(json.dumps(record, default=str), file=sys.stderr, flush=True)
        except Exception:
            pass

    def debug(self, message, **kwargs):
        self._emit(LogLevel.DEBUG, message, **kwargs)

    def info(self, message, **kwargs):
        self._emit(LogLevel.INFO, message, **kwargs)

    def warn(self, message, error=None, **kwargs):
        self._emit(LogLevel.WARN, message, error, **kwargs)

    def error(self, message, error=None, **kwargs):
        self._emit(LogLevel.ERROR, message, error, **kwargs)

    @classmethod
    def configure(cls, min_level=LogLevel.INFO):
        global _root
        with _root_lock:
            if _root is None:
                _root = cls(min_level)
            else:
                _root._level = min_level

def get_logger(name=None):
    global _root
    if _root is None:
        with _root_lock:
            if _root is None:
                _root = StructuredLogger()
    return _root.child(name) if name else _root
