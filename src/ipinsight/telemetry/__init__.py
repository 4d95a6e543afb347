"""Remote telemetry sink client"""

from .remote_logger import RemoteLogger

__all__ = ['RemoteLogger']
