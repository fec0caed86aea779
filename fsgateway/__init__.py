"""fsgateway: fault-tolerant filesystem access facade.

Every disk interaction of the supervision tools goes through
:class:`fsgateway.services.FilesystemGateway`, which absorbs platform faults
and returns safe defaults instead.
"""

from fsgateway.config import APP_VERSION

__version__ = APP_VERSION
