"""opresult.runtime: configuration and structured logging.

Nothing in here is needed to use the Result algebra itself; it holds the
library-wide defaults (system failure code, caught exception types) and
the structlog setup callers use to log at ``use``/``use_error`` points.
"""

from opresult.runtime._config import (
    UNSET,
    OutcomeConfig,
    get_config,
    init,
    reset,
    resolve_catch,
    resolve_system_failure_code,
)
from opresult.runtime._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    log_error,
    log_success,
    remove_log_hook,
)

__all__ = [
    # Config
    'UNSET',
    'OutcomeConfig',
    # Logging
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    'log_error',
    'log_success',
    'remove_log_hook',
    'reset',
    'resolve_catch',
    'resolve_system_failure_code',
]
