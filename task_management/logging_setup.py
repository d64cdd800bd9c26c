import logging
import sys

_HANDLER_NAME = "task_management.console"


def setup_logging(level: str = "INFO") -> None:
    """Attach a single stderr handler to the root logger.

    Safe to call more than once; the handler is only installed the first time.
    """
    root = logging.getLogger()
    root.setLevel(level)

    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(fmt)
    root.addHandler(handler)
