"""Setup de logging.

Un único handler en el logger raíz: RichHandler para terminal o un formato
plano con timestamp para pipelines/CI. Llamar una vez al arrancar la aplicación;
llamadas repetidas reemplazan el handler anterior en vez de duplicarlo.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from core.config import NetworkSettings

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"
_HANDLER_MARK = "_netlayer_handler"


def setup_logging(settings: NetworkSettings | None = None) -> logging.Handler:
    settings = settings or NetworkSettings()

    handler: logging.Handler
    if settings.log_format == "rich":
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
    setattr(handler, _HANDLER_MARK, True)

    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, _HANDLER_MARK, False):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.WARNING))
    return handler
