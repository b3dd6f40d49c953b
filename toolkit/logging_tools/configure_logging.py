__all__ = ("logging_init",)

import os
from logging.config import dictConfig
from pathlib import Path

PACKAGE_LOGGERS: tuple[str, ...] = ("framework", "registry", "toolkit")
LIBRARY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore", "trio", "pydantic", "azure")


def _handlers(level: str, logfile: str | Path | None) -> dict[str, dict]:
    handlers = {"console": {"level": level, "class": "logging.StreamHandler", "formatter": "basic"}}
    if logfile:
        # Parent folder must be writable before the handler opens the file
        _path = Path(logfile).resolve()
        _path.parent.mkdir(parents=True, exist_ok=True)
        if not os.access(_path.parent, os.W_OK):
            raise PermissionError(f"Logfile parent folder is not writable: {_path.parent}")
        handlers["file"] = {"level": level, "class": "logging.FileHandler", "filename": str(_path), "formatter": "basic"}
    return handlers


def logging_init(
    *,
    level: str = "INFO",
    client_level: str = "WARNING",
    library_level: str = "ERROR",
    logfile: str | Path | None = None,
) -> None:
    """
    Configure logging for an application using the Power BI client.

    - level sets the level of the `powerbi` package and of the handlers
    - client_level sets the level of the request pipeline, registry and toolkit packages
    - library_level sets the level for third-party libraries
    """
    handlers = _handlers(level, logfile)
    names = list(handlers)

    def logger(logger_level: str) -> dict:
        return {"handlers": names, "level": logger_level, "propagate": False}

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": True,
            "formatters": {"basic": {"format": "%(asctime)s %(levelname)8s %(message)s - %(name)s:%(lineno)s"}},
            "handlers": handlers,
            "loggers": {
                "powerbi": logger(level),
                **{name: logger(client_level) for name in PACKAGE_LOGGERS},
                **{name: logger(library_level) for name in LIBRARY_LOGGERS},
                "": logger(library_level),
            },
        },
    )
