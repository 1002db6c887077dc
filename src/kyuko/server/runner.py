"""Serve a kyuko App with pounce.

``AppConfig.debug`` picks the mode: one reloading worker while
developing, otherwise ``AppConfig.workers`` workers without reload.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kyuko.app import App
    from kyuko.config import AppConfig


def server_options(config: AppConfig, host: str, port: int) -> dict[str, object]:
    """Build the pounce ``ServerConfig`` arguments for *config*."""
    options: dict[str, object] = {"host": host, "port": port, "log_level": config.log_level}
    if config.debug:
        options.update(
            workers=1,
            reload=True,
            reload_include=config.reload_include,
            reload_dirs=config.reload_dirs,
        )
    else:
        options["workers"] = config.workers
    return options


def serve(app: App, host: str, port: int) -> None:
    """Block serving *app* on *host*:*port* until pounce shuts down."""
    from pounce.config import ServerConfig
    from pounce.server import Server

    Server(ServerConfig(**server_options(app.config, host, port)), app).run()
