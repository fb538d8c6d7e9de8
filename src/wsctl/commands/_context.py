"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides the lazily built Catalog and tmux
dispatcher, and centralized result emission (stdout/stderr routing and
exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wsctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from wsctl.config.settings import WsSettings
    from wsctl.infrastructure.catalog import Catalog
    from wsctl.infrastructure.tmux import SessionDispatcher
    from wsctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The catalog and dispatcher are created on first use so ``--help``,
    ``config init`` and ``config schema`` never validate definitions or
    touch tmux.
    """

    def __init__(self, settings: WsSettings) -> None:
        self.settings = settings
        self._catalog: Catalog | None = None
        self._dispatcher: SessionDispatcher | None = None

        from wsctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from wsctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def interactive(self) -> bool:
        return not self.settings.no_interact

    @property
    def catalog(self) -> Catalog:
        """The definition catalog; invalid definitions end the command."""
        if self._catalog is not None:
            return self._catalog

        from wsctl.domain.errors import WsctlError
        from wsctl.infrastructure.catalog import Catalog
        from wsctl.services.result import ServiceResult

        try:
            self._catalog = Catalog(self.settings)
            return self._catalog
        except WsctlError as exc:
            self.emit(ServiceResult.from_error("load_config", exc))
            raise SystemExit(1) from exc

    @property
    def dispatcher(self) -> SessionDispatcher:
        if self._dispatcher is None:
            from wsctl.infrastructure.tmux import TmuxDispatcher

            self._dispatcher = TmuxDispatcher()
        return self._dispatcher

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
