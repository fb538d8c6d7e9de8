"""BaseService — shared foundation for wsctl services.

Every service receives the :class:`Catalog` (frozen rules and layouts for
this invocation). Services that talk to tmux also take a
:class:`SessionDispatcher`, defaulting to the real tmux one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wsctl.infrastructure.catalog import Catalog
    from wsctl.infrastructure.tmux import SessionDispatcher


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class LayoutService(BaseService):
            def show(self, name: str) -> ServiceResult:
                resolved = self._catalog.resolve(name)
                ...
    """

    def __init__(
        self,
        catalog: Catalog,
        dispatcher: SessionDispatcher | None = None,
    ) -> None:
        self._catalog = catalog
        self._dispatcher_override = dispatcher

    @property
    def _dispatcher(self) -> SessionDispatcher:
        """The dispatcher, created lazily so read-only commands never load tmux."""
        if self._dispatcher_override is None:
            from wsctl.infrastructure.tmux import TmuxDispatcher

            self._dispatcher_override = TmuxDispatcher()
        return self._dispatcher_override
