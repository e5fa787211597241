from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from league_results.core.config import Settings, settings
from league_results.core.enums import DataProviderEnum
from league_results.gateway import DataGateway


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def resolve_settings(provider: DataProviderEnum | None = None) -> Settings:
    if provider is None:
        return settings
    return settings.model_copy(update={"data_provider": provider})


@contextmanager
def gateway_scope(provider: DataProviderEnum | None = None) -> Iterator[DataGateway]:
    """
    Context-managed gateway for CLI commands.
    `provider` overrides DATA_PROVIDER for this invocation only.
    """
    gateway = DataGateway.from_settings(resolve_settings(provider))
    try:
        yield gateway
    finally:
        gateway.close()
