"""Application composition root.

This module wires together configuration, the contract store, and the resolution policy used by
the tool handlers.
"""

from __future__ import annotations

from dataclasses import dataclass

from semantic_query.config.settings import Settings
from semantic_query.contract.loader import ContractStore
from semantic_query.resolve.policy import ResolutionPolicy, policy_from_name


@dataclass(frozen=True)
class App:
    """Shared application dependencies for tool handlers."""

    settings: Settings
    store: ContractStore
    policy: ResolutionPolicy


def create_app(settings: Settings) -> App:
    """Create the application container.

    Note:
        The contract is loaded lazily on the first `store.get()`.
    """

    store = ContractStore(settings.contract_path, ttl_s=settings.contract_cache_ttl_s)
    return App(settings=settings, store=store, policy=policy_from_name(settings.resolution_policy))
