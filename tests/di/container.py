"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from memora.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build test container with selective unmocking.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks.

    Returns:
        Configured test container

    Raises:
        ValueError: If an unknown component is named

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real PostgreSQL
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        component_name = getattr(base, "__mock_component__", None)
        if not base.__subclasses__() or component_name is None:
            # Concrete provider - always use as-is
            provider_class = get_provider(base, use_mock=False)
        else:
            provider_class = get_provider(base, use_mock=component_name not in unmock)

        # All providers instantiated without arguments (Settings comes from DI)
        provider_instances.append(provider_class())

    # FastapiProvider lets the same container back a TestClient app
    return make_async_container(*provider_instances, FastapiProvider())


def _validate_unmock(unmock: set[Component]) -> None:
    """Reject component names no provider declares."""
    known = {
        p.__mock_component__
        for p in PROVIDERS
        if p.__subclasses__() and p.__mock_component__
    }
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
