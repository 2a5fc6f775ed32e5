"""Wire a ContactsGateway for the configured backend."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from neo4j import GraphDatabase

from dialer.application import CapabilityChecker, ContactsGateway, Navigator
from dialer.config import BACKEND_NEO4J, Settings
from dialer.infrastructure import (
    InMemoryContactDirectory,
    InMemoryNumberBlockList,
    InMemoryPhoneAccountResolver,
    Neo4jContactDirectory,
    Neo4jNumberBlockList,
    Neo4jPhoneAccountResolver,
    ensure_directory_constraints,
    normalize_dialable,
)

logger = logging.getLogger(__name__)


def get_driver(settings: Settings):
    return GraphDatabase.driver(
        settings.neo4j_uri, auth=(settings.neo4j_user, settings.neo4j_password)
    )


def build_gateway(
    settings: Settings,
    *,
    navigator: Navigator,
    capabilities: CapabilityChecker,
    driver=None,
) -> ContactsGateway:
    """Build a gateway. The neo4j backend needs a driver owned by the caller."""
    if settings.backend == BACKEND_NEO4J:
        if driver is None:
            raise ValueError("The neo4j backend needs a driver; use open_gateway() to own one.")
        ensure_directory_constraints(driver)
        logger.info("Using Neo4j contact directory at %s", settings.neo4j_uri)
        return ContactsGateway(
            Neo4jContactDirectory(driver, default_region=settings.default_region),
            Neo4jPhoneAccountResolver(driver),
            Neo4jNumberBlockList(driver),
            navigator,
            capabilities,
            normalize_number=normalize_dialable,
        )
    logger.info("Using in-memory contact directory")
    directory = InMemoryContactDirectory(default_region=settings.default_region)
    return ContactsGateway(
        directory,
        InMemoryPhoneAccountResolver(directory),
        InMemoryNumberBlockList(),
        navigator,
        capabilities,
        normalize_number=normalize_dialable,
    )


@contextmanager
def open_gateway(
    settings: Settings,
    *,
    navigator: Navigator,
    capabilities: CapabilityChecker,
) -> Iterator[ContactsGateway]:
    """Yield a gateway; for the neo4j backend the driver is closed on exit."""
    driver = get_driver(settings) if settings.backend == BACKEND_NEO4J else None
    try:
        yield build_gateway(
            settings, navigator=navigator, capabilities=capabilities, driver=driver
        )
    finally:
        if driver is not None:
            driver.close()
