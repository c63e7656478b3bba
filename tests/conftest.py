"""
Shared pytest fixtures for all tests.

Provides a pinned clock and RNG, zero-latency settings, in-memory storage and
ready-made portal contexts (anonymous, patient and admin).
"""

import os
import random

import pytest
import pytest_asyncio

from healthplus.application import PortalContext
from healthplus.application.use_cases import LoginRequest, LoginUseCase
from healthplus.config.settings import Settings
from healthplus.infrastructure import IdentifierSource, InMemoryStorage
from tests.utils import FIXED_NOW

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"


# ============================================================================
# CONFIGURATION FIXTURES
# ============================================================================


@pytest.fixture
def settings() -> Settings:
    """Settings with every simulated latency removed."""
    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        LOGIN_DELAY=0,
        REGISTER_DELAY=0,
        BOOKING_DELAY=0,
        CANCEL_DELAY=0,
        CONSULTATION_START_DELAY=0,
        CHECKOUT_DELAY=0,
        CHAT_REPLY_DELAY=0.01,
        CALL_TIMER_TICK_SECONDS=0.01,
        STORAGE_BACKEND="memory",
    )


@pytest.fixture
def ids() -> IdentifierSource:
    """Identifier source with a frozen clock and seeded RNG."""
    return IdentifierSource(clock=lambda: FIXED_NOW, rng=random.Random(42))


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


# ============================================================================
# PORTAL FIXTURES
# ============================================================================


@pytest.fixture
def context(settings: Settings, ids: IdentifierSource) -> PortalContext:
    """Fresh portal seeded with the catalog, nobody logged in."""
    return PortalContext.create(settings, ids=ids)


@pytest.fixture
def store(context: PortalContext):
    return context.store


@pytest_asyncio.fixture
async def patient_context(context: PortalContext) -> PortalContext:
    """Portal with a patient logged in."""
    await LoginUseCase(context).execute(LoginRequest(email="john@example.com", name="John Doe"))
    return context


@pytest_asyncio.fixture
async def admin_context(context: PortalContext) -> PortalContext:
    """Portal with an administrator logged in."""
    await LoginUseCase(context).execute(LoginRequest(email="admin@healthplus.in"))
    return context
