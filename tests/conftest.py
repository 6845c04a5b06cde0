"""Hypothesis profiles and pytest fixtures for personuuid.

Fixtures are the canonical identity numbers used across the test
modules, one per identity type.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, settings

from personuuid.core.result import unwrap
from personuuid.identity.record import IdentityNumber

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=500,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=100,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ---------------------------------------------------------------------------
# Canonical identities
# ---------------------------------------------------------------------------

ORGNR_NUMBER = 5568099963  # 556809-9963
PERSNR_NUMBER = 194106177753  # 19410617-7753
SAMNR_NUMBER = 197010632391  # 19701063-2391, born 1970-10-03
GDNR_NUMBER = 3020002568  # 302000-2568


@pytest.fixture
def orgnr() -> IdentityNumber:
    return unwrap(IdentityNumber.from_number(ORGNR_NUMBER))


@pytest.fixture
def persnr() -> IdentityNumber:
    return unwrap(IdentityNumber.from_number(PERSNR_NUMBER, 99))


@pytest.fixture
def samnr() -> IdentityNumber:
    return unwrap(IdentityNumber.from_number(SAMNR_NUMBER, 999))


@pytest.fixture
def gdnr() -> IdentityNumber:
    return unwrap(IdentityNumber.from_number(GDNR_NUMBER, 3))
