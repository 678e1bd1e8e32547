# SPDX-License-Identifier: Apache-2.0
"""
Shared pytest fixtures:
- Environment isolation for LEDGER_* variables
- Sample GraphQL timing documents
- A sample vesting schedule matching that document
"""
from __future__ import annotations

import os
from typing import Dict

import pytest

from ledger.types.timing import TimedData


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests never see LEDGER_* settings from the developer's shell."""
    for k in list(os.environ):
        if k.startswith("LEDGER_"):
            monkeypatch.delenv(k, raising=False)


@pytest.fixture
def timing_doc() -> Dict[str, str]:
    """A fully populated GraphQL timing document."""
    return {
        "initialMinimumBalance": "5",
        "cliffTime": "10",
        "cliffAmount": "2",
        "vestingPeriod": "3",
        "vestingIncrement": "1",
    }


@pytest.fixture
def schedule() -> TimedData:
    return TimedData(
        initial_minimum_balance=5,
        cliff_time=10,
        cliff_amount=2,
        vesting_period=3,
        vesting_increment=1,
    )
