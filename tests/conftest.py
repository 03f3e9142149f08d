"""
Shared fixtures: sample CSV payloads and a zero-delay simulator.
"""

from __future__ import annotations

import pytest

from data_prep.loader import SelectedFile
from scoring.clients import LocalSimulationClient

SAMPLE_CSV = "Age,LoanAmount,Risk\n30,1000,good\n45,2000,bad\n"

CREDIT_HEADER = (
    "CheckingStatus,LoanDuration,CreditHistory,LoanPurpose,LoanAmount,ExistingSavings,"
    "EmploymentDuration,InstallmentPercent,Sex,OthersOnLoan,CurrentResidenceDuration,"
    "OwnsProperty,Age,InstallmentPlans,Housing,ExistingCreditsCount,Job,Dependents,"
    "Telephone,ForeignWorker,Risk"
)
CREDIT_ROW = (
    "0_to_200,31,credits_paid_to_date,other,1889,100_to_500,less_1,3,female,none,3,"
    "savings_insurance,32,none,own,1,skilled,1,none,yes,No Risk"
)


def credit_csv(n_rows: int) -> str:
    return "\n".join([CREDIT_HEADER] + [CREDIT_ROW] * n_rows) + "\n"


@pytest.fixture
def sample_file() -> SelectedFile:
    return SelectedFile.from_bytes("loans.csv", SAMPLE_CSV.encode("utf-8"))


@pytest.fixture
def simulator() -> LocalSimulationClient:
    return LocalSimulationClient(delay_seconds=0, seed=7)
