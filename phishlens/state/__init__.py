from phishlens.state.machine import SubmissionStateMachine
from phishlens.state.models import (
    IDLE,
    LOADING,
    ErrorState,
    IdleState,
    LoadingState,
    SubmissionState,
    SuccessState,
)

__all__ = [
    "IDLE",
    "LOADING",
    "ErrorState",
    "IdleState",
    "LoadingState",
    "SubmissionState",
    "SubmissionStateMachine",
    "SuccessState",
]
