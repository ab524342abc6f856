from .tailor import (
    TailorRequest,
    TailorResult,
    InteractionState,
    Idle,
    Loading,
    Success,
    Failed,
)

__all__ = [
    "TailorRequest",
    "TailorResult",
    "InteractionState",
    "Idle",
    "Loading",
    "Success",
    "Failed",
]
