from .context import (
    RESULT_STATE,
    ResultState,
    RunSummary,
    TestResult,
    get_result_state,
    result_state_scope,
)

__all__ = [
    "RESULT_STATE",
    "ResultState",
    "RunSummary",
    "TestResult",
    "get_result_state",
    "result_state_scope",
]
