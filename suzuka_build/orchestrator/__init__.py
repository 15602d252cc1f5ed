from .orchestrator import BuildOrchestrator
from .types import BuildInvocationFailed, RunResult, RunState, TargetOutcome

__all__ = [
    "BuildOrchestrator",
    "BuildInvocationFailed",
    "RunResult",
    "RunState",
    "TargetOutcome",
]
