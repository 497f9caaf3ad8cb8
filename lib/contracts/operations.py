"""Operation keys accepted by ``POST /bfhl`` and the failure reasons."""
from dataclasses import dataclass
from enum import Enum


class Operation(str, Enum):
    FIBONACCI = "fibonacci"
    PRIME = "prime"
    LCM = "lcm"
    HCF = "hcf"
    AI = "AI"


OPERATION_KEYS = frozenset(op.value for op in Operation)


class FailureReason(str, Enum):
    INVALID_SHAPE = "invalid_shape"
    UNKNOWN_KEY = "unknown_key"
    INVALID_INPUT = "invalid_input"
    UPSTREAM = "upstream"
    INTERNAL = "internal"


@dataclass(frozen=True)
class DispatchFailure:
    reason: FailureReason
    message: str
