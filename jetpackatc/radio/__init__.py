"""
radio - Radio instruction boundary and random radio traffic
"""

from .core import InstructionSink, InstructionGateway
from .dispatcher import RadioDispatcher
from .constants import InstructionKind, RadioConstants
from .exceptions import RadioError, InstructionRejectedError

__all__ = [
    'InstructionSink',
    'InstructionGateway',
    'RadioDispatcher',
    'InstructionKind',
    'RadioConstants',
    'RadioError',
    'InstructionRejectedError'
]
