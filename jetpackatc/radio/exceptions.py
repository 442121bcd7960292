# jetpackatc/radio/exceptions.py
from ..exceptions import JetpackATCError

class RadioError(JetpackATCError):
    """Base exception for radio instruction errors."""
    pass

class InstructionRejectedError(RadioError):
    """Raised at the gateway when an instruction fails validation; no state was touched."""
    def __init__(self, agent_id, reason: str):
        self.agent_id = agent_id
        self.reason = reason
        super().__init__(f"Instruction for agent {agent_id} rejected: {reason}")
