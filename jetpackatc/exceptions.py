# jetpackatc/exceptions.py
"""
Root of the exception hierarchy. Each subpackage derives its own errors
from JetpackATCError in its local exceptions module.
"""

class JetpackATCError(Exception):
    """Base class for all jetpackatc errors"""
    pass
