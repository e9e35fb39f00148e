"""
PrintFlow - Print Shop Job Tracker

Workflow core for a print shop: print jobs move from design through
approval, production and delivery under a role-gated status policy,
with an append-only audit trail and team notifications for every
accepted transition.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
