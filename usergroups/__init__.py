"""
User Groups Service.

Data-access service layer for groups, users and their memberships.
"""

__version__ = "1.0.0"
