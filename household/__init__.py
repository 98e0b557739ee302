"""
Household - Source Package

A small domain model for household finances: money with currency
conversion, jobs, people and the family that groups them.

DESIGN PRINCIPLES:
1. Rules are enforced where entities are created
2. Fail early, fail visibly
3. No silent corrections of caller input after construction
4. Every significant domain action is auditable
"""

__version__ = "1.0.0"
__author__ = "Household Model Team"
