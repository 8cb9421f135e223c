"""
C2B pre-inspection service.

A single deployable process hosting isolated business-domain modules that
talk to each other only through their public contracts.
"""

__version__ = "1.0.0"
