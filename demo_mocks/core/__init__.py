"""Core logic for the demo_mocks project.

This package contains zero external dependencies: the service with
swappable function slots and the flow that drives it.
"""

from .service import Service, normal_program_flow

__all__ = [
    "Service",
    "normal_program_flow",
]
