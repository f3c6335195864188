"""demo_mocks: mocking a method's dependency on a sibling method.

The service keeps its behaviors in swappable function slots so tests can
replace one method while exercising another, without an interface.
"""

from .core.service import Service, normal_program_flow

__all__ = ["Service", "normal_program_flow"]
