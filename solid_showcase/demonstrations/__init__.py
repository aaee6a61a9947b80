"""
Demonstrations package for the SOLID Showcase.

Re-exports the abstract contract and one concrete demonstration per principle.
"""

from solid_showcase.demonstrations.abstract import (
    AbstractDemonstration,
    Demonstration,
    DemonstrationResult,
)
from solid_showcase.demonstrations.dependency_inversion import DependencyInversionDemonstration
from solid_showcase.demonstrations.interface_segregation import InterfaceSegregationDemonstration
from solid_showcase.demonstrations.liskov import LiskovSubstitutionDemonstration
from solid_showcase.demonstrations.open_closed import OpenClosedDemonstration
from solid_showcase.demonstrations.single_responsibility import SingleResponsibilityDemonstration

__all__ = [
    # Abstracts
    "AbstractDemonstration",
    "Demonstration",
    "DemonstrationResult",
    # Concrete demonstrations
    "DependencyInversionDemonstration",
    "InterfaceSegregationDemonstration",
    "LiskovSubstitutionDemonstration",
    "OpenClosedDemonstration",
    "SingleResponsibilityDemonstration",
]
