"""Plan module - declarative preference plans and the applier that runs them."""

from .._output_schemas.plan import PlanApplyOutput, PlanListOutput, PlanShowOutput
from .ApplicationPlan import ApplicationPlan
from .ApplyResult import ApplyResult
from .Directive import Directive
from .DirectiveOutcome import DirectiveOutcome
from .PlanCatalog import PlanCatalog
from .PreferenceApplier import PreferenceApplier
from .RestartOutcome import RestartOutcome
from .RestartTarget import RestartTarget

__all__ = [
    "ApplicationPlan",
    "ApplyResult",
    "Directive",
    "DirectiveOutcome",
    "PlanApplyOutput",
    "PlanCatalog",
    "PlanListOutput",
    "PlanShowOutput",
    "PreferenceApplier",
    "RestartOutcome",
    "RestartTarget",
]
