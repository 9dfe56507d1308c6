"""Plan show command - directives and restart order of one plan."""

from collections.abc import Iterator

from ..config.MacprefsConfig import MacprefsConfig
from ..StageResult import StageResult
from . import PlanShowOutput
from .PlanCatalog import PlanCatalog


def cmd_show(name: str) -> StageResult:
    """Show the directives of a plan without applying it.

    Args:
        name: Plan name or alias
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading plans...")
        try:
            config = MacprefsConfig.load()
            catalog = PlanCatalog.load(config.plans_dir)
            plan = catalog.get(name)
        except (KeyError, ValueError) as e:
            message = e.args[0] if isinstance(e, KeyError) else str(e)
            yield (1.0, "Complete")
            result_obj.result = f"Error: {message}"
            result_obj.output = PlanShowOutput(
                errors=[message], warnings=[], name="", description="", directives=[], restart_order=[]
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Plan '{plan.name}' has {len(plan.directives)} directive(s)"
        result_obj.output = PlanShowOutput(errors=[], warnings=[], **plan.to_output()).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Showing plan '{name}'...", progress_callback=do_work)
