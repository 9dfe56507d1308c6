"""Plan list command - built-in and user plans."""

from collections.abc import Iterator

from ..config.MacprefsConfig import MacprefsConfig
from ..StageResult import StageResult
from . import PlanListOutput
from .PlanCatalog import PlanCatalog


def cmd_list() -> StageResult:
    """List every plan available by name."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = MacprefsConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to load configuration: {e}"
            result_obj.output = PlanListOutput(
                errors=[str(e)], warnings=[], plans=[], plans_dir=""
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.5, "Reading plans...")
        catalog = PlanCatalog.load(config.plans_dir)

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(catalog.plans)} plan(s)"
        # Broken user plan files do not hide the usable ones
        result_obj.output = PlanListOutput(
            errors=[],
            warnings=list(catalog.errors),
            plans=catalog.to_output(),
            plans_dir=str(config.plans_dir),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Listing plans...", progress_callback=do_work)
