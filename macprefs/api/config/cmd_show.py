"""Show configuration command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import ConfigShowOutput
from .MacprefsConfig import MacprefsConfig


def cmd_show(section: str = "") -> StageResult:
    """Show configuration section or list all sections.

    Args:
        section: Section name. Empty string lists all section names, otherwise returns specific section.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        config_path = MacprefsConfig.get_config_path()
        try:
            config = MacprefsConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to load configuration: {e}"
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                warnings=[],
                section=section,
                content={},
                config_path=str(config_path),
                config_exists=config_path.exists(),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.6, "Processing sections...")
        config_dict = config.to_dict()
        available_sections = list(config_dict.keys())
        warnings = [] if config_path.exists() else [f"No config file at {config_path}; showing defaults"]

        if section == "":
            content: dict = {"sections": available_sections}
            errors: list[str] = []
            message = f"Found {len(available_sections)} section(s)"
        elif section not in available_sections:
            content = {}
            errors = [f"Unknown section: {section}"]
            message = f"Section '{section}' not found"
        else:
            content = config_dict[section]
            errors = []
            message = f"Retrieved configuration for '{section}'"

        yield (1.0, "Complete")
        result_obj.result = message
        result_obj.output = ConfigShowOutput(
            errors=errors,
            warnings=warnings,
            section=section,
            content=content,
            config_path=str(config_path),
            config_exists=config_path.exists(),
        ).model_dump(mode="python")
        result_obj.success = len(errors) == 0

    announce = "Listing configuration sections..." if section == "" else f"Showing configuration for section '{section}'..."
    return StageResult(announce=announce, progress_callback=do_work)
