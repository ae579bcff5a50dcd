"""Usage command - renders the quick-start and troubleshooting guide."""

from collections.abc import Iterator

from ...templating import render_template
from .._output_schemas.setup import SetupUsageOutput
from ..config.MRSetupConfig import MRSetupConfig
from ..StageResult import StageResult
from ._usage_template import USAGE_TEMPLATE

EXAMPLE_MODEL = "ai/llama3.2:3b-instruct-q4_K_M"

# Name under which Lima VMs reach the macOS host
CONTAINER_HOST = "host.lima.internal"


def render_usage(config: MRSetupConfig) -> str:
    """Fill the usage guide with the configured port, label and paths."""
    data = config.service.data
    plist_path = f"~/Library/LaunchAgents/{data.label}.plist"  # type: ignore[attr-defined]
    return render_template(
        USAGE_TEMPLATE,
        {
            "model": EXAMPLE_MODEL,
            "container_host": CONTAINER_HOST,
            "port": data.port,  # type: ignore[attr-defined]
            "host_url": config.host_url,
            "label": data.label,  # type: ignore[attr-defined]
            "plist_path": plist_path,
            "log_path": data.log_file,  # type: ignore[attr-defined]
            "repo_url": config.binary.repo_url if config.binary.source == "build" else "",
        },
    )


def cmd_usage() -> StageResult:
    """Show how to use the installed model-runner."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Loading configuration...")
        config = MRSetupConfig.load()

        yield (1.0, "Complete")
        result_obj.result = "Usage guide rendered"
        result_obj.output = SetupUsageOutput(errors=[], warnings=[], usage=render_usage(config)).model_dump(
            mode="python"
        )
        result_obj.success = True

    return StageResult(
        announce="Rendering usage guide...",
        progress_callback=do_work,
    )
