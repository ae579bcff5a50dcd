"""Shell configure command - exports MODEL_RUNNER_HOST from the shell profile."""

import logging
import os
from collections.abc import Iterator

from .._output_schemas.shell import ShellConfigureOutput
from ..config.MRSetupConfig import MRSetupConfig
from ..StageResult import StageResult
from ._detect_rc_file import _detect_rc_file

logger = logging.getLogger(__name__)


def cmd_configure() -> StageResult:
    """Append the export block to the shell startup file unless the variable is already there.

    The variable is also set for the current process.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        config = MRSetupConfig.load()
        env_var = config.shell.env_var
        value = config.host_url

        yield (0.3, "Detecting shell startup file...")
        rc_file = _detect_rc_file(config.shell)
        warnings: list[str] = []
        appended = False

        if rc_file is None:
            warnings.append(f"Could not detect a zsh or bash startup file; export {env_var}={value} manually")
            result_obj.result = f"{env_var} set for this session only"
        else:
            yield (0.6, f"Checking {rc_file}...")
            try:
                # Profiles may hold bytes that are not UTF-8; keep them intact
                existing = (
                    rc_file.read_text(encoding="utf-8", errors="surrogateescape") if rc_file.exists() else ""
                )
                if env_var in existing:
                    result_obj.result = f"{env_var} already configured in shell profile"
                else:
                    block = f"\n{config.shell.comment}\nexport {env_var}=\"{value}\"\n"
                    if existing and not existing.endswith("\n"):
                        block = "\n" + block
                    rc_file.parent.mkdir(parents=True, exist_ok=True)
                    with rc_file.open("a", encoding="utf-8") as fh:
                        fh.write(block)
                    appended = True
                    logger.info("Added %s to %s", env_var, rc_file)
                    warnings.append(f"Run 'source {rc_file}' or restart your terminal to apply")
                    result_obj.result = f"Added {env_var} to {rc_file}"
            except OSError as e:
                logger.error("Failed to update %s: %s", rc_file, e)
                yield (1.0, "Complete")
                result_obj.result = f"Failed to update {rc_file}: {e}"
                result_obj.output = ShellConfigureOutput(
                    errors=[str(e)],
                    warnings=warnings,
                    rc_file=str(rc_file),
                    env_var=env_var,
                    value=value,
                    appended=False,
                ).model_dump(mode="python")
                result_obj.success = False
                return

        os.environ[env_var] = value

        yield (1.0, "Complete")
        result_obj.output = ShellConfigureOutput(
            errors=[],
            warnings=warnings,
            rc_file=str(rc_file) if rc_file else "",
            env_var=env_var,
            value=value,
            appended=appended,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Configuring Docker CLI to use host model-runner...",
        progress_callback=do_work,
    )
