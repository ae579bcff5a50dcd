"""Shell unconfigure command - removes the MODEL_RUNNER_HOST export block."""

from collections.abc import Iterator

from .._output_schemas.shell import ShellUnconfigureOutput
from ..config.MRSetupConfig import MRSetupConfig
from ..StageResult import StageResult
from ._detect_rc_file import _detect_rc_file


def _strip_block(lines: list[str], env_var: str, comment: str) -> list[str]:
    """Drop ``export VAR=...`` lines with their comment and the blank line before it."""
    kept: list[str] = []
    for line in lines:
        if line.strip().startswith(f"export {env_var}="):
            if kept and kept[-1].strip() == comment.strip():
                kept.pop()
            if kept and not kept[-1].strip():
                kept.pop()
            continue
        kept.append(line)
    return kept


def cmd_unconfigure() -> StageResult:
    """Remove the export block written by 'shell configure'."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        config = MRSetupConfig.load()
        env_var = config.shell.env_var
        rc_file = _detect_rc_file(config.shell)

        if rc_file is None or not rc_file.exists():
            yield (1.0, "Complete")
            result_obj.result = "No shell startup file found; nothing to remove"
            result_obj.output = ShellUnconfigureOutput(
                errors=[], warnings=[], rc_file=str(rc_file) if rc_file else "", env_var=env_var, removed=False
            ).model_dump(mode="python")
            result_obj.success = True
            return

        yield (0.6, f"Editing {rc_file}...")
        try:
            # surrogateescape writes undecodable bytes back unchanged
            lines = rc_file.read_text(encoding="utf-8", errors="surrogateescape").splitlines(keepends=True)
            kept = _strip_block(lines, env_var, config.shell.comment)
            removed = len(kept) != len(lines)
            if removed:
                rc_file.write_text("".join(kept), encoding="utf-8", errors="surrogateescape")
        except OSError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to update {rc_file}: {e}"
            result_obj.output = ShellUnconfigureOutput(
                errors=[str(e)], warnings=[], rc_file=str(rc_file), env_var=env_var, removed=False
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Removed {env_var} from {rc_file}" if removed else f"{env_var} not found in {rc_file}"
        result_obj.output = ShellUnconfigureOutput(
            errors=[], warnings=[], rc_file=str(rc_file), env_var=env_var, removed=removed
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Removing MODEL_RUNNER_HOST from shell profile...",
        progress_callback=do_work,
    )
