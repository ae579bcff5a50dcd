"""Health verification command - probes the service over HTTP."""

import logging
from collections.abc import Iterator

import requests

from .._output_schemas.verify import VerifyHealthOutput
from ..config.MRSetupConfig import MRSetupConfig
from ..StageResult import StageResult

logger = logging.getLogger(__name__)


def cmd_health() -> StageResult:
    """GET the service's models endpoint and require a 2xx answer."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        config = MRSetupConfig.load()
        port = config.service.data.port  # type: ignore[attr-defined]
        log_path = config.service.data.log_path  # type: ignore[attr-defined]
        url = f"http://localhost:{port}{config.verify.health_path}"

        yield (0.4, f"Requesting {url}...")
        status_code = 0
        error = ""
        try:
            response = requests.get(url, timeout=config.verify.http_timeout_secs)
            status_code = response.status_code
            response.raise_for_status()
        except requests.RequestException as e:
            error = str(e)
            logger.warning("Health probe of %s failed: %s", url, e)

        yield (1.0, "Complete")
        responding = not error and 200 <= status_code < 300
        if responding:
            result_obj.result = f"Service is responding on port {port}"
            errors: list[str] = []
        else:
            result_obj.result = f"Service is not responding. Check logs at: {log_path}"
            errors = [error or f"HTTP {status_code}"]
        result_obj.output = VerifyHealthOutput(
            errors=errors,
            warnings=[],
            url=url,
            status_code=status_code,
            responding=responding,
        ).model_dump(mode="python")
        result_obj.success = responding

    return StageResult(
        announce="Testing model-runner service...",
        progress_callback=do_work,
    )
