"""Shell startup file integration (MODEL_RUNNER_HOST)."""
