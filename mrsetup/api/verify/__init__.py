"""Post-install checks: GPU detection, HTTP liveness, docker model CLI."""
