"""model-runner binary: build from source or download a release."""
