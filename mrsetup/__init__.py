"""mrsetup - GPU-accelerated model-runner on macOS with Colima."""
