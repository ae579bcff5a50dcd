from setuptools import find_packages, setup

setup(
    name="mrsetup",
    version="0.1.0",
    description="Docker Model Runner with Metal GPU acceleration for Colima on Apple Silicon",
    packages=find_packages(include=["mrsetup", "mrsetup.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",  # Configuration and output schemas
        "typer<0.26",  # CLI; 0.26+ vendors click, hiding its context from click.get_current_context
        "click",  # Typer's context and exceptions
        "rich",  # Terminal formatting
        "jinja2",  # LaunchAgent plist and usage guide templates
        "requests",  # Health probe and binary download
        "pyyaml",  # YAML output
        "pygments",  # Output syntax highlighting
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "mrsetup=mrsetup.cli:main",
            "setup-colima-gpu-model-runner=mrsetup.cli:setup_main",
            "uninstall-model-runner=mrsetup.cli:uninstall_main",
        ],
    },
)
