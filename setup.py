from setuptools import find_packages, setup

setup(
    name="macprefs",
    version="0.1.0",
    description="macprefs - declarative, idempotent macOS preference plans",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # CLI framework
        "pydantic>=2",  # Config, plan and output schemas
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
        "pygments",  # Output highlighting on a TTY
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "macprefs=macprefs.cli:main",
        ],
    },
)
