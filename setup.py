from setuptools import find_packages, setup

setup(
    name="citekit",
    version="0.3.0",
    description="Citation validation and cited-content extraction for markdown knowledge bases",
    packages=find_packages(include=["citekit", "citekit.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich",  # Terminal formatting
        "typer",  # CLI
        "click>=8.1",  # Usage errors raised through typer
        "pydantic>=2",  # Config and output schemas
        "pyyaml",  # YAML output
        "markdown-it-py>=3",  # Markdown tokenizer
        "rapidfuzz>=3",  # Anchor and filename similarity
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-asyncio>=0.23",  # Coroutine tests
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "citekit=citekit.cli:main",
        ],
    },
)
