from setuptools import find_packages, setup

setup(
    name="linky",
    version="0.1.0",
    description="Extract links from Markdown files and check their targets and anchors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # Command-line interface (0.26+ vendors click; main() catches click exceptions)
        "click",  # Usage-error handling in main()
        "pydantic>=2",  # Configuration models
        "requests",  # HTTP retrieval of link targets
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-requests",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "linky=linky.cli:main",
        ],
    },
)
