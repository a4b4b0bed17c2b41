"""
setuptools setup script for template-manager.

Usage:
    # Development install (editable):
    pip install -e ".[dev]"

    # Then browse templates from the directory that holds them:
    template-manager --content-root /path/to/templates list --owner sameer

Notes:
- Sources live under src/ (src layout)
- Test dependencies are in the "dev" extra
"""

from setuptools import find_packages, setup

setup(
    name="template-manager",
    version="0.1.0",
    description="Browse, search and copy HTML/text snippet templates",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["template_manager", "template_manager.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "httpx>=0.25",
        "typer>=0.9",
        "rich>=13.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4",
            "pytest-asyncio>=0.21",
        ],
    },
    entry_points={
        "console_scripts": [
            "template-manager=template_manager.cli:main",
        ],
    },
)
