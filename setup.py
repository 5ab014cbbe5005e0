"""
Setup configuration for i3-snapshot.

Save and restore window containment (output / workspace) in i3 and sway.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read long description from README if it exists
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text() if readme_file.exists() else ""

setup(
    name="i3-snapshot",
    version="0.2.0",
    description="Save and restore window placement across outputs and workspaces in i3/sway",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click",
        "i3ipc>=2.2",
        "pydantic>=2",
        "rich",
    ],
    python_requires=">=3.11",
    entry_points={
        "console_scripts": [
            "i3-snapshot=i3_snapshot.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: X11 Applications",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
)
