"""Setup script for the datepicker engine."""

from pathlib import Path

from setuptools import find_packages, setup

# Read the README file
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

# Read requirements, separating test tooling from runtime dependencies
requirements_file = Path(__file__).parent / "requirements.txt"
requirements = []
dev_requirements = []

if requirements_file.exists():
    content = requirements_file.read_text().strip()
    lines = content.split("\n")

    for line in lines:
        line = line.strip()
        # Skip empty lines and comments
        if not line or line.startswith("#"):
            continue

        # Separate development dependencies
        if "pytest" in line or "development" in line.lower() or "testing" in line.lower():
            dev_requirements.append(line)
        else:
            requirements.append(line)

setup(
    name="datepicker-engine",
    version="1.0.0",
    description="Embeddable month-calendar date picker engine with locale-aware grids "
    "and keyboard, mouse and touch interaction state",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Datepicker Team",
    # Package configuration
    packages=find_packages(exclude=["tests*", "docs*"]),
    include_package_data=True,
    # Dependencies
    install_requires=requirements,
    extras_require={
        "dev": dev_requirements,
        "test": dev_requirements,
    },
    # Python version requirement
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: User Interfaces",
    ],
    keywords="calendar datepicker widget locale keyboard accessibility",
    # Entry points
    entry_points={
        "console_scripts": [
            "datepicker=datepicker.cli:main",
        ],
    },
    # Package data
    package_data={
        "datepicker": [
            "locale/locales.yaml",
        ],
    },
    zip_safe=False,
)
