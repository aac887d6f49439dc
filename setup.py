"""Setup script for patient-lookup package following Cosmic Python pattern."""

from setuptools import setup, find_namespace_packages

setup(
    name="patient-lookup",
    version="1.0.0",
    description="Patient Lookup Service - read-only patient demographics API",
    author="Patient Lookup Team",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["patient_lookup*", "shared*"]),
    py_modules=["config"],
    python_requires=">=3.11",
    install_requires=[
        "fastapi",
        "uvicorn[standard]",
        "pydantic>=2",
    ],
    extras_require={
        "test": [
            "pytest>=7",
            "pytest-cov",
            "httpx",
        ],
        "dev": [
            "black",
            "flake8",
            "mypy",
            "pre-commit",
        ],
    },
    entry_points={
        "console_scripts": [
            "patient-lookup-api=patient_lookup.entrypoints.patient_api:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Healthcare Industry",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Medical Science Apps.",
    ],
)
