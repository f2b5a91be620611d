# setup.py
from __future__ import annotations

from pathlib import Path
from setuptools import setup, find_packages

README = Path(__file__).with_name("README.md")
long_description = README.read_text(encoding="utf-8") if README.exists() else ""
PACKAGE_NAME = "cachetck"

install_requires = [
    "pytest>=8.0",
    "typer>=0.9",
    "rich>=13.0",
    "appdirs>=1.4.4",
]

extras_require = {
    "tests": [
        "pytest>=8.4.1",
        "pytest-cov>=5.0.0",
    ],
    "dev": [
        "black>=24.3.0",
        "ruff>=0.4.0",
        "mypy>=1.8.0",
        "build>=1.0.0",
    ],
}

setup(
    name=PACKAGE_NAME,
    version="0.1.0",
    description="Setup and teardown helpers for caching (JSR-107 style) compliance test suites.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="Apache-2.0",
    packages=find_packages(exclude=("tests", "tests.*")),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=install_requires,
    extras_require=extras_require,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Framework :: Pytest",
        "Topic :: Software Development :: Testing",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    keywords=["jcache", "jsr107", "tck", "pytest", "caching", "testing"],
    entry_points={
        "console_scripts": [
            "cachetck=cachetck.cli.main:app",
        ],
        "cachetck.caching_providers": [
            "cluster=cachetck.cluster.provider:ClusterCachingProvider",
        ],
    },
    zip_safe=False,
)
