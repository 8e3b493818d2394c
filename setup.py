"""Setup script for grayprep package."""

from setuptools import setup, find_packages

setup(
    name="grayprep",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.21.0",
        "opencv-python>=4.5.0",
        "pyyaml>=6.0",
        "click>=8.0",
        "tqdm>=4.60",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "grayprep-prepare=grayprep.cli.prepare:main",
            "grayprep-restore=grayprep.cli.restore:main",
        ],
    },
)
