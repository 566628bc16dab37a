from setuptools import find_packages, setup

"""
# Usage instructions
#
# To install the package
#   'pip install .'
#
# To install in development mode with the test dependencies
#   'pip install -e .[test]'
"""

setup(
    name="benchlite",
    version="0.1.0",
    description="Lightweight calibrated micro-benchmarking harness",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "numpy",
        "msgspec>=0.18",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
