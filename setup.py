from pathlib import Path

from setuptools import find_packages, setup


def parse_requirements(filename):
    """Load requirements from a pip requirements file."""
    with (Path(__file__).parent / filename).open('r', encoding='utf-8') as file:
        lines = file.read().splitlines()
    return [line for line in lines if line and not line.startswith("#")]


setup(
    name="avlmap",
    version="0.1.0",
    description="An ordered key-value map backed by an AVL tree with a caller-supplied comparator.",
    long_description=(Path(__file__).parent / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["avlmap", "avlmap.*"]),
    install_requires=parse_requirements("requirements.txt"),  # Dynamically read dependencies
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.7",
    license="Apache 2.0"
)
