from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="wgraph",
    version="0.1.0",
    description=(
        "Generic weighted-graph engine: BFS depth, connected components, "
        "shortest paths and minimum spanning trees."
    ),
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.10",
    install_requires=["numpy", "networkx"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["wgraph=wgraph.cli:main"]},
)
