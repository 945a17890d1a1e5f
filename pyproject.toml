[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glycoseq"
version = "0.1.0"
description = "N-glycan structure enumeration and scoring, FDR and significance filtering of glycopeptide search results"
requires-python = ">=3.10"
dependencies = []
keywords = ["glycoproteomics", "mass spectrometry", "glycopeptide", "glycan", "fdr"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["glycoseq"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
