[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sampleshifter"
version = "0.1.0"
description = "Scan, categorize and organize audio sample files into folders by name"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "samples", "organizer", "music-production", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sample-shifter = "sampleshifter.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sampleshifter"]

[tool.pytest.ini_options]
addopts = "-ra"
