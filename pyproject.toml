[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "careerguide"
version = "0.1.0"
description = "Interactive console career guide: build a profile, browse and search careers, and get ranked recommendations."
requires-python = ">=3.10"
dependencies = []
keywords = ["career", "recommendation", "console", "search", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
careerguide = "careerguide.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["careerguide"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
