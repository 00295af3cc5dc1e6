[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trasamiasta"
version = "0.1.0"
description = "Shortest road routes between Polish cities, with a small map window"
requires-python = ">=3.10"
dependencies = []
keywords = ["dijkstra", "shortest path", "road map", "cities", "routing", "graph"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Polish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
trasamiasta = "trasamiasta.app:main"

[tool.hatch.build.targets.wheel]
packages = ["trasamiasta"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
