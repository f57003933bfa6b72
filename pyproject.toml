[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "divastore"
version = "0.1.0"
description = "Load a day's recorded driving-sensor JSON exports into relational database tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["sensor data", "driving dataset", "json", "database", "sqlite", "import", "lidar", "gps", "imu"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
divastore = "divastore.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["divastore"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
