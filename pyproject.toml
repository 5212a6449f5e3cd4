[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "carrental"
version = "0.1.0"
description = "Vehicle rental model: clients, client tiers, vehicles and rent pricing"
requires-python = ">=3.10"
dependencies = []
keywords = ["rental", "vehicle", "car", "pricing", "discount"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "freezegun",
]

[project.scripts]
carrental-intro = "carrental.intro:main"
carrental-demo = "carrental.compact.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["carrental"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
