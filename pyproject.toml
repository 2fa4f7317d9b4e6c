[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ferrule"
version = "0.1.0"
description = "A terminal runner for small graded exercises: compile, test, lint and track your progress."
requires-python = ">=3.11"
keywords = ["exercises", "learning", "education", "tutorial", "compiler", "watch"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]
dependencies = [
    "rich",
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ferrule = "ferrule.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ferrule"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
