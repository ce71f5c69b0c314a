[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "floppyviz"
version = "1.0.0"
description = "Animated model of a 5.25-inch floppy disk drive and a WD1793 disk controller's register panel"
requires-python = ">=3.10"
dependencies = []
keywords = ["floppy", "disk", "fdc", "wd1793", "visualization", "animation", "retrocomputing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
floppyviz = "floppyviz.app:main"

[tool.hatch.build.targets.wheel]
packages = ["floppyviz"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
