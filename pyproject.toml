[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skyrunner"
version = "0.1.0"
description = "A finite side-scrolling runner game: collect coins, jump over monsters and bombs, reach the end of the map."
requires-python = ">=3.10"
keywords = ["game", "runner", "side-scroller", "arcade", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
skyrunner = "skyrunner.app:main"

[tool.hatch.build.targets.wheel]
packages = ["skyrunner"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
