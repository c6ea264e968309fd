[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridmdp"
version = "0.1.0"
description = "Grid-world Markov decision process: value iteration, robustness checks and robot navigation simulation"
requires-python = ">=3.10"
keywords = ["mdp", "value-iteration", "reinforcement-learning", "gridworld", "robotics", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = [
    "numpy",
    "matplotlib",
    "pygame",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gridmdp = "gridmdp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gridmdp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
