[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sketchbook"
version = "0.1.0"
description = "Small programming exercises: a Morse tree, a Brainfuck interpreter, an SVG clock, line input, pancake sort, conic sections and a world map."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "morse",
    "brainfuck",
    "interpreter",
    "svg",
    "clock",
    "pancake-sort",
    "conic-sections",
    "world-map",
    "exercises",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sketchbook-morse = "sketchbook.morse:main"
sketchbook-brainfuck = "sketchbook.brainfuck:main"
sketchbook-clock = "sketchbook.clock:main"
sketchbook-readline = "sketchbook.lineinput:main"
sketchbook-pancake = "sketchbook.pancake:main"
sketchbook-conics = "sketchbook.conics:main"
sketchbook-earthmap = "sketchbook.earthmap:main"

[tool.hatch.build.targets.wheel]
packages = ["sketchbook"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
