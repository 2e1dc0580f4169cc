[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contestkit"
version = "0.9.5"
description = "Patterns, a reproducible random generator, strict number parsing and reference solutions for programming-contest problems"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "competitive-programming",
    "test-generator",
    "validator",
    "random",
    "pattern",
    "contest",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
    "Topic :: Education :: Testing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
contestkit-divisor-pairs = "contestkit.solutions.divisor_pairs:main"
contestkit-cut-partition = "contestkit.solutions.cut_partition:main"
contestkit-branch-split = "contestkit.solutions.branch_split:main"
contestkit-fold-areas = "contestkit.solutions.fold_areas:main"
contestkit-two-chains = "contestkit.solutions.two_chains:main"
contestkit-close-points = "contestkit.solutions.close_points:main"
contestkit-huffman-codes = "contestkit.solutions.huffman_codes:main"
contestkit-quotation = "contestkit.solutions.quotation:main"
contestkit-circle-cover = "contestkit.solutions.circle_cover:main"

[tool.hatch.build.targets.wheel]
packages = ["contestkit"]

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
warn_redundant_casts = true
