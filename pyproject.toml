[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shlexer"
version = "0.1.0"
description = "A small shell command-line lexer: quote-aware splitting, tokenizing, token typing and variable expansion"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "lexer", "tokenizer", "parsing", "expansion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shlexer = "shlexer.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["shlexer"]

[tool.pytest.ini_options]
addopts = "-ra"
