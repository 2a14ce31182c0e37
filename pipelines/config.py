from __future__ import annotations

import pathlib

# Packaging
MAIN_PACKAGE = "cvscope"
TEST_PACKAGE = "tests"

# Directories
ARTIFACT_DIRECTORY = "public"

# Linting and test configs
PYPROJECT_TOML = "pyproject.toml"
COVERAGE_HTML_PATH = pathlib.Path(ARTIFACT_DIRECTORY, "coverage", "html")

PYTHON_LINT_PATHS = (MAIN_PACKAGE, TEST_PACKAGE, "pipelines", "noxfile.py")
