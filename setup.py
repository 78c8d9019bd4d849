from pathlib import Path

from setuptools import find_packages, setup

BASE_DIR = Path(__file__).parent.resolve()
PACKAGE_NAME = "corpo_tokens"


def _read_version() -> str:
    init_path = BASE_DIR / PACKAGE_NAME / "__init__.py"
    for raw_line in init_path.read_text(encoding="utf-8").splitlines():
        if raw_line.startswith("__version__"):
            return raw_line.split("=", 1)[1].strip().strip('"').strip("'")
    raise RuntimeError(f"No se encontró __version__ en {init_path}")


base_requires = [
    "PyYAML>=6.0",
]
test_requires = [
    "pytest>=8.0",
]

setup(
    name="corpo-tokens",
    version=_read_version(),
    description="Configurable design tokens with WCAG contrast and color-blindness utilities",
    packages=find_packages(exclude=("tests", "tests.*", "docs")),
    include_package_data=False,
    python_requires=">=3.10",
    install_requires=base_requires,
    extras_require={"test": test_requires},
    entry_points={
        "console_scripts": [
            "corpo-tokens=corpo_tokens.cli.app:main",
        ]
    },
)
