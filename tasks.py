#!/usr/bin/env python3
"""Invoke tasks for lut-color-cube development."""

import re
import shutil
import sys
from pathlib import Path

from invoke.context import Context
from invoke.tasks import task

# Emoji output needs UTF-8 on the Windows console
if sys.platform == "win32":
    if sys.stdout.encoding != "utf-8":
        sys.stdout.reconfigure(encoding="utf-8")
    if sys.stderr.encoding != "utf-8":
        sys.stderr.reconfigure(encoding="utf-8")

PACKAGE = "lut_color_cube"
VERSION_FILES = {
    Path("pyproject.toml"): re.compile(r'^(version = ")([^"]+)(")', re.MULTILINE),
    Path(f"src/{PACKAGE}/__init__.py"): re.compile(
        r'^(__version__ = ")([^"]+)(")', re.MULTILINE
    ),
}
CLEAN_PATTERNS = [
    "build",
    "dist",
    "*.egg-info",
    ".pytest_cache",
    ".ruff_cache",
    ".coverage",
    "coverage.xml",
    "htmlcov",
    "__pycache__",
]


@task
def clean(_: Context) -> None:
    """Remove build output and tool caches."""
    print("🧹 Cleaning build artifacts and caches...")
    for pattern in CLEAN_PATTERNS:
        for path in Path(".").glob(f"**/{pattern}"):
            print(f"  Removing {path}")
            if path.is_dir():
                shutil.rmtree(path, ignore_errors=True)
            else:
                path.unlink(missing_ok=True)
    print("✅ Clean completed")


@task
def format(ctx: Context) -> None:
    """Format code with ruff."""
    print("🎨 Formatting with ruff...")
    ctx.run("ruff format src tests docs/examples tasks.py")
    print("✅ Formatting completed")


@task
def lint(ctx: Context, fix: bool = False) -> None:
    """Lint code with ruff.

    Args:
        fix: Apply ruff's automatic fixes (default: False)
    """
    print("🔍 Linting with ruff...")
    ctx.run("ruff check src tests" + (" --fix" if fix else ""))
    print("✅ Linting completed")


@task
def typecheck(ctx: Context) -> None:
    """Type check the package with pyright."""
    print("🔬 Type checking with pyright...")
    ctx.run(f"pyright src/{PACKAGE}")
    print("✅ Type checking completed")


@task
def spell(ctx: Context, fix: bool = False) -> None:
    """Spell check with codespell.

    Args:
        fix: Write corrections back to the files (default: False)
    """
    print("📝 Spell checking with codespell...")
    ctx.run("codespell" + (" --write-changes" if fix else ""))
    print("✅ Spell checking completed")


@task(pre=[format, lint, typecheck, spell])
def quality(_: Context) -> None:
    """Run formatting, linting, type checking and spell checking."""
    print("🎯 Quality checks completed")


@task
def test(ctx: Context, coverage: bool = True, verbose: bool = False) -> None:
    """Run the test suite with pytest.

    Args:
        coverage: Report coverage for the package (default: True)
        verbose: Verbose pytest output (default: False)
    """
    print("🧪 Running tests...")
    cmd = "pytest tests"
    if coverage:
        cmd += f" --cov={PACKAGE} --cov-report=term-missing --cov-report=xml"
    if verbose:
        cmd += " -v"
    ctx.run(cmd)
    print("✅ Tests completed")


@task(pre=[clean])
def build(ctx: Context) -> None:
    """Build the sdist and wheel."""
    print("🔨 Building package...")
    ctx.run("uv build")
    for file in sorted(Path("dist").glob("*")):
        print(f"  📦 {file.name} ({file.stat().st_size / 1024:.1f}K)")
    print("✅ Build completed")


def _set_version(version: str) -> None:
    for path, pattern in VERSION_FILES.items():
        content = path.read_text()
        match = pattern.search(content)
        if match is None:
            raise SystemExit(f"❌ No version found in {path}")
        path.write_text(pattern.sub(rf"\g<1>{version}\g<3>", content, count=1))
        print(f"  {path}: {match.group(2)} -> {version}")


@task
def release(ctx: Context, version: str = "") -> None:
    """Set the version everywhere, run quality checks and tests, then build.

    Args:
        version: New version number (e.g. "0.2.0")
    """
    if not version:
        print("❌ Version number required. Usage: invoke release --version=0.2.0")
        return

    print(f"🚀 Preparing release {version}...")
    _set_version(version)
    quality(ctx)
    test(ctx)
    build(ctx)
    print(f"✅ Release {version} built. Tag it with: git tag v{version}")


@task
def demo(ctx: Context) -> None:
    """Write an identity atlas and run the blend example."""
    print("🎬 Running package demo...")
    Path("build").mkdir(exist_ok=True)

    print("\n🧊 Writing identity atlas:")
    ctx.run("lut-color-cube --info-logging identity build/Identity.png")

    print("\n🔧 Blending a desaturation atlas:")
    ctx.run("python docs/examples/blend_effect_atlas.py")
    print("✅ Demo completed")
