from pathlib import Path

# Every module under a testlib `fixtures` package is loaded as a plugin, so its fixtures are shared by all tests.
pytest_plugins = sorted(
    ".".join(path.with_suffix("").parts)
    for path in Path("testlib").glob("**/fixtures/*.py")
    if not path.name.startswith("__")
)
