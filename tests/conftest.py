"""Global pytest fixtures for SORTKIT."""

pytest_plugins = [
    "tests.fixtures.datagen",
]
