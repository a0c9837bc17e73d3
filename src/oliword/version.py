from importlib.metadata import PackageNotFoundError, version

try:
    version = version("Oliword")
except PackageNotFoundError:
    version = "0.0.0"
