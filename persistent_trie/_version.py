import os

version = None

if version is None:
    # When installed with pip - Fetch version from the distribution metadata
    try:
        from importlib.metadata import version as distribution_version

        module_name = __name__.split(".", 1)[0]
        version = distribution_version(module_name.replace("_", "-"))
    except Exception:  # noqa: S110
        pass

if version is None:
    # When running directly from the SCM repo - Fetch version with setuptools_scm
    try:
        from setuptools_scm import get_version

        version = get_version(root=os.path.join(os.path.dirname(__file__), os.pardir))
    except Exception:  # noqa: S110
        pass

if version is None:
    # When version.txt file is available - use that
    try:
        with open(os.path.join(os.path.dirname(__file__), "version.txt")) as fp:
            version = fp.read().strip()
    except Exception:  # noqa: S110
        pass
